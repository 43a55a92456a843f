"""Canned response templates used when composing support answers."""

NO_MATCH_ANSWER = """I'm sorry, I couldn't find specific information about "{query}" in my knowledge base.

However, I can help you with questions about:
- Creating an account and logging in
- Creating, editing, and deleting blog posts
- Platform features and security
- Troubleshooting common issues

Could you please rephrase your question or ask about one of these topics?"""

SINGLE_MATCH_CLOSING = "Is there anything else you'd like to know?"

MULTI_MATCH_INTRO = "Here's what I found that might help:"

MULTI_MATCH_SECTION = "**{question}**\n{answer}"

MULTI_MATCH_CLOSING = "Does this answer your question? Feel free to ask for more details!"
