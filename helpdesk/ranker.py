"""
FAQ relevance ranking.

Scores a free-text query against the help-center corpus by token overlap
and assembles a support answer from the best matches. Everything here is a
pure function of its arguments; the corpus is never modified.
"""

from typing import List, Sequence

from helpdesk.knowledge_base import FAQ
from helpdesk.prompts import (
    MULTI_MATCH_CLOSING,
    MULTI_MATCH_INTRO,
    MULTI_MATCH_SECTION,
    NO_MATCH_ANSWER,
    SINGLE_MATCH_CLOSING,
)

QUESTION_WEIGHT = 1.0
ANSWER_WEIGHT = 0.5
CATEGORY_WEIGHT = 0.3

RELEVANCE_THRESHOLD = 0.1
DEFAULT_LIMIT = 3
FALLBACK_CATEGORY = "General"


def tokenize(text: str) -> List[str]:
    return text.lower().split()


def score(query_text: str, candidate_text: str) -> float:
    """Share of query tokens found in the candidate, over the longer token sequence."""
    query_tokens = tokenize(query_text)
    candidate_tokens = tokenize(candidate_text)

    longest = max(len(query_tokens), len(candidate_tokens))
    if longest == 0:
        return 0.0

    vocabulary = set(candidate_tokens)
    matches = sum(1 for token in query_tokens if token in vocabulary)
    return matches / longest


def composite_score(query: str, faq: FAQ) -> float:
    return (
        QUESTION_WEIGHT * score(query, faq.question)
        + ANSWER_WEIGHT * score(query, faq.answer)
        + CATEGORY_WEIGHT * score(query, faq.category)
    )


def rank_faqs(query: str, faqs: Sequence[FAQ], limit: int = DEFAULT_LIMIT) -> List[FAQ]:
    """
    Return up to ``limit`` FAQs ordered by composite score.

    The sort is stable, so equal scores keep corpus order. The relevance
    threshold is applied after truncation, which can leave fewer than
    ``limit`` results.
    """
    scored = [(composite_score(query, faq), faq) for faq in faqs]
    scored.sort(key=lambda item: item[0], reverse=True)

    return [faq for value, faq in scored[:max(limit, 0)] if value > RELEVANCE_THRESHOLD]


def compose_answer(query: str, faqs: Sequence[FAQ]) -> str:
    matches = rank_faqs(query, faqs, DEFAULT_LIMIT)

    if not matches:
        return NO_MATCH_ANSWER.format(query=query)

    if len(matches) == 1:
        return f"{matches[0].answer}\n\n{SINGLE_MATCH_CLOSING}"

    sections = [MULTI_MATCH_SECTION.format(question=faq.question, answer=faq.answer) for faq in matches]
    return "\n\n".join([MULTI_MATCH_INTRO, *sections, MULTI_MATCH_CLOSING])


def classify_category(query: str, faqs: Sequence[FAQ]) -> str:
    best = rank_faqs(query, faqs, 1)
    return best[0].category if best else FALLBACK_CATEGORY
