"""Static help-center corpus: FAQ records loaded once and shared read-only."""

from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class FAQ:
    id: int
    category: str
    question: str
    answer: str


@dataclass(frozen=True)
class KnowledgeBase:
    title: str
    last_updated: str
    faqs: Tuple[FAQ, ...]

    def __post_init__(self):
        seen = set()
        for faq in self.faqs:
            if faq.id <= 0:
                raise ValueError(f"FAQ id must be positive: {faq.id}")
            if faq.id in seen:
                raise ValueError(f"Duplicate FAQ id: {faq.id}")
            if not (faq.category and faq.question and faq.answer):
                raise ValueError(f"FAQ {faq.id} has an empty field")
            seen.add(faq.id)

    def categories(self) -> List[str]:
        """Distinct categories in the order they first appear."""
        return list(dict.fromkeys(faq.category for faq in self.faqs))

    def by_category(self, category: str) -> List[FAQ]:
        wanted = category.lower()
        return [faq for faq in self.faqs if faq.category.lower() == wanted]


KNOWLEDGE_BASE = KnowledgeBase(
    title="Mini Blogging Platform - Help Center",
    last_updated="November 2025",
    faqs=(
        FAQ(
            id=1,
            category="Getting Started",
            question="How do I create an account?",
            answer=(
                "To create an account, click on 'Sign Up' in the navigation bar. Fill in your name, email, "
                "and password (minimum 6 characters). Once submitted, you'll be automatically logged in and "
                "can start creating blogs."
            ),
        ),
        FAQ(
            id=2,
            category="Getting Started",
            question="How do I log in?",
            answer=(
                "Click on 'Login' in the navigation bar, enter your registered email and password, then click "
                "'Login'. If you've forgotten your password, please contact support."
            ),
        ),
        FAQ(
            id=3,
            category="Blog Management",
            question="How do I create a blog post?",
            answer=(
                "After logging in, navigate to the 'Blogs' page and click on 'Create New Blog'. Enter a title "
                "and content for your blog post, then click 'Create Blog'. Your blog will be published immediately."
            ),
        ),
        FAQ(
            id=4,
            category="Blog Management",
            question="Can I edit my blog posts?",
            answer=(
                "Yes! Navigate to your blog post by clicking 'Read more' on the blogs page. If you're the author, "
                "you'll see 'Edit' and 'Delete' buttons. Click 'Edit' to modify your blog post, make your changes, "
                "and click 'Save Changes'."
            ),
        ),
        FAQ(
            id=5,
            category="Blog Management",
            question="How do I delete a blog post?",
            answer=(
                "Open your blog post and click the 'Delete' button (only visible to the author). Confirm the "
                "deletion when prompted. This action cannot be undone."
            ),
        ),
        FAQ(
            id=6,
            category="Blog Management",
            question="Can I edit or delete someone else's blog?",
            answer=(
                "No, you can only edit or delete your own blog posts. The Edit and Delete buttons will only "
                "appear on blogs you've authored."
            ),
        ),
        FAQ(
            id=7,
            category="Features",
            question="What features does the platform have?",
            answer=(
                "The platform includes: user authentication (signup/login), blog creation with rich text content, "
                "blog editing and deletion (for authors only), viewing all published blogs with author information, "
                "dark mode support, and responsive design for all devices."
            ),
        ),
        FAQ(
            id=8,
            category="Features",
            question="Is there a character limit for blog posts?",
            answer=(
                "There's no strict character limit, but we recommend keeping your content readable and engaging. "
                "Both title and content fields are required when creating a blog."
            ),
        ),
        FAQ(
            id=9,
            category="Account & Security",
            question="Is my data secure?",
            answer=(
                "Yes! We use industry-standard security practices including password hashing with bcrypt, "
                "JWT-based authentication, HTTP-only cookies, and PostgreSQL database with Prisma ORM to prevent "
                "SQL injection."
            ),
        ),
        FAQ(
            id=10,
            category="Account & Security",
            question="How long does my login session last?",
            answer=(
                "Your login session lasts for 7 days. After that, you'll need to log in again. You can log out "
                "manually at any time by clicking 'Logout' in the navigation bar."
            ),
        ),
        FAQ(
            id=11,
            category="Technical",
            question="What technology is this platform built with?",
            answer=(
                "The platform is built with Next.js 14 (React), TypeScript, Tailwind CSS, PostgreSQL database, "
                "Prisma ORM, JWT authentication, and Zustand for state management."
            ),
        ),
        FAQ(
            id=12,
            category="Technical",
            question="Does the platform support markdown?",
            answer=(
                "Currently, the platform supports plain text with line breaks preserved. Markdown support may be "
                "added in future updates."
            ),
        ),
        FAQ(
            id=13,
            category="Troubleshooting",
            question="I'm getting an 'Unauthorized' error",
            answer=(
                "This means you're not logged in or your session has expired. Please log in again. If you're "
                "trying to create, edit, or delete a blog, make sure you're logged in with the correct account."
            ),
        ),
        FAQ(
            id=14,
            category="Troubleshooting",
            question="My blog post isn't showing up",
            answer=(
                "Make sure you successfully created the blog post (you should see a success message or be "
                "redirected to the blogs page). Refresh the blogs page. If the problem persists, try logging out "
                "and logging back in."
            ),
        ),
        FAQ(
            id=15,
            category="Troubleshooting",
            question="I forgot my password",
            answer=(
                "Currently, there is no automated password recovery. Please contact support for assistance with "
                "resetting your password."
            ),
        ),
        FAQ(
            id=16,
            category="About",
            question="Who can see my blog posts?",
            answer=(
                "All published blog posts are publicly visible to anyone visiting the platform, whether they have "
                "an account or not. However, only you (the author) can edit or delete your posts."
            ),
        ),
        FAQ(
            id=17,
            category="About",
            question="Can I make a blog post private or draft?",
            answer=(
                "Currently, all created blogs are published immediately. Draft and private post features may be "
                "added in future updates."
            ),
        ),
        FAQ(
            id=18,
            category="Support",
            question="How do I contact support?",
            answer=(
                "You can use this AI support agent for immediate help with common questions. For more complex "
                "issues, please reach out through the contact information provided in the application."
            ),
        ),
    ),
)
