"""FastAPI routes package."""

from helpdesk.routes.health import router as health_router
from helpdesk.routes.questions import router as questions_router

__all__ = ["health_router", "questions_router"]
