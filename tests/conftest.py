import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))

from helpdesk.knowledge_base import FAQ, KNOWLEDGE_BASE  # noqa: E402
from helpdesk.main import app  # noqa: E402


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def faqs():
    return KNOWLEDGE_BASE.faqs


@pytest.fixture
def make_faq():
    def _make(id, question, answer="unrelated filler text", category="Misc"):
        return FAQ(id=id, category=category, question=question, answer=answer)

    return _make
