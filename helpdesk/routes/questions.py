"""Support query endpoint and knowledge-base listing."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request

from helpdesk.agent import SupportAgent
from helpdesk.routes.dependencies import get_support_agent
from helpdesk.validation import QueryValidationError, parse_query_request

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/ai", tags=["questions"])


@router.post("/query")
async def query(request: Request, agent: SupportAgent = Depends(get_support_agent)):
    try:
        payload = await request.json()
    except ValueError:
        payload = None

    try:
        parsed = parse_query_request(payload)
    except QueryValidationError as e:
        agent.metrics.record_rejection()
        logger.info(f"Query rejected | kind={e.kind.value}")
        raise

    return await agent.ask_async(parsed)


@router.get("/query")
async def list_faqs(category: Optional[str] = None, agent: SupportAgent = Depends(get_support_agent)):
    return agent.list_faqs(category)
