"""Liveness endpoint with query counters."""

from fastapi import APIRouter, Depends

from helpdesk.agent import SupportAgent
from helpdesk.routes.dependencies import get_support_agent

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(agent: SupportAgent = Depends(get_support_agent)):
    return {
        "status": "ok",
        "faqs": len(agent.knowledge_base.faqs),
        "metrics": agent.metrics.get_stats(),
    }
