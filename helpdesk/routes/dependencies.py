"""Shared route dependencies."""

from fastapi import Request

from helpdesk.agent import SupportAgent


async def get_support_agent(request: Request) -> SupportAgent:
    return request.app.state.agent
