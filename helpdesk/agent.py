"""Support agent engine: answers validated queries and lists the help-center corpus."""

import asyncio
import logging
from dataclasses import asdict
from datetime import datetime, timezone
from typing import Dict, Optional

from helpdesk.knowledge_base import KNOWLEDGE_BASE, KnowledgeBase
from helpdesk.logging_config import QueryMetrics, log_latency, track_latency
from helpdesk.ranker import classify_category, compose_answer, rank_faqs
from helpdesk.validation import QueryRequest

logger = logging.getLogger(__name__)


class SupportAgent:
    def __init__(self, knowledge_base: KnowledgeBase = KNOWLEDGE_BASE):
        self.knowledge_base = knowledge_base
        self.metrics = QueryMetrics()

        logger.info(
            f"SupportAgent initialized | faqs={len(knowledge_base.faqs)} "
            f"| categories={len(knowledge_base.categories())}"
        )

    def ask(self, request: QueryRequest) -> Dict:
        question = request.question
        faqs = self.knowledge_base.faqs
        logger.info(f"Query received | question_length={len(question)}")

        with track_latency("agent.ask", logger) as timing:
            answer = compose_answer(question, faqs)
            category = classify_category(question, faqs)
            matched = bool(rank_faqs(question, faqs, 1))

        self.metrics.record_query(matched, timing.latency_ms)
        if not matched:
            logger.warning("No relevant FAQ found for query")
        logger.info(f"Query complete | matched={matched} | category={category}")

        return {
            "question": question,
            "answer": answer,
            "category": category,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    async def ask_async(self, request: QueryRequest) -> Dict:
        return await asyncio.to_thread(self.ask, request)

    @log_latency("agent.list_faqs")
    def list_faqs(self, category: Optional[str] = None) -> Dict:
        if category:
            faqs = self.knowledge_base.by_category(category)
            return {
                "category": category,
                "faqs": [asdict(faq) for faq in faqs],
                "total": len(faqs),
            }

        return {
            "title": self.knowledge_base.title,
            "lastUpdated": self.knowledge_base.last_updated,
            "categories": self.knowledge_base.categories(),
            "totalFAQs": len(self.knowledge_base.faqs),
            "faqs": [asdict(faq) for faq in self.knowledge_base.faqs],
        }
