"""Logging and observability utilities: structured logging, latency tracking and query counters."""

import asyncio
import logging
import time
from contextlib import contextmanager
from functools import wraps
from types import SimpleNamespace
from typing import Callable


def setup_logging(level: int = logging.INFO):
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@contextmanager
def track_latency(operation_name: str, logger: logging.Logger):
    """Log how long the block took; the elapsed time is left on the yielded timing."""
    timing = SimpleNamespace(latency_ms=0.0)
    start = time.perf_counter()
    try:
        yield timing
    except Exception as e:
        timing.latency_ms = (time.perf_counter() - start) * 1000
        logger.error(f"{operation_name} | latency_ms={timing.latency_ms:.2f} | status=error | error={e}")
        raise
    timing.latency_ms = (time.perf_counter() - start) * 1000
    logger.info(f"{operation_name} | latency_ms={timing.latency_ms:.2f} | status=success")


def log_latency(operation_name: str):
    def decorator(func: Callable):
        logger = logging.getLogger(func.__module__)

        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            with track_latency(operation_name, logger):
                return await func(*args, **kwargs)

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            with track_latency(operation_name, logger):
                return func(*args, **kwargs)

        if asyncio.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator


class QueryMetrics:
    def __init__(self):
        self.total_queries = 0
        self.answered_queries = 0
        self.unmatched_queries = 0
        self.rejected_queries = 0
        self.total_latency_ms = 0.0

    def record_query(self, matched: bool, latency_ms: float):
        self.total_queries += 1
        self.total_latency_ms += latency_ms

        if matched:
            self.answered_queries += 1
        else:
            self.unmatched_queries += 1

    def record_rejection(self):
        self.rejected_queries += 1

    def get_stats(self) -> dict:
        avg_latency = self.total_latency_ms / self.total_queries if self.total_queries > 0 else 0
        return {
            "total_queries": self.total_queries,
            "answered_queries": self.answered_queries,
            "unmatched_queries": self.unmatched_queries,
            "rejected_queries": self.rejected_queries,
            "avg_latency_ms": round(avg_latency, 2),
        }
