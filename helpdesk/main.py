"""FastAPI application entrypoint with support agent lifecycle management."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, RedirectResponse

from helpdesk.agent import SupportAgent
from helpdesk.config import APP_TITLE, log_level
from helpdesk.logging_config import setup_logging
from helpdesk.routes import health_router, questions_router
from helpdesk.validation import QueryValidationError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(log_level())
    app.state.agent = SupportAgent()
    yield
    logger.info(f"SupportAgent shutting down | stats={app.state.agent.metrics.get_stats()}")


app = FastAPI(title=APP_TITLE, lifespan=lifespan)

app.include_router(health_router)
app.include_router(questions_router)


@app.exception_handler(QueryValidationError)
async def query_validation_error_handler(request: Request, exc: QueryValidationError):
    return JSONResponse(status_code=400, content={"error": exc.message})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error | path={request.url.path} | error={exc}")
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


@app.get("/")
async def root():
    return RedirectResponse(url="/docs")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("helpdesk.main:app", host="0.0.0.0", port=8000)
