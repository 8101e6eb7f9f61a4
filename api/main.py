"""
api/main.py — FastAPI entry point.

Lifespan:
  - Builds the (stateless) BooleanEvaluator from Settings once
  - Nothing to tear down: the service keeps no connections or caches

Every ExpressionError (syntax, lexing, binding, value) is a client input
error and is mapped to HTTP 400 with a structured ErrorDetail body.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from adapters.evaluator import BooleanEvaluator
from api.routers import evaluate, parse, validate
from api.schemas import ErrorResponse, HealthResponse
from config import Settings
from contracts import ExpressionError

logger = logging.getLogger("logexp")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings

    app.state.evaluator = BooleanEvaluator.from_settings(settings)

    logger.info(
        "LogExp API ready (max_expression_length=%d, max_nesting_depth=%d).",
        settings.max_expression_length,
        settings.max_nesting_depth,
    )
    yield

    logger.info("Shutting down.")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Routers
    app.include_router(evaluate.router)
    app.include_router(parse.router)
    app.include_router(validate.router)

    # Health
    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", version=settings.app_version)

    # Global handler for engine errors
    @app.exception_handler(ExpressionError)
    async def expression_error_handler(request: Request, exc: ExpressionError):
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc.kind)
        body = ErrorResponse(error=exc.to_detail())
        return JSONResponse(status_code=400, content=body.model_dump(exclude_none=True))

    return app


app = create_app()
