"""
SkillSwap API - FastAPI Application Entry Point.

Presentation and client-state service for a skill-bartering marketplace.
Marketplace state lives in the remote actor; this service caches actor
reads and serves page-shaped views to the browser client.
"""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from skillswap.core.actor import ActorClient
from skillswap.core.cache import QueryCache
from skillswap.core.config import settings
from skillswap.core.exceptions import APIException
from skillswap.core.logging import RequestContextMiddleware, get_logger, setup_logging
from skillswap.schemas.base import ErrorResponse
from skillswap.api.routes import api_router

logger = get_logger(__name__)


def create_app(
    actor: Optional[ActorClient] = None,
    query_cache: Optional[QueryCache] = None,
) -> FastAPI:
    """
    Build the application.

    actor and query_cache default to ones built from settings at startup;
    tests pass their own.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler: startup and shutdown."""
        setup_logging()
        logger.info("starting_app", app_name=settings.app_name, env=settings.environment)

        app.state.actor = actor if actor is not None else ActorClient()
        app.state.query_cache = (
            query_cache if query_cache is not None else QueryCache(stale_seconds=settings.query_stale_seconds)
        )
        logger.info("actor_client_ready", actor_url=settings.actor_url)

        yield

        logger.info("shutting_down")
        await app.state.query_cache.drain()
        await app.state.actor.aclose()

    app = FastAPI(
        title=settings.app_name,
        description="Skill-bartering marketplace: profiles, matches, swap requests and reviews",
        version=settings.app_version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # Request ID / principal correlation
    app.add_middleware(RequestContextMiddleware)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "OPTIONS"],
        allow_headers=["Content-Type", "X-Request-ID", settings.principal_header],
    )

    app.add_exception_handler(APIException, api_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    # Include API routes
    app.include_router(api_router, prefix=settings.api_prefix)

    @app.get("/")
    async def root():
        """Root endpoint - API info."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "docs": "/docs" if settings.debug else None,
        }

    return app


async def api_exception_handler(request: Request, exc: APIException):
    """Handle custom API exceptions."""
    if exc.status_code >= 500:
        logger.warning("api_error", code=exc.code, path=request.url.path, details=exc.details)
    error = ErrorResponse(error=exc.code, message=exc.message, details=exc.details)
    return JSONResponse(status_code=exc.status_code, content=error.model_dump())


async def generic_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions: log full detail, return a sanitized message."""
    logger.error(
        "unhandled_exception",
        exc_type=type(exc).__name__,
        exc_message=str(exc),
        path=request.url.path,
        exc_info=True,
    )

    if settings.debug:
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_error",
                "message": str(exc),
            },
        )

    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_error",
            "message": "An unexpected error occurred",
        },
    )


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "skillswap.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
    )
