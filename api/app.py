"""
FastAPI application factory.

Serves:
- POST /api/generate: Requirement extraction
- GET  /api/failures: Failure log (only with FAILURE_LOG_DEBUG_ENABLED=true)
- GET  /health/live, /health/ready: Probes
- GET  /: Service info
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from infra.bootstrap import AppServices, bootstrap_services

from .errors import register_error_handlers, server_error_response
from .health import HealthChecker, router as health_router
from .routes import failures_router, router as generation_router

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


def create_app(services: Optional[AppServices] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        services: Pre-built collaborators (tests). Bootstrapped from the
            environment when omitted.
    """
    services = services or bootstrap_services()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("=" * 60)
        logger.info("Mini App Builder API starting up...")
        logger.info(f"Environment: {services.config.environment}")
        logger.info(f"Services: {services!r}")
        logger.info("=" * 60)

        yield

        logger.info("Mini App Builder API shutting down...")
        services.failure_log_store.close()

    app = FastAPI(
        title="Mini App Builder API",
        description="Extracts structured app requirements from free text",
        version=API_VERSION,
        lifespan=lifespan,
    )
    app.state.services = services
    app.state.health_checker = HealthChecker(services=services, start_time=time.time())

    app.add_middleware(
        CORSMiddleware,
        allow_origins=services.config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log every request; turn unexpected exceptions into the generic 500."""
        start = time.monotonic()
        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(f"Request error: {str(e)}", exc_info=True)
            return server_error_response()
        logger.debug(
            f"{request.method} {request.url.path} -> {response.status_code} "
            f"({int((time.monotonic() - start) * 1000)}ms)"
        )
        return response

    register_error_handlers(app)

    app.include_router(generation_router)
    app.include_router(health_router)
    if services.config.failure_log_debug_enabled:
        app.include_router(failures_router)

    @app.get("/")
    async def root():
        """Root endpoint with API info."""
        return {
            "name": "Mini App Builder API",
            "version": API_VERSION,
            "mode": "mock" if services.llm_backend is None else "llm",
            "endpoints": {
                "generate": "POST /api/generate",
                "health_live": "GET /health/live",
                "health_ready": "GET /health/ready",
            },
        }

    return app
