"""
Health check endpoints for deployment readiness.

Provides:
- /health/live: Liveness probe (process is running)
- /health/ready: Readiness probe (service can answer /api/generate)

Invariant: readiness does NOT depend on the LLM provider or the failure log
database. Mock mode and an unavailable failure log still serve requests.
"""

import time
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from infra.bootstrap import AppServices

router = APIRouter(prefix="/health", tags=["Health"])


@dataclass
class HealthStatus:
    """Health status response."""

    status: str  # "healthy", "unhealthy"
    timestamp: str
    ready: bool
    uptime_seconds: float
    mode: str  # "mock", "llm"
    environment: str
    optional_services: Dict[str, bool]
    message: str


class HealthChecker:
    """Reports liveness and readiness from the bootstrapped services."""

    def __init__(self, services: AppServices, start_time: float):
        self.services = services
        self.start_time = start_time

    def get_mode(self) -> str:
        return "mock" if self.services.llm_backend is None else "llm"

    def check_optional_services(self) -> Dict[str, bool]:
        return {
            "llm_provider": self.services.llm_backend is not None,
            "failure_log": self.services.failure_log_store.is_ready(),
        }

    def _status(self, ready: bool, message: str) -> HealthStatus:
        return HealthStatus(
            status="healthy" if ready else "unhealthy",
            timestamp=datetime.now(timezone.utc).isoformat(),
            ready=ready,
            uptime_seconds=time.time() - self.start_time,
            mode=self.get_mode(),
            environment=self.services.config.environment,
            optional_services=self.check_optional_services(),
            message=message,
        )

    def check_live(self) -> HealthStatus:
        """Always healthy if this code runs."""
        return self._status(True, "Service process is running")

    def check_ready(self) -> HealthStatus:
        ready = self.services.orchestrator is not None
        message = "Extraction pipeline initialized" if ready else "Extraction pipeline missing"
        return self._status(ready, message)

    def to_dict(self, status: HealthStatus) -> Dict[str, Any]:
        return asdict(status)


def _checker(request: Request) -> HealthChecker:
    return request.app.state.health_checker


@router.get("/live")
async def live(request: Request):
    """Liveness probe."""
    checker = _checker(request)
    return JSONResponse(content=checker.to_dict(checker.check_live()), status_code=200)


@router.get("/ready")
async def ready(request: Request):
    """Readiness probe."""
    checker = _checker(request)
    status = checker.check_ready()
    return JSONResponse(
        content=checker.to_dict(status),
        status_code=200 if status.ready else 503,
    )
