"""
Service bootstrap.

Builds every process-scoped collaborator once, at application startup.
The resulting AppServices is stored on app.state and only read afterwards.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from extraction import ExtractionOrchestrator
from failure_log import FailureLogger, FailureLogStore
from inference import ModelBackend

from .config import AppConfig, get_config

logger = logging.getLogger(__name__)


@dataclass
class AppServices:
    """Collaborators shared by all request handlers."""

    config: AppConfig
    llm_backend: Optional[ModelBackend]
    failure_log_store: FailureLogStore
    failure_logger: FailureLogger
    orchestrator: ExtractionOrchestrator

    def __repr__(self) -> str:
        return (
            f"AppServices(mode={'mock' if self.llm_backend is None else 'llm'}, "
            f"failure_log={self.config.failure_log_backend}, "
            f"failure_log_ready={self.failure_log_store.is_ready()})"
        )


def bootstrap_services(
    config: Optional[AppConfig] = None,
    llm_backend: Optional[ModelBackend] = None,
    failure_log_store: Optional[FailureLogStore] = None,
) -> AppServices:
    """
    Build and wire all collaborators.

    Args:
        config: Optional custom configuration (defaults to environment)
        llm_backend: Overrides the configured backend (tests)
        failure_log_store: Overrides the configured store (tests)

    Returns:
        AppServices ready to attach to the FastAPI app
    """
    config = config or get_config()

    if llm_backend is None:
        llm_backend = config.create_llm_backend()
    if llm_backend is None:
        logger.warning("Running in mock mode - LLM API key not configured")

    store = failure_log_store or config.create_failure_log_store()
    try:
        store.connect()
    except Exception as e:
        # Extraction still works; failures are just not persisted
        logger.warning(f"Failure log store unavailable: {e}")

    failure_logger = FailureLogger(store)
    orchestrator = ExtractionOrchestrator(
        model_backend=llm_backend,
        failure_logger=failure_logger,
        timeout_s=config.llm_timeout_s,
    )

    return AppServices(
        config=config,
        llm_backend=llm_backend,
        failure_log_store=store,
        failure_logger=failure_logger,
        orchestrator=orchestrator,
    )
