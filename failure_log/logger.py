"""
Best-effort failure log sink.

Called from the extraction failure path. Nothing in here may change the
outcome of the request that triggered it: every exception is caught and
reported through the standard logger.
"""

import logging
from datetime import datetime, timezone
from typing import Any, List, Optional

from extraction.classifier import classify_error
from failure_log.base import FailureLogStore
from failure_log.types import (
    MAX_ERROR_MESSAGE_LENGTH,
    MAX_USER_INPUT_LENGTH,
    FailureRecord,
)

logger = logging.getLogger(__name__)


class FailureLogger:
    """Classifies failures and appends them to a FailureLogStore."""

    def __init__(self, store: FailureLogStore):
        self.store = store

    def log_generation_failure(
        self,
        user_input: str,
        error: BaseException,
        raw_response: Optional[Any] = None,
    ) -> None:
        """
        Persist one failure if the store is ready.

        Args:
            user_input: The text the caller submitted
            error: The original exception, before any wrapping
            raw_response: Provider reply text, when one was received

        Never raises.
        """
        try:
            if not self.store.is_ready():
                logger.warning("Database not connected, skipping error logging")
                return

            record = FailureRecord(
                timestamp=datetime.now(timezone.utc),
                user_input=user_input[:MAX_USER_INPUT_LENGTH],
                error_source=classify_error(error),
                error_message=str(error)[:MAX_ERROR_MESSAGE_LENGTH],
                raw_response=raw_response,
            )
            self.store.insert(record)

        except Exception as db_error:
            logger.error(
                "Failed to log generation failure to database",
                extra={
                    "original_error": str(error),
                    "db_error": str(db_error),
                    "user_input_length": len(user_input),
                },
            )

    def get_recent_failures(self, limit: int = 100) -> List[FailureRecord]:
        """Newest failures first; empty when the store is unavailable."""
        try:
            if not self.store.is_ready():
                return []
            return self.store.recent(limit)
        except Exception as e:
            logger.error(f"Failed to retrieve generation failures: {e}")
            return []

    def get_failures_by_source(self, error_source: str, limit: int = 50) -> List[FailureRecord]:
        """Newest failures of one ErrorSource first; empty when unavailable."""
        try:
            if not self.store.is_ready():
                return []
            return self.store.by_source(error_source, limit)
        except Exception as e:
            logger.error(f"Failed to retrieve failures by source: {e}")
            return []
