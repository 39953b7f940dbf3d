"""
Abstract failure log store interface.

The sink depends only on this interface, not on a specific database.
"""

from abc import ABC, abstractmethod
from typing import List

from failure_log.types import FailureRecord


class FailureLogStore(ABC):
    """
    Append-only store for FailureRecords.

    Key properties:
    - Readiness is established once by connect() at startup
    - insert() may raise; the caller (FailureLogger) swallows and logs
    - No update or delete path
    """

    def connect(self) -> None:
        """Open the store and mark it ready. Raises if that is impossible."""

    def close(self) -> None:
        """Mark the store not ready."""

    @abstractmethod
    def is_ready(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def insert(self, record: FailureRecord) -> None:
        """Append one record."""
        raise NotImplementedError

    @abstractmethod
    def recent(self, limit: int = 100) -> List[FailureRecord]:
        """Newest records first."""
        raise NotImplementedError

    @abstractmethod
    def by_source(self, source: str, limit: int = 50) -> List[FailureRecord]:
        """Newest records first, filtered to one error source."""
        raise NotImplementedError
