"""
In-memory and disabled failure log stores.

No external dependencies. Used by tests and when FAILURE_LOG_BACKEND is
"memory" or "disabled".
"""

from typing import List

from failure_log.base import FailureLogStore
from failure_log.types import FailureRecord


class InMemoryFailureLogStore(FailureLogStore):
    """
    List-backed store.

    Ready from construction unless ready=False is passed, which lets tests
    exercise the "database not connected" path.
    """

    def __init__(self, ready: bool = True):
        self.records: List[FailureRecord] = []
        self._ready = ready

    def connect(self) -> None:
        self._ready = True

    def close(self) -> None:
        self._ready = False

    def is_ready(self) -> bool:
        return self._ready

    def insert(self, record: FailureRecord) -> None:
        self.records.append(record)

    def recent(self, limit: int = 100) -> List[FailureRecord]:
        ordered = sorted(self.records, key=lambda r: r.timestamp, reverse=True)
        return ordered[:limit]

    def by_source(self, source: str, limit: int = 50) -> List[FailureRecord]:
        matching = [r for r in self.recent(len(self.records)) if r.error_source == source]
        return matching[:limit]


class DisabledFailureLogStore(FailureLogStore):
    """Store that is never ready. Failures are skipped with a warning."""

    def is_ready(self) -> bool:
        return False

    def insert(self, record: FailureRecord) -> None:
        raise RuntimeError("Failure log store is disabled")

    def recent(self, limit: int = 100) -> List[FailureRecord]:
        return []

    def by_source(self, source: str, limit: int = 50) -> List[FailureRecord]:
        return []
