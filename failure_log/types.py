"""
Failure log record type.

One record per failed extraction. Records are written once and never
updated or deleted by this service.
"""

from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Any, Dict, Optional

from extraction.classifier import ErrorSource

MAX_USER_INPUT_LENGTH = 10_000
MAX_ERROR_MESSAGE_LENGTH = 1_000


@dataclass(frozen=True)
class FailureRecord:
    """A diagnostic entry describing one failed extraction attempt."""

    timestamp: datetime                 # UTC, set by the sink
    user_input: str                     # truncated to MAX_USER_INPUT_LENGTH
    error_source: ErrorSource
    error_message: str                  # truncated to MAX_ERROR_MESSAGE_LENGTH
    raw_response: Optional[Any] = None  # opaque provider reply, if any

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["timestamp"] = self.timestamp.isoformat()
        data["error_source"] = self.error_source.value
        return data
