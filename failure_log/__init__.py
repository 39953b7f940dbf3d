"""
Failure log module exports.

Append-only diagnostics for failed extractions.
"""

from failure_log.types import (
    FailureRecord,
    MAX_USER_INPUT_LENGTH,
    MAX_ERROR_MESSAGE_LENGTH,
)
from failure_log.base import FailureLogStore
from failure_log.stub import InMemoryFailureLogStore, DisabledFailureLogStore
from failure_log.sqlite import SQLiteFailureLogStore
from failure_log.logger import FailureLogger

__all__ = [
    "FailureRecord",
    "MAX_USER_INPUT_LENGTH",
    "MAX_ERROR_MESSAGE_LENGTH",
    "FailureLogStore",
    "InMemoryFailureLogStore",
    "DisabledFailureLogStore",
    "SQLiteFailureLogStore",
    "FailureLogger",
]
