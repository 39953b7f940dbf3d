"""
Error source classification for the failure log.

The rules are substring heuristics applied in a fixed order. A message can
match several of them; the first one wins. The tag is diagnostic only and
never changes what the caller receives.
"""

import asyncio
from dataclasses import dataclass
from enum import Enum

import requests


class ErrorSource(str, Enum):
    VALIDATION = "validation"
    TIMEOUT = "timeout"
    PARSING = "parsing"
    LLM_API = "llm_api"
    NETWORK = "network"
    UNKNOWN = "unknown"


# Substrings of DNS resolver errors across platforms
DNS_FAILURE_MARKERS = (
    "ENOTFOUND",
    "Name or service not known",
    "nodename nor servname",
    "getaddrinfo failed",
)

_ABORT_TYPES = (TimeoutError, asyncio.CancelledError, requests.Timeout)


@dataclass(frozen=True)
class ClassifiedError:
    error: BaseException
    source: ErrorSource


def _is_abort(error: BaseException) -> bool:
    return isinstance(error, _ABORT_TYPES) or type(error).__name__ == "AbortError"


def classify_error(error: BaseException) -> ErrorSource:
    """Map any exception to exactly one ErrorSource."""
    message = str(error)
    status_code = getattr(error, "status_code", None)

    if status_code is not None:
        if status_code == 400:
            return ErrorSource.VALIDATION
        if status_code == 504:
            return ErrorSource.TIMEOUT
        if "JSON" in message:
            return ErrorSource.PARSING
        if "API" in message:
            return ErrorSource.LLM_API
        if "network" in message or "fetch" in message:
            return ErrorSource.NETWORK

    if _is_abort(error):
        return ErrorSource.TIMEOUT

    if "network" in message or any(marker in message for marker in DNS_FAILURE_MARKERS):
        return ErrorSource.NETWORK

    return ErrorSource.UNKNOWN


def classify(error: BaseException) -> ClassifiedError:
    return ClassifiedError(error=error, source=classify_error(error))
