"""
Request payload validation for POST /api/generate.

Runs before anything else touches the provider: a rejected request is
never classified or written to the failure log.
"""

from typing import Any

from .errors import ValidationError

MAX_INPUT_LENGTH = 10_000

MISSING_TEXT_MESSAGE = "Request body must contain a text field of type string"
EMPTY_TEXT_MESSAGE = "Text input cannot be empty"
TOO_LONG_MESSAGE = f"Text input exceeds maximum length of {MAX_INPUT_LENGTH} characters"


def validate_generation_request(payload: Any) -> str:
    """
    Validate a decoded request body and return the trimmed text.

    Args:
        payload: Decoded JSON body (any type; non-dicts are rejected)

    Returns:
        The text with surrounding whitespace removed

    Raises:
        ValidationError: missing/non-string text, empty text, or text longer
            than MAX_INPUT_LENGTH after trimming
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("text"), str):
        raise ValidationError(MISSING_TEXT_MESSAGE)

    text = payload["text"].strip()

    if not text:
        raise ValidationError(EMPTY_TEXT_MESSAGE)

    if len(text) > MAX_INPUT_LENGTH:
        raise ValidationError(TOO_LONG_MESSAGE)

    return text
