"""
Error taxonomy for requirement extraction.

Every error raised on purpose by this service is a GenerationError carrying
the HTTP-equivalent status code. The HTTP layer turns 4xx codes into a
"Bad Request" body with the message, and everything else into a generic 500.
"""

from typing import Optional


class GenerationError(Exception):
    """Base class for all extraction failures."""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        original_error: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.original_error = original_error

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, status_code={self.status_code})"


class ValidationError(GenerationError):
    """Caller sent an unusable request. Never reaches the provider."""

    status_code = 400


class EmptyResponseError(GenerationError):
    """Provider answered without any content."""


class ParsingError(GenerationError):
    """Provider content was not valid JSON."""


class StructuralError(GenerationError):
    """Provider JSON did not have the GenerationResult shape."""


class ProviderCallError(GenerationError):
    """Network failure, timeout (504) or provider rejection."""
