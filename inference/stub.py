from typing import List, Optional

from .base import ModelBackend
from .types import ModelRequest, ModelResponse


class StubModelBackend(ModelBackend):
    """
    Deterministic fake model for tests and local runs.

    Returns a canned reply (or raises a canned error) and records every
    request it receives so tests can inspect the prompt that was sent.
    """

    def __init__(self, output: Optional[str] = None, error: Optional[Exception] = None):
        self.output = output
        self.error = error
        self.requests: List[ModelRequest] = []

    def generate(self, request: ModelRequest) -> ModelResponse:
        self.requests.append(request)

        if self.error is not None:
            raise self.error

        return ModelResponse(
            output=self.output,
            metadata={"backend": "stub"},
        )
