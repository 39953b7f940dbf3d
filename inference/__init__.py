"""
Model boundary layer for LLM inference.

This package keeps extraction code agnostic of the provider behind it.

Supported backends:
- StubModelBackend: Deterministic fake model (tests, local runs)
- OpenAICompatibleBackend: Any OpenAI-style /chat/completions endpoint

Example usage:
    from inference import StubModelBackend, ModelRequest

    backend = StubModelBackend(output='{"appName": "Demo"}')
    response = backend.generate(ModelRequest(system_prompt="...", prompt="Hello"))
"""

from .types import ModelRequest, ModelResponse
from .base import ModelBackend
from .stub import StubModelBackend
from .openai_compat import OpenAICompatibleBackend

__all__ = [
    "ModelRequest",
    "ModelResponse",
    "ModelBackend",
    "StubModelBackend",
    "OpenAICompatibleBackend",
]
