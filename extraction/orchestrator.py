"""
Requirement extraction orchestrator.

Flow:
  1. Reject empty text (400) without touching the provider
  2. Mock mode (no backend): return a keyword-selected template
  3. One provider call with the fixed extraction prompt
  4. Parse the reply as JSON, validate its shape
  5. On any failure: classify + log (best effort), then re-raise

The caller always gets either a GenerationResult dict or a GenerationError.
"""

import json
import logging
import time
from typing import TYPE_CHECKING, Any, Dict, Optional

from inference.base import ModelBackend
from inference.types import ModelRequest

from .errors import (
    EmptyResponseError,
    GenerationError,
    ParsingError,
    ProviderCallError,
    ValidationError,
)
from .mock_templates import build_mock_result
from .prompts import EXTRACTION_MAX_TOKENS, EXTRACTION_PROMPT, EXTRACTION_TEMPERATURE
from .response_validator import validate_generation_result

if TYPE_CHECKING:
    from failure_log.logger import FailureLogger

logger = logging.getLogger(__name__)


def _reject_constant(name: str):
    """NaN and Infinity are not JSON and cannot be sent back to the caller."""
    raise ValueError(f"Non-standard JSON constant: {name}")


class ExtractionOrchestrator:
    """
    Turns a free-text app description into a GenerationResult.

    Args:
        model_backend: Provider backend, or None for mock mode
        failure_logger: Sink for failed attempts, or None to skip logging
        timeout_s: Upper bound for the provider call
    """

    def __init__(
        self,
        model_backend: Optional[ModelBackend],
        failure_logger: Optional["FailureLogger"] = None,
        timeout_s: float = 30,
    ):
        self.model_backend = model_backend
        self.failure_logger = failure_logger
        self.timeout_s = timeout_s

    @property
    def mock_mode(self) -> bool:
        return self.model_backend is None

    def extract(self, user_text: str) -> Dict[str, Any]:
        start_time = time.monotonic()

        if not user_text or not user_text.strip():
            raise ValidationError("User text input is required")

        if self.mock_mode:
            result = build_mock_result(user_text)
            logger.info(f"Extraction (mock) completed in {self._elapsed_ms(start_time)}ms")
            return result

        raw_output: Optional[str] = None
        try:
            response = self.model_backend.generate(
                ModelRequest(
                    system_prompt=EXTRACTION_PROMPT,
                    prompt=user_text.strip(),
                    temperature=EXTRACTION_TEMPERATURE,
                    max_tokens=EXTRACTION_MAX_TOKENS,
                    timeout_s=self.timeout_s,
                )
            )
            raw_output = response.output

            if not isinstance(raw_output, str) or not raw_output:
                raise EmptyResponseError("Empty response from LLM API")

            try:
                parsed = json.loads(raw_output.strip(), parse_constant=_reject_constant)
            except ValueError as e:
                raise ParsingError("Invalid JSON response from LLM API", 500, e) from e

            result = validate_generation_result(parsed)

        except Exception as error:
            self._log_failure(user_text, error, raw_output)

            if isinstance(error, GenerationError):
                raise

            raise ProviderCallError(f"LLM API request failed: {error}", 500, error) from error

        logger.info(
            f"Extraction completed in {self._elapsed_ms(start_time)}ms",
            extra={"model": response.metadata.get("model")},
        )
        return result

    def _log_failure(self, user_text: str, error: BaseException, raw_output: Optional[str]) -> None:
        logger.warning(f"Extraction failed: {type(error).__name__}: {error}")
        if self.failure_logger is None:
            return
        self.failure_logger.log_generation_failure(
            user_input=user_text,
            error=error,
            raw_response=raw_output,
        )

    @staticmethod
    def _elapsed_ms(start_time: float) -> int:
        return int((time.monotonic() - start_time) * 1000)
