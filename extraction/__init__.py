"""
Requirement extraction: validation, classification and orchestration.

Example usage:
    from extraction import ExtractionOrchestrator, validate_generation_request

    orchestrator = ExtractionOrchestrator(model_backend=None)  # mock mode
    text = validate_generation_request({"text": "A todo app for teams"})
    result = orchestrator.extract(text)
"""

from .errors import (
    GenerationError,
    ValidationError,
    EmptyResponseError,
    ParsingError,
    StructuralError,
    ProviderCallError,
)
from .classifier import ErrorSource, ClassifiedError, classify, classify_error
from .input_validator import MAX_INPUT_LENGTH, validate_generation_request
from .response_validator import validate_generation_result
from .schemas import Entity, UserRole, Feature, GenerationResult
from .mock_templates import build_mock_result
from .orchestrator import ExtractionOrchestrator

__all__ = [
    "GenerationError",
    "ValidationError",
    "EmptyResponseError",
    "ParsingError",
    "StructuralError",
    "ProviderCallError",
    "ErrorSource",
    "ClassifiedError",
    "classify",
    "classify_error",
    "MAX_INPUT_LENGTH",
    "validate_generation_request",
    "validate_generation_result",
    "Entity",
    "UserRole",
    "Feature",
    "GenerationResult",
    "build_mock_result",
    "ExtractionOrchestrator",
]
