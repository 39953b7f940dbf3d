from typing import Any

from .errors import StructuralError

REQUIRED_FIELDS = ("appName", "entities", "userRoles", "features")


def _is_non_empty_list(value: Any) -> bool:
    return isinstance(value, list) and len(value) > 0


def validate_generation_result(result: Any) -> Any:
    """
    Check the shape of a parsed provider reply. First failing check wins.

    Only the top level is inspected; list items are passed through as-is.
    Returns the same object, untouched.
    """
    if not isinstance(result, dict):
        raise StructuralError("Invalid response structure from LLM API")

    for field in REQUIRED_FIELDS:
        if field not in result:
            raise StructuralError(f"Missing required field: {field}")

    app_name = result["appName"]
    if not isinstance(app_name, str) or not app_name.strip():
        raise StructuralError("Invalid appName in LLM API response")

    for field in ("entities", "userRoles", "features"):
        if not _is_non_empty_list(result[field]):
            raise StructuralError(f"Invalid {field} in LLM API response")

    return result
