"""
Tests for the extraction orchestrator.

Verifies:
✔ Mock mode never calls a backend and returns a template
✔ Live mode sends the fixed prompt, trimmed text, temperature and budget
✔ Valid provider JSON is returned unchanged
✔ Empty / non-JSON / badly shaped replies raise the right error
✔ Every failure is classified and logged before being re-raised
✔ Foreign exceptions are wrapped as ProviderCallError
✔ A broken failure log never changes the outcome
"""

import json
from unittest.mock import MagicMock

import pytest

from extraction.errors import (
    EmptyResponseError,
    ParsingError,
    ProviderCallError,
    StructuralError,
    ValidationError,
)
from extraction.orchestrator import ExtractionOrchestrator
from extraction.prompts import EXTRACTION_MAX_TOKENS, EXTRACTION_PROMPT, EXTRACTION_TEMPERATURE
from failure_log import FailureLogger, InMemoryFailureLogStore
from inference import StubModelBackend


TASK_APP_RESULT = {
    "appName": "Team Task Manager",
    "entities": [
        {"name": "Task", "attributes": ["id", "title", "status", "assignee"]},
        {"name": "Team", "attributes": ["id", "name", "members"]},
    ],
    "userRoles": [
        {"name": "Manager", "description": "Creates and assigns tasks"},
        {"name": "Member", "description": "Works on assigned tasks"},
    ],
    "features": [
        {"name": "Task Board", "description": "See all team tasks by status"},
        {"name": "Assignments", "description": "Assign tasks to members"},
    ],
}


def make_orchestrator(backend, store=None):
    store = store if store is not None else InMemoryFailureLogStore()
    return ExtractionOrchestrator(
        model_backend=backend,
        failure_logger=FailureLogger(store),
        timeout_s=12,
    ), store


class TestMockMode:

    def test_mock_mode_flag(self):
        orchestrator, _ = make_orchestrator(None)
        assert orchestrator.mock_mode is True

    def test_returns_template(self):
        orchestrator, store = make_orchestrator(None)
        result = orchestrator.extract("I want to build a task management app for teams")

        assert result["appName"] == "Task Manager"
        assert store.records == []

    def test_empty_text_rejected(self):
        orchestrator, store = make_orchestrator(None)
        with pytest.raises(ValidationError) as exc_info:
            orchestrator.extract("   ")

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "User text input is required"
        assert store.records == []


class TestProviderRequest:

    def test_request_contents(self):
        backend = StubModelBackend(output=json.dumps(TASK_APP_RESULT))
        orchestrator, _ = make_orchestrator(backend)

        orchestrator.extract("  I want to build a task management app for teams  ")

        assert len(backend.requests) == 1
        request = backend.requests[0]
        assert request.system_prompt == EXTRACTION_PROMPT
        assert request.prompt == "I want to build a task management app for teams"
        assert request.temperature == EXTRACTION_TEMPERATURE == 0.3
        assert request.max_tokens == EXTRACTION_MAX_TOKENS == 2000
        assert request.timeout_s == 12

    def test_empty_text_never_reaches_provider(self):
        backend = StubModelBackend(output=json.dumps(TASK_APP_RESULT))
        orchestrator, _ = make_orchestrator(backend)

        with pytest.raises(ValidationError):
            orchestrator.extract("")

        assert backend.requests == []


class TestSuccessfulExtraction:

    def test_valid_reply_returned_unchanged(self):
        backend = StubModelBackend(output=json.dumps(TASK_APP_RESULT))
        orchestrator, store = make_orchestrator(backend)

        result = orchestrator.extract("I want to build a task management app for teams")

        assert result == TASK_APP_RESULT
        assert store.records == []

    def test_surrounding_whitespace_in_reply_tolerated(self):
        backend = StubModelBackend(output="\n  " + json.dumps(TASK_APP_RESULT) + "\n")
        orchestrator, _ = make_orchestrator(backend)

        assert orchestrator.extract("tasks") == TASK_APP_RESULT


class TestReplyFailures:

    @pytest.mark.parametrize("output", [None, ""])
    def test_empty_reply(self, output):
        orchestrator, store = make_orchestrator(StubModelBackend(output=output))

        with pytest.raises(EmptyResponseError) as exc_info:
            orchestrator.extract("tasks")

        assert exc_info.value.status_code == 500
        assert store.records[0].error_source == "llm_api"

    def test_non_json_reply(self):
        orchestrator, store = make_orchestrator(StubModelBackend(output="Sure! Here is your app: {"))

        with pytest.raises(ParsingError) as exc_info:
            orchestrator.extract("tasks")

        assert exc_info.value.message == "Invalid JSON response from LLM API"
        assert isinstance(exc_info.value.original_error, json.JSONDecodeError)

        record = store.records[0]
        assert record.error_source == "parsing"
        assert record.raw_response == "Sure! Here is your app: {"

    @pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
    def test_non_standard_json_constant(self, constant):
        output = f'{{"appName": "A", "entities": [{constant}], "userRoles": [1], "features": [1]}}'
        orchestrator, store = make_orchestrator(StubModelBackend(output=output))

        with pytest.raises(ParsingError) as exc_info:
            orchestrator.extract("tasks")

        assert exc_info.value.message == "Invalid JSON response from LLM API"
        assert store.records[0].error_source == "parsing"
        assert store.records[0].raw_response == output

    def test_invalid_structure_propagates_as_is(self):
        reply = {"appName": "", "entities": [], "userRoles": [], "features": []}
        orchestrator, store = make_orchestrator(StubModelBackend(output=json.dumps(reply)))

        with pytest.raises(StructuralError) as exc_info:
            orchestrator.extract("tasks")

        assert exc_info.value.message == "Invalid appName in LLM API response"
        assert store.records[0].error_source == "llm_api"
        assert store.records[0].user_input == "tasks"


class TestProviderFailures:

    def test_service_error_reraised_unchanged(self):
        error = ProviderCallError("LLM API request timed out", 504)
        orchestrator, store = make_orchestrator(StubModelBackend(error=error))

        with pytest.raises(ProviderCallError) as exc_info:
            orchestrator.extract("tasks")

        assert exc_info.value is error
        assert exc_info.value.status_code == 504
        assert store.records[0].error_source == "timeout"

    def test_foreign_exception_wrapped(self):
        error = ConnectionError("network unreachable")
        orchestrator, store = make_orchestrator(StubModelBackend(error=error))

        with pytest.raises(ProviderCallError) as exc_info:
            orchestrator.extract("tasks")

        assert exc_info.value.status_code == 500
        assert exc_info.value.message == "LLM API request failed: network unreachable"
        assert exc_info.value.original_error is error
        assert exc_info.value.__cause__ is error

        # Classified from the original error, not the wrapper
        assert store.records[0].error_source == "network"
        assert store.records[0].raw_response is None

    def test_failure_not_persisted_when_store_not_ready(self):
        store = InMemoryFailureLogStore(ready=False)
        orchestrator, _ = make_orchestrator(
            StubModelBackend(error=ConnectionError("network unreachable")), store
        )

        with pytest.raises(ProviderCallError):
            orchestrator.extract("tasks")

        assert store.records == []

    def test_broken_store_does_not_change_error(self):
        store = MagicMock()
        store.is_ready.return_value = True
        store.insert.side_effect = RuntimeError("disk full")
        orchestrator, _ = make_orchestrator(StubModelBackend(output="not json"), store)

        with pytest.raises(ParsingError):
            orchestrator.extract("tasks")

        store.insert.assert_called_once()

    def test_works_without_failure_logger(self):
        orchestrator = ExtractionOrchestrator(StubModelBackend(output="not json"))

        with pytest.raises(ParsingError):
            orchestrator.extract("tasks")
