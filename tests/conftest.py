"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Add project root to sys.path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture(autouse=True)
def no_llm_credentials(monkeypatch):
    """Keep tests offline even when a real LLM_API_KEY is exported."""
    monkeypatch.delenv("LLM_API_KEY", raising=False)
