"""
Infrastructure configuration system.

Environment-based backend selection with sensible defaults.
Without an API key the service runs in mock mode and never calls a provider.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Literal, Optional

from dotenv import load_dotenv

from inference import ModelBackend, OpenAICompatibleBackend
from failure_log import (
    FailureLogStore,
    SQLiteFailureLogStore,
    InMemoryFailureLogStore,
    DisabledFailureLogStore,
)

# Load environment variables from .env at the project root, if present
load_dotenv(Path(__file__).parent.parent / ".env")

FailureLogBackendType = Literal["sqlite", "memory", "disabled"]

# Placeholder key shipped in sample .env files; treated as "not configured"
PLACEHOLDER_API_KEYS = ("", "test_key")


@dataclass
class AppConfig:
    """Service configuration from environment."""

    # LLM provider
    llm_api_key: str
    llm_base_url: str
    llm_model: str
    llm_timeout_s: float

    # Failure log
    failure_log_backend: FailureLogBackendType
    failure_log_db_path: str
    failure_log_debug_enabled: bool

    # HTTP
    cors_origins: List[str]
    api_port: int

    # Environment
    environment: str
    log_level: str

    @classmethod
    def from_env(cls) -> "AppConfig":
        """
        Load configuration from environment variables.

        Defaults prioritize a zero-setup local run:
        - LLM: mock mode (no key)
        - Failure log: SQLite file in the working directory
        """
        return cls(
            llm_api_key=os.getenv("LLM_API_KEY", ""),
            llm_base_url=os.getenv("LLM_BASE_URL", "https://openrouter.ai/api/v1"),
            llm_model=os.getenv("LLM_MODEL", "google/gemini-2.0-flash-exp:free"),
            llm_timeout_s=float(os.getenv("LLM_TIMEOUT_S", "30")),

            failure_log_backend=os.getenv("FAILURE_LOG_BACKEND", "sqlite").lower(),  # type: ignore
            failure_log_db_path=os.getenv("FAILURE_LOG_DB_PATH", "./generation_failures.db"),
            failure_log_debug_enabled=os.getenv("FAILURE_LOG_DEBUG_ENABLED", "false").lower() == "true",

            cors_origins=[o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()],
            api_port=int(os.getenv("API_PORT", "3001")),

            environment=os.getenv("ENVIRONMENT", "development"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    @property
    def mock_mode(self) -> bool:
        return self.llm_api_key in PLACEHOLDER_API_KEYS

    def create_llm_backend(self) -> Optional[ModelBackend]:
        """Create the provider backend, or None in mock mode."""
        if self.mock_mode:
            return None
        return OpenAICompatibleBackend(
            api_key=self.llm_api_key,
            model_name=self.llm_model,
            base_url=self.llm_base_url,
        )

    def create_failure_log_store(self) -> FailureLogStore:
        """Create the failure log store. Not connected yet."""
        if self.failure_log_backend == "sqlite":
            return SQLiteFailureLogStore(db_path=self.failure_log_db_path)
        elif self.failure_log_backend == "memory":
            return InMemoryFailureLogStore()
        else:
            return DisabledFailureLogStore()


def get_config() -> AppConfig:
    """Read configuration from the current environment."""
    return AppConfig.from_env()
