"""
Tests for environment configuration and service bootstrap.
"""

import pytest

from failure_log import (
    DisabledFailureLogStore,
    InMemoryFailureLogStore,
    SQLiteFailureLogStore,
)
from inference import OpenAICompatibleBackend, StubModelBackend
from infra import AppConfig, bootstrap_services

CONFIG_VARS = [
    "LLM_API_KEY", "LLM_BASE_URL", "LLM_MODEL", "LLM_TIMEOUT_S",
    "FAILURE_LOG_BACKEND", "FAILURE_LOG_DB_PATH", "FAILURE_LOG_DEBUG_ENABLED",
    "CORS_ORIGINS", "API_PORT", "ENVIRONMENT", "LOG_LEVEL",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in CONFIG_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestAppConfig:

    def test_defaults(self, clean_env):
        config = AppConfig.from_env()

        assert config.llm_api_key == ""
        assert config.llm_base_url == "https://openrouter.ai/api/v1"
        assert config.llm_timeout_s == 30.0
        assert config.failure_log_backend == "sqlite"
        assert config.failure_log_debug_enabled is False
        assert config.cors_origins == ["*"]
        assert config.api_port == 3001
        assert config.log_level == "INFO"
        assert config.mock_mode is True

    def test_overrides(self, clean_env):
        clean_env.setenv("LLM_API_KEY", "sk-live")
        clean_env.setenv("LLM_MODEL", "openai/gpt-4o-mini")
        clean_env.setenv("LLM_TIMEOUT_S", "12.5")
        clean_env.setenv("FAILURE_LOG_BACKEND", "MEMORY")
        clean_env.setenv("FAILURE_LOG_DEBUG_ENABLED", "true")
        clean_env.setenv("CORS_ORIGINS", "https://a.example, https://b.example")
        clean_env.setenv("LOG_LEVEL", "debug")

        config = AppConfig.from_env()

        assert config.mock_mode is False
        assert config.llm_model == "openai/gpt-4o-mini"
        assert config.llm_timeout_s == 12.5
        assert config.failure_log_backend == "memory"
        assert config.failure_log_debug_enabled is True
        assert config.cors_origins == ["https://a.example", "https://b.example"]
        assert config.log_level == "DEBUG"

    @pytest.mark.parametrize("key", ["", "test_key"])
    def test_placeholder_keys_mean_mock_mode(self, clean_env, key):
        clean_env.setenv("LLM_API_KEY", key)
        config = AppConfig.from_env()

        assert config.mock_mode is True
        assert config.create_llm_backend() is None

    def test_live_backend_created(self, clean_env):
        clean_env.setenv("LLM_API_KEY", "sk-live")
        backend = AppConfig.from_env().create_llm_backend()

        assert isinstance(backend, OpenAICompatibleBackend)
        assert backend.api_key == "sk-live"

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("sqlite", SQLiteFailureLogStore),
            ("memory", InMemoryFailureLogStore),
            ("disabled", DisabledFailureLogStore),
            ("mongodb", DisabledFailureLogStore),
        ],
    )
    def test_failure_log_store_selection(self, clean_env, name, expected):
        clean_env.setenv("FAILURE_LOG_BACKEND", name)
        assert isinstance(AppConfig.from_env().create_failure_log_store(), expected)


class TestBootstrap:

    def test_mock_mode_wiring(self, clean_env):
        clean_env.setenv("FAILURE_LOG_BACKEND", "memory")
        services = bootstrap_services()

        assert services.llm_backend is None
        assert services.orchestrator.mock_mode is True
        assert services.failure_log_store.is_ready() is True
        assert services.failure_logger.store is services.failure_log_store

    def test_overrides_used(self, clean_env):
        backend = StubModelBackend(output="{}")
        store = InMemoryFailureLogStore()
        services = bootstrap_services(
            config=AppConfig.from_env(), llm_backend=backend, failure_log_store=store
        )

        assert services.orchestrator.model_backend is backend
        assert services.failure_log_store is store

    def test_store_connect_failure_is_not_fatal(self, clean_env, tmp_path):
        clean_env.setenv("FAILURE_LOG_DB_PATH", str(tmp_path / "missing" / "failures.db"))
        services = bootstrap_services()

        assert isinstance(services.failure_log_store, SQLiteFailureLogStore)
        assert services.failure_log_store.is_ready() is False

    def test_timeout_passed_to_orchestrator(self, clean_env):
        clean_env.setenv("LLM_TIMEOUT_S", "9")
        clean_env.setenv("FAILURE_LOG_BACKEND", "disabled")
        assert bootstrap_services().orchestrator.timeout_s == 9.0
