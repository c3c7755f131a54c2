"""
Unit tests for configuration management.

BoeApiConfig reads its defaults from environment variables when the instance
is built, so monkeypatch.setenv() before construction is enough to exercise
each variable.

Test Categories:
    - Defaults with a clean environment
    - Environment overrides
    - Validation errors
    - Application identity

Python Learning Notes:
    - monkeypatch.delenv(..., raising=False) ignores variables that are not set
    - pytest.raises(match=...) checks the exception message with a regex
"""

import pytest

from mcpboe import __version__
from mcpboe.utils.config import AppConfig, BoeApiConfig

ENV_VARS = [
    "BOE_API_BASE_URL",
    "BOE_API_TIMEOUT_SECONDS",
    "BOE_API_RETRY_COUNT",
    "BOE_API_RETRY_DELAY_MS",
    "BOE_API_MAX_CONCURRENT_REQUESTS",
    "BOE_API_USER_AGENT",
    "BOE_API_ENABLE_LOGGING",
    "BOE_API_CACHE_TTL_MINUTES",
    "MCPBOE_LOG_LEVEL",
    "MCPBOE_APP_NAME",
    "MCPBOE_APP_VERSION",
    "MCPBOE_ENVIRONMENT",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every MCPBoe variable so defaults apply."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestBoeApiConfigDefaults:
    def test_defaults(self, clean_env):
        config = BoeApiConfig()

        assert config.base_url == "https://www.boe.es/datosabiertos/api"
        assert config.timeout_seconds == 30
        assert config.retry_count == 3
        assert config.retry_delay_ms == 1000
        assert config.max_concurrent_requests == 10
        assert config.user_agent == "MCPBoe/1.0"
        assert config.enable_logging is True
        assert config.cache_ttl_minutes == 60

    def test_to_dict_round_trips_fields(self, clean_env):
        data = BoeApiConfig().to_dict()

        assert data["retry_count"] == 3
        assert data["base_url"] == "https://www.boe.es/datosabiertos/api"
        assert set(data) >= {"timeout_seconds", "user_agent", "enable_logging"}


class TestBoeApiConfigEnvironment:
    def test_environment_overrides(self, clean_env):
        clean_env.setenv("BOE_API_BASE_URL", "http://localhost:8080/api/")
        clean_env.setenv("BOE_API_RETRY_COUNT", "5")
        clean_env.setenv("BOE_API_RETRY_DELAY_MS", "250")
        clean_env.setenv("BOE_API_TIMEOUT_SECONDS", "2.5")
        clean_env.setenv("BOE_API_ENABLE_LOGGING", "false")

        config = BoeApiConfig()

        assert config.base_url == "http://localhost:8080/api"
        assert config.retry_count == 5
        assert config.retry_delay_ms == 250
        assert config.timeout_seconds == 2.5
        assert config.enable_logging is False

    @pytest.mark.parametrize("value,expected", [("1", True), ("yes", True), ("TRUE", True), ("0", False), ("off", False)])
    def test_enable_logging_parsing(self, clean_env, value, expected):
        clean_env.setenv("BOE_API_ENABLE_LOGGING", value)

        assert BoeApiConfig().enable_logging is expected


class TestBoeApiConfigValidation:
    @pytest.mark.parametrize(
        "overrides,message",
        [
            ({"base_url": "ftp://boe.es"}, "base_url"),
            ({"timeout_seconds": 0}, "timeout_seconds"),
            ({"retry_count": -1}, "retry_count"),
            ({"retry_delay_ms": -1}, "retry_delay_ms"),
            ({"max_concurrent_requests": 0}, "max_concurrent_requests"),
            ({"user_agent": ""}, "user_agent"),
            ({"cache_ttl_minutes": -1}, "cache_ttl_minutes"),
        ],
    )
    def test_invalid_values_raise(self, clean_env, overrides, message):
        with pytest.raises(ValueError, match=message):
            BoeApiConfig(**overrides)

    def test_zero_retries_allowed(self, clean_env):
        assert BoeApiConfig(retry_count=0).validate() is True


class TestAppConfig:
    def test_defaults(self, clean_env):
        config = AppConfig()

        assert config.name == "MCPBoe"
        assert config.version == __version__
        assert config.environment == "Development"

    def test_environment_overrides(self, clean_env):
        clean_env.setenv("MCPBOE_ENVIRONMENT", "Production")

        assert AppConfig().environment == "Production"
