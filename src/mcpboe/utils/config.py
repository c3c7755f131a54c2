"""Configuration management for MCPBoe.

This module defines the configuration for the BOE open-data API client and for
the application boundary. Values default to environment variables so the same
code runs unchanged in development, CI and a deployed function app.

Classes:
    BoeApiConfig: Upstream client settings (base URL, timeout, retries, pool size).
    AppConfig: Application identity reported by the health and info handlers.

Environment Variables:
    BOE_API_BASE_URL: Root URL of the upstream API
    BOE_API_TIMEOUT_SECONDS: Per-request timeout in seconds (default: 30)
    BOE_API_RETRY_COUNT: Retries after the initial attempt (default: 3)
    BOE_API_RETRY_DELAY_MS: Base backoff delay in milliseconds (default: 1000)
    BOE_API_MAX_CONCURRENT_REQUESTS: Connection pool cap (default: 10)
    BOE_API_USER_AGENT: User-Agent header sent on every request
    BOE_API_ENABLE_LOGGING: Per-request INFO logging toggle (default: true)
    BOE_API_CACHE_TTL_MINUTES: TTL for static tables (declared, not consumed)
    MCPBOE_LOG_LEVEL: Root log level when no YAML logging config is found
    MCPBOE_APP_NAME / MCPBOE_APP_VERSION / MCPBOE_ENVIRONMENT: Application identity

Python Learning Notes:
    - field(default_factory=...) reads the environment when each instance is built,
      not once at import time
    - __post_init__ runs after the generated __init__ and is used here to fail fast
"""

import os
from dataclasses import dataclass, field
from typing import Any, Dict

from .. import __version__


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class BoeApiConfig:
    """
    Configuration settings for the BOE open-data API client.

    Attributes:
        base_url: Root URL of the upstream REST API, without trailing slash.
        timeout_seconds: Hard timeout applied to each individual request.
        retry_count: Maximum number of retries after the initial attempt.
        retry_delay_ms: Base delay before the first retry; doubles per retry.
        max_concurrent_requests: Cap on pooled outbound connections.
        user_agent: Value of the User-Agent header.
        enable_logging: Whether the client logs every request at INFO level.
        cache_ttl_minutes: TTL for static auxiliary tables. No caching layer
            consumes it yet.
        log_level: Root log level used when no YAML logging config is present.

    Example:
        >>> config = BoeApiConfig(retry_count=5, retry_delay_ms=250)
    """

    base_url: str = field(
        default_factory=lambda: os.getenv(
            "BOE_API_BASE_URL", "https://www.boe.es/datosabiertos/api"
        )
    )
    timeout_seconds: float = field(
        default_factory=lambda: float(os.getenv("BOE_API_TIMEOUT_SECONDS", "30"))
    )
    retry_count: int = field(
        default_factory=lambda: int(os.getenv("BOE_API_RETRY_COUNT", "3"))
    )
    retry_delay_ms: int = field(
        default_factory=lambda: int(os.getenv("BOE_API_RETRY_DELAY_MS", "1000"))
    )
    max_concurrent_requests: int = field(
        default_factory=lambda: int(
            os.getenv("BOE_API_MAX_CONCURRENT_REQUESTS", "10")
        )
    )
    user_agent: str = field(
        default_factory=lambda: os.getenv("BOE_API_USER_AGENT", "MCPBoe/1.0")
    )
    enable_logging: bool = field(
        default_factory=lambda: _env_bool("BOE_API_ENABLE_LOGGING", "true")
    )
    cache_ttl_minutes: int = field(
        default_factory=lambda: int(os.getenv("BOE_API_CACHE_TTL_MINUTES", "60"))
    )
    log_level: str = field(
        default_factory=lambda: os.getenv("MCPBOE_LOG_LEVEL", "INFO")
    )

    def validate(self) -> bool:
        """
        Validate the configuration settings.

        Returns:
            True if configuration is valid, raises ValueError otherwise.

        Raises:
            ValueError: If configuration parameters are invalid.
        """
        if not self.base_url.startswith(("http://", "https://")):
            raise ValueError("base_url must be an http(s) URL")
        if self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")
        if self.retry_count < 0:
            raise ValueError("retry_count must be >= 0")
        if self.retry_delay_ms < 0:
            raise ValueError("retry_delay_ms must be >= 0")
        if self.max_concurrent_requests <= 0:
            raise ValueError("max_concurrent_requests must be positive")
        if not self.user_agent:
            raise ValueError("user_agent must not be empty")
        if self.cache_ttl_minutes < 0:
            raise ValueError("cache_ttl_minutes must be >= 0")

        return True

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "base_url": self.base_url,
            "timeout_seconds": self.timeout_seconds,
            "retry_count": self.retry_count,
            "retry_delay_ms": self.retry_delay_ms,
            "max_concurrent_requests": self.max_concurrent_requests,
            "user_agent": self.user_agent,
            "enable_logging": self.enable_logging,
            "cache_ttl_minutes": self.cache_ttl_minutes,
            "log_level": self.log_level,
        }

    def __post_init__(self):
        """Normalize and validate configuration after initialization."""
        self.base_url = self.base_url.rstrip("/")
        self.validate()


@dataclass
class AppConfig:
    """Application identity reported by the health and info handlers."""

    name: str = field(
        default_factory=lambda: os.getenv("MCPBOE_APP_NAME", "MCPBoe")
    )
    version: str = field(
        default_factory=lambda: os.getenv("MCPBOE_APP_VERSION", __version__)
    )
    environment: str = field(
        default_factory=lambda: os.getenv("MCPBOE_ENVIRONMENT", "Development")
    )
