"""Utility modules for MCPBoe.

This package contains shared utilities that support the client, façades and
handlers:

- config.py: Environment-driven configuration for the upstream API client
- __init__.py: Centralized logging setup and logger access

Integration Points:
    - BoeApiConfig is built once at process start and handed to BoeApiClient
    - get_logger(__name__) is used by every module for consistent formatting

Python Learning Notes:
    - logging.config.dictConfig() applies a complete logging configuration
    - The __all__ list at the bottom controls what gets imported with "from utils import *"
"""

import logging
import logging.config
import os
from pathlib import Path
from typing import Optional

import yaml

from .config import AppConfig, BoeApiConfig

# Global flag to track if logging has been configured
_logging_configured = False

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(config_path: Optional[Path] = None) -> None:
    """Set up logging configuration from YAML file.

    This function configures the logging system using a YAML configuration
    file. It should be called once at application startup, before any other
    modules request loggers.

    Resolution order for the configuration file:
        1. The explicit ``config_path`` argument
        2. The ``MCPBOE_LOGGING_CONFIG`` environment variable
        3. ``logging_config.yaml`` in the project root

    When none of those exists (for example in a non-editable install) the
    root logger is configured with ``logging.basicConfig`` at the level given
    by ``MCPBOE_LOG_LEVEL``.

    Args:
        config_path (Optional[Path]): Path to the logging configuration YAML file.

    Raises:
        FileNotFoundError: If ``config_path`` is given explicitly and does not exist.
        yaml.YAMLError: If the YAML configuration file is malformed.

    Example Usage:
        ```python
        from mcpboe.utils import setup_logging

        setup_logging()
        ```
    """
    global _logging_configured

    if _logging_configured:
        return

    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(f"Logging config file not found: {config_path}")
    else:
        env_path = os.getenv("MCPBOE_LOGGING_CONFIG")
        if env_path:
            config_path = Path(env_path)
        else:
            # Default to logging_config.yaml in project root
            project_root = Path(__file__).parent.parent.parent.parent
            config_path = project_root / "logging_config.yaml"

    if config_path.exists():
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
        logging.config.dictConfig(config)
    else:
        logging.basicConfig(
            level=os.getenv("MCPBOE_LOG_LEVEL", "INFO").upper(),
            format=DEFAULT_LOG_FORMAT,
        )

    _logging_configured = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger instance using the centralized logging configuration.

    If setup_logging() hasn't been called yet, it will be called automatically
    with default settings.

    Args:
        name (Optional[str]): Logger name to use. For module-specific logging,
            pass __name__ explicitly.

    Returns:
        logging.Logger: A configured logger instance.

    Example Usage:
        ```python
        from mcpboe.utils import get_logger

        logger = get_logger(__name__)
        logger.info("General information")
        ```
    """
    if not _logging_configured:
        setup_logging()

    return logging.getLogger(name or __name__)


__all__ = [
    "AppConfig",
    "BoeApiConfig",
    "setup_logging",
    "get_logger",
]
