"""Application configuration helpers."""

from __future__ import annotations

from .errors import ConfigurationError
from .logging import configure_logging
from .settings import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_NAMESPACE_DELIMITER,
    DiscriminatorSettings,
    get_settings,
)

__all__ = [
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_NAMESPACE_DELIMITER",
    "ConfigurationError",
    "DiscriminatorSettings",
    "configure_logging",
    "get_settings",
]
