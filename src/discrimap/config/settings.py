"""Resolver settings loaded from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Final

from discrimap.domain.discrimination.naming import DEFAULT_NAMESPACE_DELIMITER

from .errors import ConfigurationError

DEFAULT_LOG_LEVEL: Final[str] = "INFO"

_LOG_LEVELS: Final[frozenset[str]] = frozenset(
    {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}
)


@dataclass(frozen=True, slots=True)
class DiscriminatorSettings:
    namespace_delimiter: str = DEFAULT_NAMESPACE_DELIMITER
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        if not self.namespace_delimiter:
            raise ConfigurationError("Namespace delimiter must not be empty")
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level: {self.log_level}")

    @property
    def logging_level(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level.upper()]


def get_settings() -> DiscriminatorSettings:
    """Build settings from ``DISCRIMAP_*`` environment variables."""

    delimiter = os.getenv("DISCRIMAP_NAMESPACE_DELIMITER")
    log_level = os.getenv("DISCRIMAP_LOG_LEVEL")
    return DiscriminatorSettings(
        namespace_delimiter=DEFAULT_NAMESPACE_DELIMITER if delimiter is None else delimiter,
        log_level=(log_level or DEFAULT_LOG_LEVEL).strip(),
    )
