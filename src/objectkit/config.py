"""Runtime configuration for the objectkit CLI."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

LOGGER_NAME = "objectkit"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """Raised when an ``OBJECTKIT_*`` environment variable has an invalid value."""


@dataclass(frozen=True)
class ObjectkitConfig:
    log_level: str = "WARNING"
    json_indent: int | None = None  # None = compact JSON text

    @classmethod
    def from_env(cls) -> ObjectkitConfig:
        """Build a config from ``OBJECTKIT_*`` environment variables.

        Raises:
            ConfigError: a variable holds an unknown level or a non-integer indent.
        """
        level = os.environ.get("OBJECTKIT_LOG_LEVEL", cls.log_level).strip().upper()
        if level not in LOG_LEVELS:
            raise ConfigError(
                f"OBJECTKIT_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {level!r}"
            )

        raw_indent = os.environ.get("OBJECTKIT_JSON_INDENT", "").strip()
        indent = None
        if raw_indent:
            try:
                indent = int(raw_indent)
            except ValueError:
                raise ConfigError(
                    f"OBJECTKIT_JSON_INDENT must be an integer, got {raw_indent!r}"
                ) from None
        return cls(log_level=level, json_indent=indent)


def configure_logging(config: ObjectkitConfig) -> logging.Logger:
    """Attach a stderr handler to the ``objectkit`` logger at the configured level."""
    log = logging.getLogger(LOGGER_NAME)
    log.setLevel(config.log_level.upper())
    if not log.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        log.addHandler(handler)
    return log
