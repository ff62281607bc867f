"""Package configuration: Config and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from result_fut._logging import configure_logging

__all__ = [
    "Config",
    "get_config",
    "init",
]

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_LOG_FORMATS = ("json", "console")


@dataclass(frozen=True)
class Config:
    """Configuration for result-fut.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_logs: Emit JSON lines if True, colored console output otherwise.
    """

    log_level: str | None = None
    json_logs: bool = True


# Global configuration (set by init())
_config: Config | None = None


def _detect_log_level() -> str | None:
    """Read RESULT_FUT_LOG_LEVEL; unknown values are ignored with a warning."""
    env_level = os.environ.get("RESULT_FUT_LOG_LEVEL", "").upper()
    if not env_level:
        return None
    if env_level not in _LOG_LEVELS:
        logging.warning("Unknown RESULT_FUT_LOG_LEVEL value '%s', ignoring", env_level)
        return None
    return env_level


def _detect_json_logs() -> bool:
    """Read RESULT_FUT_LOG_FORMAT ("json" or "console"), defaulting to json."""
    env_format = os.environ.get("RESULT_FUT_LOG_FORMAT", "").lower()
    if env_format == "console":
        return False
    if env_format and env_format not in _LOG_FORMATS:
        logging.warning("Unknown RESULT_FUT_LOG_FORMAT value '%s', defaulting to json", env_format)
    return True


def init(
    log_level: str | None = None,
    json_logs: bool | None = None,
) -> Config:
    """Initialize result-fut with the given configuration.

    Explicit arguments take precedence over the RESULT_FUT_LOG_LEVEL and
    RESULT_FUT_LOG_FORMAT environment variables. When a log level is
    resolved, structured logging is configured through configure_logging().

    Args:
        log_level: Logging level. None = read from environment.
        json_logs: JSON (True) or console (False) output. None = read from environment.

    Returns:
        The active Config.

    Raises:
        ValueError: If log_level is not a known logging level.
    """
    global _config

    if log_level is not None:
        log_level = log_level.upper()
        if log_level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level {log_level!r}; expected one of {', '.join(_LOG_LEVELS)}")
    else:
        log_level = _detect_log_level()

    config = Config(
        log_level=log_level,
        json_logs=_detect_json_logs() if json_logs is None else json_logs,
    )

    if config.log_level is not None:
        configure_logging(config.log_level, json_output=config.json_logs)

    _config = config
    return config


def get_config() -> Config:
    """Get the active configuration.

    Returns the Config stored by init(), or one resolved from the environment
    if init() has not been called. The fallback does not configure logging.
    """
    if _config is None:
        return Config(log_level=_detect_log_level(), json_logs=_detect_json_logs())
    return _config
