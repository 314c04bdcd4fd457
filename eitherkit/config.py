"""
Configuration for eitherkit.

The library has no required configuration. The settings here only control
its logging: the level and format used by ``configure_logging`` and whether
collectors trace their combine and finish steps. Settings are read from
environment variables, validated, and reported as an ``Either`` so that every
problem is listed at once.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, Field, ValidationError, field_validator

from eitherkit.core.collectors import to_valid_list_all
from eitherkit.core.either import Either
from eitherkit.errors import ConfigurationError

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "eitherkit"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

ENV_LOG_LEVEL = "EITHERKIT_LOG_LEVEL"
ENV_LOG_FORMAT = "EITHERKIT_LOG_FORMAT"
ENV_TRACE_COLLECTORS = "EITHERKIT_TRACE_COLLECTORS"

_TRUE_VALUES = ("true", "1", "yes", "on")
_FALSE_VALUES = ("false", "0", "no", "off")


class LogLevel(Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @property
    def numeric(self) -> int:
        return logging.getLevelName(self.value)


class ConfigValidator(BaseModel):
    """Validator for configuration parameters."""

    log_level: str = Field(..., pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    log_format: str = Field(..., min_length=1)
    trace_collectors: bool = False

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        return v.strip().upper() if isinstance(v, str) else v

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Ensure the format string can render a record."""
        record = logging.LogRecord("eitherkit", logging.INFO, __file__, 0, "", (), None)
        try:
            logging.Formatter(v).format(record)
        except (KeyError, ValueError, TypeError) as e:
            raise ValueError(f"cannot format a log record: {e}") from e
        return v


@dataclass(frozen=True)
class LibraryConfig:
    """Library-wide settings."""

    log_level: LogLevel = LogLevel.WARNING
    log_format: str = DEFAULT_LOG_FORMAT
    trace_collectors: bool = False

    @classmethod
    def create(
        cls,
        log_level: str = LogLevel.WARNING.value,
        log_format: str = DEFAULT_LOG_FORMAT,
        trace_collectors: bool = False,
    ) -> Either[list[str], "LibraryConfig"]:
        """Create a config, or a Left listing every invalid setting."""
        try:
            validated = ConfigValidator(
                log_level=log_level,
                log_format=log_format,
                trace_collectors=trace_collectors,
            )
        except ValidationError as e:
            return Either.left(
                [
                    f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                    for error in e.errors()
                ]
            )
        return Either.right(
            cls(
                log_level=LogLevel[validated.log_level],
                log_format=validated.log_format,
                trace_collectors=validated.trace_collectors,
            )
        )

    @classmethod
    def from_env(cls) -> Either[list[str], "LibraryConfig"]:
        """Build a config from ``EITHERKIT_*`` environment variables."""
        parsed = to_valid_list_all().collect(
            [
                parse_choice_env(ENV_LOG_LEVEL, LogLevel, LogLevel.WARNING),
                parse_str_env(ENV_LOG_FORMAT, DEFAULT_LOG_FORMAT),
                parse_bool_env(ENV_TRACE_COLLECTORS, False),
            ]
        )
        return parsed.flat_map(
            lambda values: cls.create(
                log_level=values[0].value,
                log_format=values[1],
                trace_collectors=values[2],
            )
        )

    @classmethod
    def from_env_or_raise(cls) -> "LibraryConfig":
        """Like ``from_env``, but raise ConfigurationError on invalid settings."""
        return cls.from_env().or_else_throw(ConfigurationError)


# Environment variable parsing
def parse_env_var(key: str, default: str | None = None) -> str | None:
    """Parse environment variable with optional default."""
    return os.environ.get(key, default)


def parse_str_env(key: str, default: str) -> Either[str, str]:
    value = parse_env_var(key)
    if value is None or value == "":
        return Either.right(default)
    return Either.right(value)


def parse_bool_env(key: str, default: bool = False) -> Either[str, bool]:
    """Parse boolean environment variable."""
    value = parse_env_var(key)
    if value is None or value.strip() == "":
        return Either.right(default)
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return Either.right(True)
    if normalized in _FALSE_VALUES:
        return Either.right(False)
    return Either.left(f"Invalid boolean for {key}: {value}")


def parse_choice_env(key: str, choices: type[Enum], default: Enum) -> Either[str, Enum]:
    """Parse an environment variable naming a member of ``choices``."""
    value = parse_env_var(key)
    if value is None or value.strip() == "":
        return Either.right(default)
    try:
        return Either.right(choices[value.strip().upper()])
    except KeyError:
        allowed = ", ".join(member.name for member in choices)
        return Either.left(f"Invalid value for {key}: {value} (expected one of {allowed})")


_active_config = LibraryConfig()


def get_config() -> LibraryConfig:
    """Return the active library config."""
    return _active_config


def set_config(config: LibraryConfig) -> None:
    """Replace the active library config."""
    global _active_config
    _active_config = config


def load_config_from_env() -> LibraryConfig:
    """Activate the config described by the environment.

    Invalid settings are logged and the defaults are kept.
    """
    result = LibraryConfig.from_env()
    result.accept(
        lambda problems: logger.warning(
            "Ignoring invalid eitherkit settings: %s", "; ".join(problems)
        ),
        set_config,
    )
    return get_config()


_HANDLER_MARKER = "_eitherkit_handler"


def configure_logging(config: LibraryConfig | None = None) -> logging.Logger:
    """Attach a stream handler to the ``eitherkit`` logger.

    Calling this again replaces the handler added by the previous call.
    """
    config = config or get_config()
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(config.log_format))
    setattr(handler, _HANDLER_MARKER, True)
    package_logger.addHandler(handler)
    package_logger.setLevel(config.log_level.numeric)
    return package_logger


__all__ = [
    "DEFAULT_LOG_FORMAT",
    "ENV_LOG_FORMAT",
    "ENV_LOG_LEVEL",
    "ENV_TRACE_COLLECTORS",
    "ConfigValidator",
    "LibraryConfig",
    "LogLevel",
    "configure_logging",
    "get_config",
    "load_config_from_env",
    "parse_bool_env",
    "parse_choice_env",
    "parse_env_var",
    "parse_str_env",
    "set_config",
]
