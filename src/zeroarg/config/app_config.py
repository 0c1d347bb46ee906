from __future__ import annotations

import os
from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from zeroarg.common.exceptions import ConfigurationError
from zeroarg.common.logging import LogFormat

ENV_LOG_LEVEL = "ZEROARG_LOG_LEVEL"
ENV_LOG_FORMAT = "ZEROARG_LOG_FORMAT"


class LogLevel(str, Enum):
    """Log levels for configuration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(frozen=True)

    level: LogLevel = LogLevel.WARNING
    format: LogFormat = LogFormat.PLAIN

    @field_validator("level", "format", mode="before")
    @classmethod
    def strip_whitespace(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip()
        return v


class AppConfig(BaseModel):
    """Top-level configuration for the zeroarg command."""

    model_config = ConfigDict(frozen=True)

    logging: LoggingConfig = LoggingConfig()

    @classmethod
    def from_env(cls, *, environ: Mapping[str, str] | None = None) -> AppConfig:
        """Create AppConfig from environment variables.

        Raises:
            ConfigurationError: If a variable holds an unknown level or format.
        """
        env: Mapping[str, str] = os.environ if environ is None else environ

        logging_values: dict[str, Any] = {}
        if env.get(ENV_LOG_LEVEL):
            logging_values["level"] = env[ENV_LOG_LEVEL].upper()
        if env.get(ENV_LOG_FORMAT):
            logging_values["format"] = env[ENV_LOG_FORMAT].lower()

        return cls.from_dict({"logging": logging_values})

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AppConfig:
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ConfigurationError(
                "Invalid zeroarg configuration",
                details={"errors": exc.errors(include_url=False)},
            ) from exc

    def with_overrides(
        self, *, level: str | None = None, log_format: str | None = None
    ) -> AppConfig:
        """Return a copy with command-line values applied over this config."""
        logging_values = self.logging.model_dump()
        if level is not None:
            logging_values["level"] = level.upper()
        if log_format is not None:
            logging_values["format"] = log_format.lower()
        return AppConfig.from_dict({"logging": logging_values})
