"""
Runtime settings for ratio-calc

The line driver takes no command-line flags; the only runtime knob is the log
verbosity, read from the environment.

Environment:
    RATIO_CALC_LOG_LEVEL — DEBUG | INFO | WARNING | ERROR | CRITICAL
"""

import os
from typing import Final, Mapping

from pydantic import BaseModel, Field, field_validator

from src.core.logging_config import DEFAULT_LOG_LEVEL

ENV_LOG_LEVEL: Final[str] = "RATIO_CALC_LOG_LEVEL"

VALID_LOG_LEVELS: Final[tuple[str, ...]] = (
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR",
    "CRITICAL",
)


class CalcSettings(BaseModel):
    """Immutable runtime settings."""

    log_level: str = Field(DEFAULT_LOG_LEVEL, description="Logging level name")

    model_config = {"frozen": True}

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Level must be one of the standard logging level names"""
        level = v.strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {VALID_LOG_LEVELS}, got {v!r}")
        return level

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "CalcSettings":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read from (default: os.environ)

        Returns:
            CalcSettings with defaults for anything unset
        """
        env = os.environ if environ is None else environ
        values = {}
        if env.get(ENV_LOG_LEVEL):
            values["log_level"] = env[ENV_LOG_LEVEL]
        return cls(**values)
