"""
Runtime settings for the optics package, loaded from the environment.
"""
import logging
import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .log import configure_logging

ENV_PREFIX = "OPTICS_"


class OpticsSettings(BaseModel):
    """
    Settings that tune lens evaluation and diagnostics
    """
    model_config = ConfigDict(frozen=True)

    log_level: str = Field(
        default="WARNING",
        description="Level name for the 'optics' logger")
    list_probe_limit: int = Field(
        default=10_000, gt=0,
        description="Maximum number of indices a list() lift probes "
            "before it gives up")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) \
        -> "OpticsSettings":
        """
        Builds settings from OPTICS_* variables, falling back to defaults
        for the ones that are not set.
        """
        env = os.environ if environ is None else environ
        values = {
            name: env[ENV_PREFIX + name.upper()]
            for name in cls.model_fields
            if ENV_PREFIX + name.upper() in env
        }
        return cls.model_validate(values)


_settings: OpticsSettings | None = None


def get_settings() -> OpticsSettings:
    """
    Returns the active settings, loading them from the environment
    on first use.
    """
    global _settings  # pylint: disable=global-statement
    if _settings is None:
        _settings = OpticsSettings.from_env()
    return _settings


def configure(settings: OpticsSettings | None = None, **overrides) \
    -> OpticsSettings:
    """
    Installs settings (the current ones when None) with any field
    overrides, and applies the log level to the package logger.
    """
    global _settings  # pylint: disable=global-statement
    base = settings if settings is not None else get_settings()
    _settings = OpticsSettings.model_validate(
        {**base.model_dump(), **overrides}) if overrides else base
    configure_logging(_settings.log_level)
    return _settings


def reset() -> None:
    """Forgets installed settings so the next access reloads them."""
    global _settings  # pylint: disable=global-statement
    _settings = None
