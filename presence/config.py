"""
Configuration for pydantic-presence tooling.

Settings are read from PRESENCE_* environment variables (and an optional .env
file) and feed SerializerOptions.from_settings() and the CLI logging setup.
"""

from __future__ import annotations

import logging
import os
import pathlib
from typing import TypeVar

import lazy_object_proxy
import pydantic
import pydantic_settings

T = TypeVar('T', bound='PresenceSettings')


class PresenceSettings(pydantic_settings.BaseSettings):
    """Serializer and logging configuration."""

    model_config = pydantic_settings.SettingsConfigDict(
        env_prefix='PRESENCE_',
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=True,  # Fail fast on misconfiguration
        extra='forbid',  # Reject unknown settings
    )

    APP_NAME: str = 'pydantic-presence'

    # Serialization
    JSON_INDENT: int | None = None  # None = compact output
    BY_ALIAS: bool = False

    LOG_LEVEL: str = 'WARNING'

    @pydantic.field_validator('JSON_INDENT')
    @classmethod
    def validate_json_indent(cls, v: int | None) -> int | None:
        if v is not None and not 0 <= v <= 8:
            raise ValueError('JSON_INDENT must be between 0-8')
        return v

    @pydantic.field_validator('LOG_LEVEL')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f'LOG_LEVEL must be a logging level name, got {v!r}')
        return level


def get_settings(settings_class: type[T], env_file: str | None = None) -> T:
    """
    Load settings from PRESENCE_* variables, plus a .env file when one is named.

    The file comes from env_file, else from LOAD_ENV_FILE. Without either, no
    .env file is read.

    Raises:
        FileNotFoundError: If the named .env file does not exist
    """
    env_file_path = env_file or os.getenv('LOAD_ENV_FILE')

    if not env_file_path:
        return settings_class(_env_file=None)

    resolved_path = pathlib.Path(env_file_path).resolve()
    if not resolved_path.exists():
        raise FileNotFoundError(f'Environment file not found: {resolved_path}')

    return settings_class(_env_file=resolved_path)


def lazy_settings(settings_class: type[T]) -> T:
    """Settings proxy that reads the environment on first attribute access."""
    return lazy_object_proxy.Proxy(lambda: get_settings(settings_class))


# Shared by the CLI commands; loaded on first use
settings = lazy_settings(PresenceSettings)
