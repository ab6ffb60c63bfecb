"""Tests for PresenceSettings loading."""

from __future__ import annotations

from pathlib import Path

import pydantic
import pytest

from presence.config import PresenceSettings, get_settings, lazy_settings


def test_defaults() -> None:
    settings = get_settings(PresenceSettings)

    assert settings.APP_NAME == 'pydantic-presence'
    assert settings.JSON_INDENT is None
    assert settings.BY_ALIAS is False
    assert settings.LOG_LEVEL == 'WARNING'


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv('PRESENCE_JSON_INDENT', '4')
    monkeypatch.setenv('PRESENCE_BY_ALIAS', 'true')
    monkeypatch.setenv('PRESENCE_LOG_LEVEL', 'debug')

    settings = get_settings(PresenceSettings)

    assert settings.JSON_INDENT == 4
    assert settings.BY_ALIAS is True
    assert settings.LOG_LEVEL == 'DEBUG'


@pytest.mark.parametrize('indent', [-1, 9])
def test_json_indent_range(indent: int) -> None:
    with pytest.raises(pydantic.ValidationError):
        PresenceSettings(JSON_INDENT=indent, _env_file=None)


def test_invalid_log_level() -> None:
    with pytest.raises(pydantic.ValidationError):
        PresenceSettings(LOG_LEVEL='chatty', _env_file=None)


def test_env_file(tmp_path: Path) -> None:
    env_file = tmp_path / 'presence.env'
    env_file.write_text('PRESENCE_APP_NAME=orders-api\nPRESENCE_JSON_INDENT=2\n')

    settings = get_settings(PresenceSettings, env_file=str(env_file))

    assert settings.APP_NAME == 'orders-api'
    assert settings.JSON_INDENT == 2


def test_env_file_from_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_file = tmp_path / 'presence.env'
    env_file.write_text('PRESENCE_LOG_LEVEL=info\n')
    monkeypatch.setenv('LOAD_ENV_FILE', str(env_file))

    assert get_settings(PresenceSettings).LOG_LEVEL == 'INFO'


def test_missing_env_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        get_settings(PresenceSettings, env_file=str(tmp_path / 'missing.env'))


def test_lazy_settings_defer_loading(monkeypatch: pytest.MonkeyPatch) -> None:
    settings = lazy_settings(PresenceSettings)
    monkeypatch.setenv('PRESENCE_APP_NAME', 'late')

    # Environment is read on first attribute access, not at creation
    assert settings.APP_NAME == 'late'
