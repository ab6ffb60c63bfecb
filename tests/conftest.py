from __future__ import annotations

import pytest

from presence.config import PresenceSettings, lazy_settings
from presence.options import SerializerOptions, add_presence_support
from presence.serializer import JsonSerializer


@pytest.fixture
def options() -> SerializerOptions:
    return add_presence_support(SerializerOptions())


@pytest.fixture
def serializer(options: SerializerOptions) -> JsonSerializer:
    return JsonSerializer(options)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's PRESENCE_* environment out of the tests."""
    monkeypatch.delenv('LOAD_ENV_FILE', raising=False)
    for name in ('PRESENCE_APP_NAME', 'PRESENCE_JSON_INDENT', 'PRESENCE_BY_ALIAS', 'PRESENCE_LOG_LEVEL'):
        monkeypatch.delenv(name, raising=False)
    # Fresh proxy so each test loads the environment it sets up
    monkeypatch.setattr('presence.cli.settings', lazy_settings(PresenceSettings))
