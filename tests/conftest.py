import pytest

_SETTINGS_ENV_VARS = ("APP_ENV", "LOG_LEVEL", "LOCALE", "OUTPUT_FORMAT")


@pytest.fixture(autouse=True)
def _isolated_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment out of Settings()."""
    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
