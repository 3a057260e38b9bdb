import pytest

from csv_extra import settings


@pytest.fixture(autouse=True)
def _reset_global_settings(monkeypatch):
    monkeypatch.delenv(settings.CONFIG_YAML_ENV_VAR, raising=False)
    monkeypatch.setattr(settings, '_settings_singleton', None)
