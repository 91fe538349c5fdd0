import pytest

from chromashade import reload_from_env


@pytest.fixture
def env_settings(monkeypatch):
    """Set CHROMASHADE_* variables for one test and restore the defaults afterwards."""
    def apply(**values):
        for key, value in values.items():
            monkeypatch.setenv(f"CHROMASHADE_{key.upper()}", value)
        return reload_from_env()

    yield apply
    monkeypatch.undo()
    reload_from_env()
