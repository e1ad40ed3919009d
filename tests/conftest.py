import pytest

from stringer import config


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Isolate every test from the caller's STRINGER_* environment."""
    monkeypatch.delenv(config.DIGITS_ENV, raising=False)
    config.clear_cache()
    yield
    config.clear_cache()
