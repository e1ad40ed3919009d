import pytest

from stringer import config
from stringer.errors import ConfigError
from stringer.models import DigitMode


def test_digit_mode_defaults_to_unicode():
    assert config.digit_mode() is DigitMode.UNICODE


def test_digit_mode_reads_env(monkeypatch):
    monkeypatch.setenv("STRINGER_DIGITS", "ASCII")
    config.clear_cache()

    assert config.digit_mode() is DigitMode.ASCII


def test_explicit_choice_beats_env(monkeypatch):
    monkeypatch.setenv("STRINGER_DIGITS", "ascii")
    config.clear_cache()

    assert config.digit_mode(DigitMode.UNICODE) is DigitMode.UNICODE


def test_invalid_env_value_fails_fast(monkeypatch):
    monkeypatch.setenv("STRINGER_DIGITS", "roman")
    config.clear_cache()

    with pytest.raises(ConfigError, match="STRINGER_DIGITS"):
        config.load_config()


def test_load_config_is_cached(monkeypatch):
    assert config.load_config() == {"digits": "unicode"}

    monkeypatch.setenv("STRINGER_DIGITS", "ascii")
    assert config.load_config() == {"digits": "unicode"}

    config.clear_cache()
    assert config.load_config() == {"digits": "ascii"}
