"""Runtime settings read from the environment."""

import os
from functools import lru_cache

from stringer.errors import ConfigError
from stringer.models import DigitMode

DIGITS_ENV = "STRINGER_DIGITS"


def _validate_config(cfg: dict) -> None:
    """Validate settings. Fail fast on unsupported values."""
    allowed = {m.value for m in DigitMode}
    if cfg["digits"] not in allowed:
        raise ConfigError(
            f"{DIGITS_ENV}={cfg['digits']!r} is not supported "
            f"(expected one of: {', '.join(sorted(allowed))})"
        )


def clear_cache():
    load_config.cache_clear()


@lru_cache(maxsize=1)
def load_config() -> dict:
    """Load settings from the environment, falling back to defaults."""
    raw = os.environ.get(DIGITS_ENV, "").strip().lower()
    cfg = {"digits": raw or DigitMode.UNICODE.value}
    _validate_config(cfg)
    return cfg


def digit_mode(explicit: DigitMode | None = None) -> DigitMode:
    """Resolve the digit set from an explicit choice or STRINGER_DIGITS."""
    if explicit is not None:
        return DigitMode(explicit)
    return DigitMode(load_config()["digits"])
