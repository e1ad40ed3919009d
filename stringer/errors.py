class StringerError(Exception):
    """Base exception for stringer errors."""

    pass


class ConfigError(StringerError):
    """Raised when a setting has an unsupported value."""

    pass
