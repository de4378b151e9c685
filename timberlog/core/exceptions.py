"""Logger exceptions"""


class ConfigurationError(ValueError):
    """Raised when a logger configuration is invalid.

    Detected eagerly while the configuration is built, so a logger never
    exists in an invalid state.
    """
