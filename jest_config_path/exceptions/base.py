"""Base exception classes for jest-config-path."""


class ConfigError(Exception):
    """Base class for user-facing configuration resolution errors.

    All resolution-related exceptions inherit from this class so callers can
    handle every "could not pick a config file" failure in one place.
    """
