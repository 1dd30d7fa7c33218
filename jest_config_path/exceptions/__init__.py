"""Exception hierarchy for jest-config-path."""
from jest_config_path.exceptions.base import ConfigError
from jest_config_path.exceptions.config import (
    RootDirectoryNotFoundError,
    RootDirNotAbsoluteError,
    ConfigNotFoundError,
    ConfigParseError,
    PolicyConfigError,
)

__all__ = [
    "ConfigError",
    "RootDirectoryNotFoundError",
    "RootDirNotAbsoluteError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "PolicyConfigError",
]
