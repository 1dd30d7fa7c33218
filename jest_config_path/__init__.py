"""Locate the configuration file of a Jest project."""
from jest_config_path.constants import VERSION, JEST_CONFIG_EXT_ORDER
from jest_config_path.config import (
    ConfigPathResolver,
    ExtensionPriorityList,
    resolve_config_path,
)
from jest_config_path.exceptions import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    RootDirectoryNotFoundError,
)

__version__ = VERSION

__all__ = [
    "JEST_CONFIG_EXT_ORDER",
    "ConfigPathResolver",
    "ExtensionPriorityList",
    "resolve_config_path",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "RootDirectoryNotFoundError",
]
