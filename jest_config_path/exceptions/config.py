"""Resolution-related exceptions for jest-config-path."""

from collections.abc import Sequence
from pathlib import Path

from jest_config_path.exceptions.base import ConfigError


class RootDirectoryNotFoundError(ConfigError):
    """Raised when the path to resolve exists neither as a file nor as a directory.

    Missing explicit files and missing directories both end up here; the
    resolver does not distinguish between the two.
    """

    def __init__(self, path: Path | str, root_dir: Path | str) -> None:
        super().__init__(
            "Can't find a root directory while resolving a config file path.\n"
            f"Provided path to resolve: {path}\n"
            f"rootDir: {root_dir}"
        )
        self.path = path
        self.root_dir = root_dir


class RootDirNotAbsoluteError(ConfigError):
    """Raised when the root directory used for relative inputs is itself relative."""

    def __init__(self, root_dir: Path | str) -> None:
        super().__init__(f'"rootDir" must be an absolute path. rootDir: {root_dir}')
        self.root_dir = root_dir


class ConfigNotFoundError(ConfigError):
    """Raised when a directory contains no configuration candidate at all.

    The message lists the file names that were looked for, in priority order.
    """

    def __init__(
        self,
        directory: Path,
        root_dir: Path | str | None = None,
        *,
        searched_names: Sequence[str] = (),
    ) -> None:
        lines = [
            "Could not find a config file based on provided values:",
            f"path: {directory}",
        ]
        if root_dir is not None:
            lines.append(f"rootDir: {root_dir}")
        if searched_names:
            lines.append(
                "Config paths must be specified by either a direct path to a config "
                "file, or a path to a directory containing one of these files, "
                f"in this exact order: {', '.join(searched_names)}"
            )
        super().__init__("\n".join(lines))
        self.directory = directory
        self.root_dir = root_dir
        self.searched_names = tuple(searched_names)


class ConfigParseError(ConfigError):
    """Raised when ``package.json`` exists but cannot be read or is not valid JSON.

    A malformed manifest is never treated as "no manifest".
    """

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to parse {path}: {reason}")
        self.path = path
        self.reason = reason


class PolicyConfigError(ConfigError):
    """Exception raised for extension policy file errors.

    This includes:
    - File not found
    - YAML parsing errors
    - Invalid structure (missing ``extensions``, wrong types)
    - Unsupported schema version
    """
