"""Input path normalization and classification."""

import logging
import os
import stat
from pathlib import Path

from jest_config_path.config.enums import PathState

logger = logging.getLogger(__name__)


class PathClassifier:
    """Turn a user-supplied path into an absolute path and tell what it is.

    ``normalize`` is pure path arithmetic; ``classify`` is the only place
    that touches the filesystem.
    """

    @staticmethod
    def normalize(input_path: str | os.PathLike[str], root_dir: str | os.PathLike[str]) -> Path:
        """Return ``input_path`` as an absolute path, resolving it against ``root_dir``.

        Args:
            input_path: Absolute path, or path relative to ``root_dir``
            root_dir: Directory used for relative inputs

        Returns:
            Lexically normalized absolute path. Symlinks are not resolved.
        """
        path = Path(input_path)
        if not path.is_absolute():
            path = Path(root_dir) / path
        return Path(os.path.normpath(path))

    def classify(self, path: Path) -> PathState:
        """Return whether ``path`` is an existing file, an existing directory, or missing.

        Raises:
            OSError: Any failure other than "does not exist", e.g. a
                permission error on a parent directory.
        """
        try:
            mode = path.stat().st_mode
        except (FileNotFoundError, NotADirectoryError):
            state = PathState.MISSING
        else:
            state = PathState.DIRECTORY if stat.S_ISDIR(mode) else PathState.FILE
        logger.debug("Classified %s as %s", path, state.name)
        return state

    def is_file(self, path: Path) -> bool:
        """Return True if ``path`` exists and is not a directory."""
        return self.classify(path) is PathState.FILE
