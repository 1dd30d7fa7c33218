"""Configuration path resolution for jest-config-path."""

import logging
import os
from pathlib import Path

from jest_config_path.config.classifier import PathClassifier
from jest_config_path.config.default_source import DefaultPolicySource
from jest_config_path.config.disambiguation import AmbiguityResolver
from jest_config_path.config.enums import PathState
from jest_config_path.config.models import ExtensionPriorityList, ResolutionRequest
from jest_config_path.config.protocols import PolicySource
from jest_config_path.config.scanner import CandidateScanner
from jest_config_path.constants import PACKAGE_JSON
from jest_config_path.exceptions import RootDirectoryNotFoundError, RootDirNotAbsoluteError
from jest_config_path.output import ConsoleOutputHandler, OutputHandler

logger = logging.getLogger(__name__)


class ConfigPathResolver:
    """Resolve the configuration file for a project.

    Resolution order:
    1. An existing file is returned as-is, whatever its name or extension
    2. A missing path raises RootDirectoryNotFoundError
    3. A directory is scanned for ``jest.config.<ext>`` files and a
       ``package.json`` with a ``jest`` key; the highest priority wins

    Only the given directory is searched, never its parents. Nothing is
    cached, so every call reflects the current state of the filesystem.
    """

    def __init__(
            self,
            extensions: ExtensionPriorityList | None = None,
            *,
            policy: PolicySource | None = None,
            output: OutputHandler | None = None,
            classifier: PathClassifier | None = None,
    ) -> None:
        """Initialize the config path resolver.

        Args:
            extensions: Ready-made extension priority list
            policy: Source to load the priority list from when ``extensions``
                is not given (built-in order if None)
            output: Sink for the multiple-configs warning (Rich console if None)
            classifier: Path classifier (default if None)

        Raises:
            ValueError: If both ``extensions`` and ``policy`` are given
            PolicyConfigError: If the policy source cannot be loaded
        """
        if extensions is not None and policy is not None:
            raise ValueError("Pass either extensions or policy, not both")
        if extensions is None:
            policy = policy or DefaultPolicySource()
            logger.debug("Loading extension policy from %s", policy.source_description)
            extensions = policy.load()
        self.extensions = extensions
        self.output = output or ConsoleOutputHandler()
        self.classifier = classifier or PathClassifier()

    def resolve(self, input_path: str | os.PathLike[str], root_dir: str | os.PathLike[str]) -> Path:
        """Resolve ``input_path`` to a single configuration file.

        Args:
            input_path: File or directory, absolute or relative to ``root_dir``
            root_dir: Absolute directory used to resolve relative inputs

        Returns:
            Absolute path to the configuration file

        Raises:
            RootDirNotAbsoluteError: If ``root_dir`` is relative
            RootDirectoryNotFoundError: If the path is neither a file nor a directory
            ConfigNotFoundError: If the directory holds no configuration
            ConfigParseError: If the directory's package.json is malformed
        """
        request = ResolutionRequest(input_path=Path(input_path), root_dir=Path(root_dir))
        if not request.root_dir.is_absolute():
            raise RootDirNotAbsoluteError(root_dir)

        absolute_path = request.normalized_path
        logger.debug("Resolving config path %s (rootDir %s)", absolute_path, request.root_dir)

        state = self.classifier.classify(absolute_path)
        if state is PathState.FILE:
            return absolute_path
        if state is PathState.MISSING:
            raise RootDirectoryNotFoundError(request.input_path, request.root_dir)

        scanner = CandidateScanner(self.extensions, classifier=self.classifier)
        candidates = scanner.scan(absolute_path)
        return AmbiguityResolver(self.output).resolve(
            candidates,
            absolute_path,
            root_dir=request.root_dir,
            searched_names=(*self.extensions.config_file_names, PACKAGE_JSON),
        )


def resolve_config_path(
        input_path: str | os.PathLike[str],
        root_dir: str | os.PathLike[str],
        *,
        output: OutputHandler | None = None,
        extensions: ExtensionPriorityList | None = None,
        policy: PolicySource | None = None,
) -> Path:
    """Resolve ``input_path`` against ``root_dir`` to one configuration file.

    Convenience wrapper around :class:`ConfigPathResolver`.
    """
    return ConfigPathResolver(extensions, policy=policy, output=output).resolve(input_path, root_dir)
