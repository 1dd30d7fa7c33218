"""Resolution enums for jest-config-path."""

from enum import Enum, auto


class PathState(Enum):
    """What a normalized input path refers to on disk."""

    FILE = auto()
    DIRECTORY = auto()
    MISSING = auto()


class CandidateKind(Enum):
    """Kinds of artifacts that can serve as the project configuration."""

    JEST_CONFIG_FILE = auto()
    PACKAGE_MANIFEST_WITH_JEST = auto()
