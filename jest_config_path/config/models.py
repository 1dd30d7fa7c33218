"""Pydantic models for config path resolution."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from jest_config_path.config.classifier import PathClassifier
from jest_config_path.config.enums import CandidateKind
from jest_config_path.constants import JEST_CONFIG_BASE_NAME, JEST_CONFIG_EXT_ORDER, PACKAGE_JSON_JEST_KEY


class ExtensionPriorityList(BaseModel):
    """Ordered, immutable list of supported config file extensions.

    Position defines priority: index 0 wins every tie. The package.json
    fallback ranks below every extension.
    """

    model_config = ConfigDict(frozen=True)

    extensions: tuple[str, ...] = Field(default=JEST_CONFIG_EXT_ORDER, min_length=1)

    @field_validator("extensions")
    @classmethod
    def validate_extensions(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for ext in value:
            if len(ext) < 2 or not ext.startswith("."):
                raise ValueError(f"Extensions must start with '.', got {ext!r}")
        seen = set()
        for ext in value:
            if ext in seen:
                raise ValueError(f"Extension {ext} is listed more than once")
            seen.add(ext)
        return value

    def priority_of(self, extension: str) -> int:
        """Return the priority of ``extension`` (lower is better)."""
        try:
            return self.extensions.index(extension)
        except ValueError:
            raise ValueError(f"Unsupported config extension: {extension}") from None

    @property
    def manifest_priority(self) -> int:
        """Priority of a package.json candidate, worse than any extension."""
        return len(self.extensions)

    @property
    def config_file_names(self) -> tuple[str, ...]:
        """Config file names in priority order, e.g. ``jest.config.js``."""
        return tuple(f"{JEST_CONFIG_BASE_NAME}{ext}" for ext in self.extensions)


class Candidate(BaseModel):
    """A file that could serve as the project's configuration."""

    model_config = ConfigDict(frozen=True)

    path: Path
    kind: CandidateKind
    priority: int = Field(..., ge=0, description="Tie-break rank, 0 is best")

    @field_validator("path")
    @classmethod
    def validate_absolute(cls, value: Path) -> Path:
        if not value.is_absolute():
            raise ValueError(f"Candidate path must be absolute, got {value}")
        return value

    @property
    def display_path(self) -> str:
        if self.kind is CandidateKind.PACKAGE_MANIFEST_WITH_JEST:
            return f"`{PACKAGE_JSON_JEST_KEY}` key in {self.path}"
        return str(self.path)

    def sort_key(self) -> tuple[int, str]:
        return self.priority, str(self.path)


class ResolutionRequest(BaseModel):
    """Input to a single resolution call."""

    model_config = ConfigDict(frozen=True)

    input_path: Path
    root_dir: Path

    @property
    def normalized_path(self) -> Path:
        """Absolute form of ``input_path``, resolved against ``root_dir``."""
        return PathClassifier.normalize(self.input_path, self.root_dir)


class MultipleConfigsWarning(BaseModel):
    """Diagnostic for a directory holding more than one configuration.

    Candidates are kept in priority order; the first one is the winner.
    """

    model_config = ConfigDict(frozen=True)

    candidates: tuple[Candidate, ...] = Field(..., min_length=2)

    @field_validator("candidates")
    @classmethod
    def order_by_priority(cls, value: tuple[Candidate, ...]) -> tuple[Candidate, ...]:
        return tuple(sorted(value, key=Candidate.sort_key))

    @property
    def winner(self) -> Candidate:
        return self.candidates[0]

    @property
    def message(self) -> str:
        listed = "\n".join(f"    * {candidate.display_path}" for candidate in self.candidates)
        return (
            "Multiple configurations found:\n"
            f"{listed}\n\n"
            f"  Using {self.winner.path}.\n"
            "  Implicit config resolution does not allow multiple configuration files.\n"
            "  Either remove unused config files or select one explicitly with `--config`."
        )
