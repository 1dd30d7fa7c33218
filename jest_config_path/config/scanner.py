"""Config candidate discovery for a single directory."""

import json
import logging
from pathlib import Path

from jest_config_path.config.classifier import PathClassifier
from jest_config_path.config.enums import CandidateKind
from jest_config_path.config.models import Candidate, ExtensionPriorityList
from jest_config_path.constants import JEST_CONFIG_BASE_NAME, PACKAGE_JSON, PACKAGE_JSON_JEST_KEY
from jest_config_path.exceptions import ConfigParseError

logger = logging.getLogger(__name__)


class CandidateScanner:
    """Enumerate every configuration candidate in a directory.

    Only the fixed set of names derived from the priority list is probed,
    plus ``package.json``; the directory is never listed, so results do not
    depend on how the platform orders directory entries.

    Attributes:
        extensions: Extension policy used for names and priorities
        classifier: Classifier used for existence checks
    """

    def __init__(
            self,
            extensions: ExtensionPriorityList | None = None,
            *,
            classifier: PathClassifier | None = None,
    ) -> None:
        self.extensions = extensions or ExtensionPriorityList()
        self.classifier = classifier or PathClassifier()

    def scan(self, directory: Path) -> list[Candidate]:
        """Return all candidates found in ``directory``, in no particular order.

        Args:
            directory: Absolute path of an existing directory

        Returns:
            Candidates deduplicated by absolute path; possibly empty.

        Raises:
            ConfigParseError: If package.json exists but cannot be read or parsed
        """
        found: dict[Path, Candidate] = {}

        for ext in self.extensions.extensions:
            config_path = directory / f"{JEST_CONFIG_BASE_NAME}{ext}"
            if self.classifier.is_file(config_path):
                found.setdefault(config_path, Candidate(
                    path=config_path,
                    kind=CandidateKind.JEST_CONFIG_FILE,
                    priority=self.extensions.priority_of(ext),
                ))

        manifest = self._scan_manifest(directory)
        if manifest is not None:
            found.setdefault(manifest.path, manifest)

        for candidate in found.values():
            logger.debug("Found %s candidate %s (priority %d)",
                         candidate.kind.name, candidate.path, candidate.priority)
        return list(found.values())

    def _scan_manifest(self, directory: Path) -> Candidate | None:
        """Return a candidate for package.json if it carries a ``jest`` key.

        Raises:
            ConfigParseError: If the manifest cannot be read or is not valid JSON
        """
        manifest_path = directory / PACKAGE_JSON
        if not self.classifier.is_file(manifest_path):
            return None

        data = self._read_manifest(manifest_path)
        if not isinstance(data, dict) or PACKAGE_JSON_JEST_KEY not in data:
            logger.debug("%s has no '%s' key, skipping", manifest_path, PACKAGE_JSON_JEST_KEY)
            return None

        return Candidate(
            path=manifest_path,
            kind=CandidateKind.PACKAGE_MANIFEST_WITH_JEST,
            priority=self.extensions.manifest_priority,
        )

    @staticmethod
    def _read_manifest(manifest_path: Path) -> object:
        try:
            with open(manifest_path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigParseError(
                manifest_path, f"invalid JSON (line {e.lineno}, column {e.colno}): {e.msg}"
            ) from e
        except UnicodeDecodeError as e:
            raise ConfigParseError(manifest_path, "file is not valid UTF-8") from e
        except OSError as e:
            raise ConfigParseError(manifest_path, f"file could not be read: {e}") from e
