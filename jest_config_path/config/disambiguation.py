"""Winner selection among configuration candidates."""

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from jest_config_path.config.models import Candidate, MultipleConfigsWarning
from jest_config_path.exceptions import ConfigNotFoundError
from jest_config_path.output.protocols import OutputHandler

logger = logging.getLogger(__name__)


class AmbiguityResolver:
    """Pick the single configuration to use from a directory's candidates.

    The lowest priority value wins. When several candidates compete, exactly
    one warning is sent to the output handler on every call.
    """

    def __init__(self, output: OutputHandler) -> None:
        self.output = output

    def resolve(
            self,
            candidates: Iterable[Candidate],
            directory: Path,
            *,
            root_dir: Path | None = None,
            searched_names: Sequence[str] = (),
    ) -> Path:
        """Return the winning candidate's path.

        Args:
            candidates: Candidates found in ``directory``
            directory: The directory that was searched (used in errors)
            root_dir: Root directory of the request (used in errors)
            searched_names: File names that were looked for (used in errors)

        Returns:
            Absolute path of the highest-priority candidate.

        Raises:
            ConfigNotFoundError: If there are no candidates
        """
        ordered = sorted(candidates, key=Candidate.sort_key)

        if not ordered:
            raise ConfigNotFoundError(directory, root_dir, searched_names=searched_names)

        if len(ordered) > 1:
            warning = MultipleConfigsWarning(candidates=tuple(ordered))
            self.output.warning(warning.message)

        winner = ordered[0]
        logger.debug("Selected %s out of %d candidate(s)", winner.path, len(ordered))
        return winner.path
