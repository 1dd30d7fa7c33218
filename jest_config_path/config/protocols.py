"""Protocol definitions for extension policy sources."""

from typing import Protocol, runtime_checkable

from jest_config_path.config.models import ExtensionPriorityList


@runtime_checkable
class PolicySource(Protocol):
    """Protocol for extension priority policy sources.

    The resolver only ever sees an ExtensionPriorityList; sources decide
    where that list comes from.

    Implementations include:
    - DefaultPolicySource: Built-in extension order
    - YAMLPolicySource: Load from a YAML policy file
    """

    def load(self) -> ExtensionPriorityList:
        """Load the extension priority list from the source.

        Raises:
            PolicyConfigError: If the policy cannot be loaded or is invalid
        """
        ...

    @property
    def source_description(self) -> str:
        """Human-readable description of the policy source.

        Returns:
            Description string for logging/error messages
            e.g., "YAML file: /path/to/policy.yaml" or "built-in defaults"
        """
        ...


# Current supported schema version
CURRENT_SCHEMA_VERSION = 1
