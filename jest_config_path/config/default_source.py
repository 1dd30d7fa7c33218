"""Default extension policy source for jest-config-path."""

from jest_config_path.config.models import ExtensionPriorityList
from jest_config_path.constants import JEST_CONFIG_EXT_ORDER


class DefaultPolicySource:
    """Provide the built-in extension priority order.

    Implements the PolicySource protocol using JEST_CONFIG_EXT_ORDER.
    """

    @property
    def source_description(self) -> str:
        """Human-readable description of the policy source."""
        return "built-in defaults"

    def load(self) -> ExtensionPriorityList:
        """Return the built-in extension priority list."""
        return ExtensionPriorityList(extensions=JEST_CONFIG_EXT_ORDER)
