"""YAML extension policy source for jest-config-path."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from jest_config_path.config.models import ExtensionPriorityList
from jest_config_path.config.protocols import CURRENT_SCHEMA_VERSION
from jest_config_path.exceptions import PolicyConfigError


class YAMLPolicySource:
    """Load the extension priority list from a YAML file.

    Implements the PolicySource protocol. Expected layout::

        schema_version: 1
        extensions: [".ts", ".js", ".json"]

    Attributes:
        policy_path: Path to the YAML policy file
    """

    def __init__(self, policy_path: Path) -> None:
        """Initialize the YAML policy source.

        Args:
            policy_path: Path to the YAML policy file

        Raises:
            PolicyConfigError: If the file does not exist
        """
        self._policy_path = policy_path
        if not policy_path.exists():
            raise PolicyConfigError(f"Policy file not found: {policy_path}")
        if not policy_path.is_file():
            raise PolicyConfigError(f"Policy path is not a file: {policy_path}")

    @property
    def source_description(self) -> str:
        """Human-readable description of the policy source."""
        return f"YAML file: {self._policy_path}"

    def load(self) -> ExtensionPriorityList:
        """Load and validate the YAML policy file.

        Returns:
            ExtensionPriorityList in the order given by the file

        Raises:
            PolicyConfigError: If YAML parsing fails or structure is invalid
        """
        try:
            with open(self._policy_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            error_msg = f"Failed to parse YAML policy: {e}"
            if hasattr(e, 'problem_mark') and e.problem_mark is not None:
                mark = e.problem_mark
                error_msg += f" (line {mark.line + 1}, column {mark.column + 1})"
            raise PolicyConfigError(error_msg) from e

        if data is None:
            raise PolicyConfigError("Policy file is empty")

        if not isinstance(data, dict):
            raise PolicyConfigError(
                f"Policy must be a YAML mapping, got {type(data).__name__}"
            )

        return self._extract_policy(data)

    def _extract_policy(self, data: dict[str, Any]) -> ExtensionPriorityList:
        schema_version = data.get('schema_version', 1)
        if not isinstance(schema_version, int):
            raise PolicyConfigError(
                f"'schema_version' must be an integer, got {type(schema_version).__name__}"
            )
        if schema_version > CURRENT_SCHEMA_VERSION:
            raise PolicyConfigError(
                f"Policy schema version {schema_version} is not supported. "
                f"Maximum supported version is {CURRENT_SCHEMA_VERSION}."
            )

        extensions = data.get('extensions')
        if extensions is None:
            raise PolicyConfigError("Missing required 'extensions' list in policy")
        if not isinstance(extensions, list):
            raise PolicyConfigError(
                f"'extensions' must be a list, got {type(extensions).__name__}"
            )

        try:
            return ExtensionPriorityList(extensions=tuple(extensions))
        except ValidationError as e:
            raise PolicyConfigError(f"Invalid extension policy in {self._policy_path}: {e}") from e
