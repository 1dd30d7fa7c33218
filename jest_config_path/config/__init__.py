"""Configuration path resolution package for jest-config-path."""

# Re-export enums
from jest_config_path.config.enums import CandidateKind, PathState

# Re-export models
from jest_config_path.config.models import (
    Candidate,
    ExtensionPriorityList,
    MultipleConfigsWarning,
    ResolutionRequest,
)

# Re-export resolution components
from jest_config_path.config.classifier import PathClassifier
from jest_config_path.config.scanner import CandidateScanner
from jest_config_path.config.disambiguation import AmbiguityResolver
from jest_config_path.config.resolver import ConfigPathResolver, resolve_config_path

# Re-export policy sources
from jest_config_path.config.protocols import PolicySource
from jest_config_path.config.default_source import DefaultPolicySource
from jest_config_path.config.yaml_source import YAMLPolicySource

__all__ = [
    # Enums
    "CandidateKind",
    "PathState",
    # Models
    "Candidate",
    "ExtensionPriorityList",
    "MultipleConfigsWarning",
    "ResolutionRequest",
    # Resolution
    "PathClassifier",
    "CandidateScanner",
    "AmbiguityResolver",
    "ConfigPathResolver",
    "resolve_config_path",
    # Policy sources
    "PolicySource",
    "DefaultPolicySource",
    "YAMLPolicySource",
]
