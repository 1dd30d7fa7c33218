"""Diagnostic output handlers for jest-config-path."""
from jest_config_path.output.protocols import OutputHandler
from jest_config_path.output.console import ConsoleOutputHandler
from jest_config_path.output.logging_handler import LoggingOutputHandler

__all__ = [
    "OutputHandler",
    "ConsoleOutputHandler",
    "LoggingOutputHandler",
]
