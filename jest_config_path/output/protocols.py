"""Diagnostic sink protocol for jest-config-path."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class OutputHandler(Protocol):
    """Sink for the warning emitted when a directory holds several configs.

    Passed to the resolver explicitly, so callers and tests can capture
    warnings without touching process-wide logging.
    """

    def warning(self, message: str) -> None:
        ...
