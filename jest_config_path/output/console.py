"""Console-based output handler for jest-config-path."""

from rich.console import Console
from rich.markup import escape


class ConsoleOutputHandler:
    """Rich Console-based output handler.

    Writes to stderr by default so diagnostics never mix with a caller's
    stdout. Message text is escaped so paths containing ``[...]`` are not
    read as Rich markup.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(stderr=True)

    def warning(self, message: str) -> None:
        """Print a warning message."""
        self.console.print(f"[yellow]Warning:[/yellow] {escape(message)}")
