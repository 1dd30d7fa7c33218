"""Output handler that forwards diagnostics to the logging module."""

import logging


class LoggingOutputHandler:
    """Route resolver warnings into a :class:`logging.Logger`."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger("jest_config_path")

    def warning(self, message: str) -> None:
        self.logger.warning(message)
