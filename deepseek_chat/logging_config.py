"""
Logging configuration with uvicorn-compatible colored output
"""

import logging
from typing import Union


class ColoredFormatter(logging.Formatter):
    """Uvicorn-style colored log formatter"""

    COLORS = {
        "DEBUG": "\033[36m",      # cyan
        "INFO": "\033[32m",       # green
        "WARNING": "\033[33m",    # yellow
        "ERROR": "\033[31m",      # red
        "CRITICAL": "\033[35m",   # magenta
    }
    RESET = "\033[0m"

    def format(self, record):
        # Color a copy so other handlers still see the plain level name
        record = logging.makeLogRecord(record.__dict__)
        if record.levelname in self.COLORS:
            record.levelname = f"{self.COLORS[record.levelname]}{record.levelname}{self.RESET}"
        return super().format(record)


def setup_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Attach a colored stream handler to the package logger.

    The library never calls this itself; applications opt in. Calling it
    again replaces the handler instead of stacking a second one.
    """
    logger = logging.getLogger("deepseek_chat")
    for handler in list(logger.handlers):
        if isinstance(handler.formatter, ColoredFormatter):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(ColoredFormatter("%(levelname)s:     %(name)s - %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
