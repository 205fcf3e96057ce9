import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "termflame"


def set_log_level(level: int) -> None:
    """Send the package's log records to stderr at the given level."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in logger.handlers:
        if isinstance(handler, RichHandler):
            handler.setLevel(level)
            return
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setLevel(level)
    logger.addHandler(handler)
