"""
Logging setup for the command line
"""

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbose: bool = False, console: Console = None) -> logging.Logger:
    """
    Route the package loggers through rich.
    
    Library modules only create loggers; handlers are installed here,
    once, by the CLI.
    """
    logger = logging.getLogger('pingrunner')
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    return logger
