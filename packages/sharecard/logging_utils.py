"""
Logging setup for share card code.

Modules log through `logging.getLogger(__name__)`; applications call
`setup_logging` once to attach a console handler.
"""

import logging
import sys
from typing import Optional

from .config import get_config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(log_level: Optional[str] = None) -> logging.Logger:
    """Configure the `sharecard` logger hierarchy.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to the configured `log_level`.

    Returns:
        The package root logger.
    """
    level_name = (log_level or get_config().log_level).upper()
    level = getattr(logging, level_name, logging.INFO)

    logger = logging.getLogger("sharecard")
    logger.setLevel(level)

    # Re-running setup replaces our handler instead of stacking a second one
    for handler in list(logger.handlers):
        if getattr(handler, "_sharecard_handler", False):
            logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    console_handler._sharecard_handler = True
    logger.addHandler(console_handler)

    return logger
