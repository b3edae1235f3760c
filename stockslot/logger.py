"""
Shared logger setup for stockslot.

Library modules only call ``logging.getLogger(__name__)``; handlers are
attached here by applications such as the demo driver.
"""

import logging
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: Optional[str] = "stockslot",
               level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Return a logger with a single stream handler in the standard format.

    Calling this twice for the same name does not add a second handler.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT,
                                               datefmt=DATE_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
