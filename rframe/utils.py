"""
Utility functions for rframe.
"""
import logging
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: Optional[Union[str, int]] = None, handler: Optional[logging.Handler] = None) -> logging.Logger:
    """
    Configure the rframe package logger.

    Only the ``rframe`` logger is touched; the root logger is left alone.

    Args:
        level: Level name or number (configured log_level if None)
        handler: Handler to attach (a StreamHandler if None)

    Returns:
        The configured package logger
    """
    if level is None:
        from .config import get_config
        level = get_config()["log_level"]
    if isinstance(level, str):
        level = level.upper()

    package_logger = logging.getLogger("rframe")
    package_logger.setLevel(level)

    if handler is None:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    # Replace a handler installed by an earlier call
    for existing in list(package_logger.handlers):
        if getattr(existing, "_rframe_handler", False):
            package_logger.removeHandler(existing)
    handler._rframe_handler = True
    package_logger.addHandler(handler)
    return package_logger
