"""
Logger module for metamodel.

Every bootstrap component logs through get_logger(), so a logger installed with set_logger()
takes effect everywhere, including in builders created before the call.
"""

import logging

# Module-level logger
logger: logging.Logger = logging.getLogger('metamodel')
logger.setLevel(logging.WARNING)  # Build failures are logged at ERROR, phase transitions at DEBUG

def set_logger(custom_logger: logging.Logger) -> logging.Logger:
    """Install your own logger. Returns the previously active one, so it can be restored."""
    global logger
    previous = logger
    logger = custom_logger
    return previous

def get_logger() -> logging.Logger:
    """ Returns the active logger. Use this instead of importing `logger` directly, as set_logger() may replace it. """
    return logger

def set_log_level(level: int | str) -> None:
    """Set the logging level of the active logger.

    Args:
        level: logging.DEBUG to trace the bootstrap phases, logging.INFO for a one-line summary per build
    """
    logger.setLevel(level)
