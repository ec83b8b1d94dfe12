import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

def setup_logging(level: str = "WARNING") -> logging.Logger:
    """
    Configure the awsconsole package logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ...)

    Returns:
        logging.Logger: The package logger
    """
    logger = logging.getLogger("awsconsole")
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    # Replace handlers so repeated calls do not duplicate output
    logger.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False

    return logger
