import logging
import os

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name):
    """
    Creates and returns a logger with the specified name.

    Every handler module gets its logger through here so trigger and callable
    output share one format in Cloud Logging. The level defaults to INFO and
    can be overridden with the LOG_LEVEL environment variable.

    Args:
        name: The name for the logger, typically __name__ from the calling module

    Returns:
        A configured logger instance
    """
    logger = logging.getLogger(name)

    # Only configure handlers if they haven't been added yet
    if not logger.handlers:
        logger.setLevel(os.environ.get("LOG_LEVEL", "INFO").upper())

        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
