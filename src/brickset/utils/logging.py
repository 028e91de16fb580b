"""Logging helpers shared by every brickset module."""

import logging

ROOT_LOGGER_NAME = "brickset"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the brickset hierarchy.

    No handlers are attached here; entrypoints call configure_logging().

    Args:
        name: Usually ``__name__`` of the calling module

    Returns:
        Logger instance
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Set up console output for the ``brickset`` logger.

    If the host application already configured the root logger, records
    propagate to its handlers and nothing is added. Otherwise a single
    stream handler is installed and propagation is turned off, so a root
    handler added later does not print every record twice.

    Args:
        level: Level for the ``brickset`` logger

    Returns:
        The ``brickset`` logger
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    if root.handlers or logging.getLogger().handlers:
        return root

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.propagate = False
    return root
