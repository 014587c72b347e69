"""Logging setup for the gymrank CLI.

Library modules only create module-level loggers; the CLI attaches a
handler to the package logger once, so adapter warnings reach stderr.
"""

import logging

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(name: str = 'gymrank', level: int = logging.INFO) -> logging.Logger:
    """Attach a stderr handler to the named logger (once) and set its level.

    Args:
        name: Logger name, normally the package name so every module
              logger under it is covered.
        level: Logging level (default: INFO)

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger
