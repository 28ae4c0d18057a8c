import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "cidrhosts"

def configure_logging(silent: bool = False, stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Configure the tool's logger.

    Info and error lines share stdout with the extracted hostnames, prefixed
    with their level. Silent mode turns every log line off so only
    hostnames are printed.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    logger.setLevel(logging.CRITICAL + 1 if silent else logging.INFO)
    return logger

def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)
