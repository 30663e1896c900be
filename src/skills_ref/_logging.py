import logging

from ._config import get_log_level

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging() -> None:
    """Send log records to stderr at the LOG_LEVEL environment variable's level.

    Existing root handlers are kept; only the level is updated.
    """
    log_level = get_log_level()
    if logging.root.handlers:
        logging.root.setLevel(log_level)
    else:
        logging.basicConfig(level=log_level, format=LOG_FORMAT)
