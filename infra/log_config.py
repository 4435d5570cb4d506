"""Logging setup for applications embedding the forensic analyzer."""
import logging

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Loggers used by the analysis code
PACKAGE_LOGGERS = ("analysis", "settings", "forensic_analyzer", "utils")


def setup_logging(level: int = logging.INFO) -> None:
    """Configure root logging once and set the analysis loggers to level.

    Safe to call more than once; a handler is only added when the root logger
    has none.
    """
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(handler)
    root.setLevel(logging.WARNING)

    for name in PACKAGE_LOGGERS:
        logging.getLogger(name).setLevel(level)
