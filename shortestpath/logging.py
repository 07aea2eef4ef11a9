"""Package-wide logging setup for shortestpath.

Every module obtains its logger through :func:`get_logger`; all of them hang
off the single ``shortestpath`` logger, which owns the only handler.
"""

import logging
import sys

PACKAGE_LOGGER = "shortestpath"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_root_logger(level: int = logging.INFO) -> None:
    """Install a stdout handler on the ``shortestpath`` logger.

    Subsequent calls are no-ops until :func:`reset_logging` runs.
    """
    global _configured

    if _configured:
        return

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    package_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
    package_logger.addHandler(handler)

    # Propagate so pytest's caplog sees records
    package_logger.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a child logger that inherits the package configuration."""
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Change the level of the package logger and its handlers.

    Args:
        level: A ``logging`` level such as ``logging.DEBUG``.
    """
    setup_root_logger()

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setLevel(level)


def reset_logging() -> None:
    """Drop handlers and forget prior setup. Used by tests."""
    global _configured
    _configured = False

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


setup_root_logger()
