"""
Logging configuration for ratio-calc

Every module obtains its logger through ``get_logger(__name__)``; loggers live
under the ``ratio_calc`` namespace so a single handler on that root controls
the whole package.

Logs go to stderr only: stdout is reserved for the ``Ok(...)``/``Err(...)``
lines written by the driver.

Usage:
    from src.core.logging_config import get_logger

    logger = get_logger(__name__)
    logger.debug("tokens: %s", tokens)
"""

import logging
import sys
from typing import Final, TextIO

ROOT_LOGGER_NAME: Final[str] = "ratio_calc"

LOG_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

DEFAULT_LOG_LEVEL: Final[str] = "WARNING"


def get_logger(name: str) -> logging.Logger:
    """
    Logger for a module, nested under the package root logger.

    Args:
        name: Usually ``__name__`` of the calling module

    Returns:
        logging.Logger named ``ratio_calc.<name>``
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logging(
    level: str | int = DEFAULT_LOG_LEVEL,
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    Configure the package root logger.

    Installs exactly one StreamHandler (stderr by default). Calling it again
    replaces the previous handler instead of stacking a second one.

    Args:
        level: Level name ("DEBUG", "INFO", ...) or numeric level
        stream: Target stream (default: sys.stderr)

    Returns:
        The configured root logger
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)

    for handler in list(root.handlers):
        if getattr(handler, "_ratio_calc_handler", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    handler._ratio_calc_handler = True  # type: ignore[attr-defined]

    root.addHandler(handler)
    root.setLevel(level)
    root.propagate = False

    return root
