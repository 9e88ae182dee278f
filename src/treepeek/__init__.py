# src/treepeek/__init__.py

from loguru import logger
import os
import sys

__version__ = "0.1.0"


def configure_logger(
    *,
    level: str = "WARNING",
    fmt: str = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    sink=None,
):
    """
    Configure Loguru for treepeek.

    - level: log level ("DEBUG", "INFO", etc.)
    - fmt: format string
    - sink: output target (defaults to sys.stderr; stdout is reserved for
      rendered trees and match reports)

    Honor the TREEPEEK_LOG_LEVEL environment variable if set.
    """
    logger.remove()
    sink = sink or sys.stderr
    env_level = os.getenv("TREEPEEK_LOG_LEVEL")
    logger.add(sink, level=env_level or level, format=fmt)
    if env_level:
        logger.debug(f"Overriding log level from TREEPEEK_LOG_LEVEL={env_level}")
