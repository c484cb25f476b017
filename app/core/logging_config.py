# /app/core/logging_config.py

import logging

from .config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """
    Configures the root logger once for the whole process.

    Modules never configure logging themselves; they only create a
    module-level `logger = logging.getLogger(__name__)` and log through it.
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler()],
    )
