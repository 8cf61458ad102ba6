import logging
from typing import Optional

from .config import Settings


def setup_logging(level: Optional[str] = None, name: str = "flakeid") -> logging.Logger:
    """Attach a console handler to the flakeid package logger.

    ``level`` defaults to FLAKEID_LOG_LEVEL. Handlers installed earlier by
    this function are replaced; the package's NullHandler is left alone.
    """
    level = (level or Settings().log_level).upper()
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level))

    for handler in logger.handlers[:]:
        if isinstance(handler, logging.StreamHandler):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(getattr(logging, level))
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    logger.addHandler(handler)

    return logger
