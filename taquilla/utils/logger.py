import logging
import sys

from taquilla.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logger(name: str = "taquilla") -> logging.Logger:
    """
    Logger raíz del proyecto. Los módulos usan `logging.getLogger(__name__)`
    y heredan este handler al colgar de `taquilla`.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(settings.log_level.upper())
    return logger


logger = setup_logger()
