import logging
import sys

from storefront.config import settings

_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """
    Return a module logger. The package root logger gets a single stdout handler
    the first time any module asks for one.
    """
    root = logging.getLogger("storefront")
    if not root.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(h)
        root.setLevel(settings.LOG_LEVEL.upper())
    return logging.getLogger(name)
