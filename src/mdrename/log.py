"""Logging setup for the mdrename logger hierarchy"""

import logging
import sys


LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


class _StderrHandler(logging.StreamHandler):
    """StreamHandler that resolves sys.stderr at emit time instead of binding it once."""

    def __init__(self, level=logging.NOTSET):
        logging.Handler.__init__(self, level)

    @property
    def stream(self):
        return sys.stderr


_handler = None


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Set the 'mdrename' logger level and install the stderr handler once."""
    global _handler
    logger = logging.getLogger("mdrename")
    logger.setLevel(level.upper())
    if _handler is None:
        _handler = _StderrHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    if _handler not in logger.handlers:
        logger.addHandler(_handler)
    return logger
