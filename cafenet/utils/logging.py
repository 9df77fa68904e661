# cafenet/utils/logging.py
import logging

from cafenet.utils.settings import LOG_LEVEL

_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_configured = False


def get_logger(name: str) -> logging.Logger:
    global _configured
    if not _configured:
        logging.basicConfig(level=LOG_LEVEL, format=_FORMAT)
        _configured = True
    return logging.getLogger(name)
