import logging
from splitledger.core.config import settings

LOG_FORMAT = "splitledger : %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str | None = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Safe to call more than once; the handler is only installed the first time.
    """
    logger = logging.getLogger("splitledger")
    logger.setLevel((level or settings.LOG_LEVEL).upper())

    if not any(getattr(h, "_splitledger", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._splitledger = True
        logger.addHandler(handler)

    return logger
