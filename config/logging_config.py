import logging

from config.settings import LOG_LEVEL, LOG_FORMAT

logger = logging.getLogger("page_search")

if not logger.handlers:
    # Avoid stacking handlers when the module is re-imported
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)

logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
