import logging

from utils.constants import LOG_LEVEL

logger = logging.getLogger("bite")

if not logger.handlers:
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(module)s] %(message)s"))
    logger.addHandler(_handler)
logger.setLevel(LOG_LEVEL.upper())
