import logging
from os import getenv

STRICT_SLOTS = getenv("RETAINMUT_STRICT_SLOTS", "1").lower() not in ("0", "false", "no")
LOG_LEVEL = logging.getLevelNamesMapping().get(
    getenv("RETAINMUT_LOG_LEVEL", "DEBUG").upper(), logging.DEBUG
)
