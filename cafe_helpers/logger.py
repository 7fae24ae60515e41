from logging import getLogger, getLevelName, StreamHandler, Formatter

from .constants import LOG_LEVEL

DEFAULT_LEVEL = "WARNING"


def conf_logger(level):
    # unknown level names come back from getLevelName as "Level <name>"
    if not isinstance(getLevelName(level), int):
        level = DEFAULT_LEVEL
    logger_ = getLogger("cafe")
    console_handler = StreamHandler()
    console_handler.setLevel(level)
    formatter = Formatter('%(asctime)s - %(levelname)s - %(message)s')
    console_handler.setFormatter(formatter)
    if logger_.hasHandlers():
        logger_.handlers.clear()
    logger_.addHandler(console_handler)
    logger_.setLevel(level)
    return logger_


logger = conf_logger(LOG_LEVEL)
