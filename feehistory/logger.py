import logging
import os
import typing as tp

LOG_LEVEL_ENV = "FEE_HISTORY_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s [%(levelname)8s] %(message)s (%(filename)s:%(lineno)s)"


def create_logger(name: str, level: tp.Optional[tp.Union[int, str]] = None) -> logging.Logger:
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()

    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.hasHandlers():
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(console_handler)

    return logger
