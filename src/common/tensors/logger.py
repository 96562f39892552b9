import logging
import os


def get_access_logger():
    logger = logging.getLogger("tensors.access")
    if not logger.hasHandlers():
        handler = logging.StreamHandler()
        formatter = logging.Formatter('[%(asctime)s][%(levelname)s][%(name)s] %(message)s')
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    if os.getenv("ACCESS_DEBUG"):
        logger.setLevel(logging.DEBUG)
        return logger
    level_name = os.getenv("ACCESS_LOG_LEVEL", "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)
    logger.setLevel(level)
    return logger
