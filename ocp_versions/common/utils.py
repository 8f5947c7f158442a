import logging
from logging import Logger

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(message)s'


def get_logger(name: str) -> Logger:
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)
    if not logger.handlers:
        ch = logging.StreamHandler()
        ch.setLevel(logging.INFO)
        ch.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(ch)
    logger.propagate = False
    return logger


def set_log_level(level: int, target: Logger = None) -> None:
    """Change the level of the shared logger and of all its handlers."""
    target = target or logger
    target.setLevel(level)
    for handler in target.handlers:
        handler.setLevel(level)


logger = get_logger('ocp_versions')
