# hexdirectory/common/logging.py
from __future__ import annotations

import logging

ROOT_LOGGER = "hexdirectory"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str = ROOT_LOGGER, level: int | str | None = None) -> logging.Logger:
    """
    Return a logger under the `hexdirectory` tree. Module loggers leave
    `level` unset and inherit it from the `hexdirectory` logger, which create_app()
    sets from `Settings.log_level`. Plays nice with Uvicorn: basicConfig
    is only applied when nothing has configured handlers yet.
    """
    if isinstance(level, str):
        level = level.upper()
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers and not logger.handlers:
        logging.basicConfig(level=level or logging.INFO, format=LOG_FORMAT)
    if level is not None:
        logger.setLevel(level)
    return logger
