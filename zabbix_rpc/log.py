import logging
import logging.handlers
from pathlib import Path
from typing import Optional, Union

from . import config

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_ROOT_LOGGER = "zabbix_rpc"


def _parse_level(level: Union[str, int, None]) -> int:
    if isinstance(level, int):
        return level
    if not isinstance(level, str):
        level = config.log_level()
    lvl = getattr(logging, level.upper(), None)
    if isinstance(lvl, int):
        return lvl
    return logging.WARNING


def setup_logging(
    level: Union[str, int, None] = None,
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """
    Configure the package logger for scripts using the client.

    - Console handler always, rotating file handler when log_file is given
    - Level from the argument, else ZABBIX_LOG_LEVEL
    - Safe to call multiple times (second call only adjusts the level)

    The library itself never calls this; importing zabbix_rpc leaves
    logging untouched.
    """
    logger = logging.getLogger(_ROOT_LOGGER)
    lvl = _parse_level(level)
    logger.setLevel(lvl)

    if getattr(logger, "_zabbix_rpc_configured", False):
        for h in logger.handlers:
            h.setLevel(lvl)
        return logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(lvl)
    logger.addHandler(console_handler)

    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            path,
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(lvl)
        logger.addHandler(file_handler)

    logger._zabbix_rpc_configured = True  # type: ignore[attr-defined]
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Return a module-specific logger.
    """
    return logging.getLogger(name)
