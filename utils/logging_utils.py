# utils/logging_utils.py

"""
Logging helpers for texrand.

Library modules only ever do

    from utils.logging_utils import get_logger

    logger = get_logger(__name__)

and log at DEBUG (seeding, factory calls, permutations, diagnostics).
Nothing is logged from eval()/eval_batch() loops.

Applications (main.py) call `configure_root_logger` once to pick the level
and, optionally, mirror output into LOGS_DIR / "texrand.log".
"""

from __future__ import annotations

import logging
from logging import Logger
from pathlib import Path
from typing import Optional

from config import LOGS_DIR


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# get_logger hands back the same object for repeated names
_LOGGER_CACHE: dict[str, Logger] = {}


def configure_root_logger(
    level: int = logging.INFO,
    log_to_file: bool = False,
    log_to_console: bool = True,
    log_dir: Optional[Path] = None,
    filename: str = "texrand.log",
) -> None:
    """
    Configure the root logger for a texrand process.

    Args:
        level:
            Logging level (e.g., logging.INFO, logging.DEBUG).
        log_to_file:
            If True, also write logs to `log_dir / filename`.
        log_to_console:
            If True, log to the console stream.
        log_dir:
            Directory for the log file; defaults to config.LOGS_DIR.
        filename:
            Name of the log file inside log_dir.
    """
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = []

    if log_to_file:
        directory = log_dir or LOGS_DIR
        directory.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(directory / filename, encoding="utf-8")
        fh.setFormatter(formatter)
        handlers.append(fh)

    if log_to_console:
        sh = logging.StreamHandler()
        sh.setFormatter(formatter)
        handlers.append(sh)

    root = logging.getLogger()
    if root.handlers:
        # Already configured (e.g. by pytest); only adjust the level
        root.setLevel(level)
        return

    logging.basicConfig(level=level, handlers=handlers)


def get_logger(name: Optional[str] = None) -> Logger:
    """
    Return the (cached) logger called `name`.

    Level and handlers are left to the root logger, so a library import
    never changes what an application has configured.
    """
    if name is None:
        name = "texrand"

    logger = _LOGGER_CACHE.get(name)
    if logger is None:
        logger = logging.getLogger(name)
        _LOGGER_CACHE[name] = logger
    return logger
