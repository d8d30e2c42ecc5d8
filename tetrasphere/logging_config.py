"""
Logging for the tetrasphere package.

Console output stays short since it shares the terminal with the render
loop; the optional log file gets timestamps.
"""
import logging
import sys
from typing import Optional, Union

CONSOLE_FORMAT = "%(levelname)-7s %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def setup_logging(level: Union[int, str] = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach handlers to the 'tetrasphere' logger. Safe to call again; the
    previous handlers are closed and replaced.

    :param level: Level name ("DEBUG") or number (logging.DEBUG)
    :param log_file: Also write to this file, truncated on start
    :return: The package logger
    """
    level = _resolve_level(level)
    logger = logging.getLogger("tetrasphere")
    logger.setLevel(level)
    # the root logger may belong to an embedding application
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%H:%M:%S"))
        logger.addHandler(file_handler)

    logger.debug("Logging at %s", logging.getLevelName(level))
    return logger
