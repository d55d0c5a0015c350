"""
Logging utilities for LoopFlow
"""

import functools
import logging
import sys
import time
from pathlib import Path
from typing import Optional, Union

import colorlog


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red,bg_white",
}


def setup_logging(
    level: Union[str, int] = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    use_colors: bool = True,
) -> logging.Logger:
    """
    Route loopflow log records to the console and, optionally, a file

    Returns:
        The ``loopflow`` package logger
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper())

    if use_colors:
        console = colorlog.StreamHandler(sys.stdout)
        console.setFormatter(
            colorlog.ColoredFormatter(
                "%(log_color)s" + LOG_FORMAT, datefmt=DATE_FORMAT, log_colors=LOG_COLORS
            )
        )
    else:
        console = logging.StreamHandler(sys.stdout)
        console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    handlers = [console]

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        handlers.append(file_handler)

    package_logger = logging.getLogger("loopflow")
    package_logger.handlers.clear()
    for handler in handlers:
        package_logger.addHandler(handler)
    package_logger.setLevel(level)

    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the loopflow namespace"""
    if name == "loopflow" or name.startswith("loopflow."):
        return logging.getLogger(name)
    return logging.getLogger(f"loopflow.{name}")


def log_execution_time(func):
    """Decorator to log execution time of loops transformations"""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger(func.__module__)
        start_time = time.time()

        try:
            result = func(*args, **kwargs)
        except Exception as e:
            execution_time = time.time() - start_time
            logger.error(
                f"{func.__name__} failed after {execution_time:.3f} seconds: {e}"
            )
            raise

        execution_time = time.time() - start_time
        logger.debug(f"{func.__name__} completed in {execution_time:.3f} seconds")
        return result

    return wrapper
