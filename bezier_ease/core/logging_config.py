"""
Logging configuration for bezier_ease.

Loggers live under the ``bezier_ease`` namespace. Nothing here installs
handlers on import; applications call setup_logging() when they want output.
"""

import functools
import logging
import time
from typing import Optional

ROOT_LOGGER_NAME = "bezier_ease"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under the package root logger."""
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    fmt: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """
    Configure the package root logger.

    Args:
        level: Logging level (e.g., logging.DEBUG, logging.INFO)
        log_file: Optional file path for logging output
        fmt: Log record format

    Returns:
        The configured root package logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    # Replace handlers from a previous call
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(fmt)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def log_performance(func):
    """Decorator to log execution time of a function at DEBUG level."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger(func.__module__)
        start = time.perf_counter()
        result = func(*args, **kwargs)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.debug(f"{func.__name__} took {elapsed_ms:.3f}ms")
        return result

    return wrapper


class LogContext:
    """
    Context manager that logs entry and exit of a named operation.

    Usage:
        with LogContext("sample curve", num_samples=100):
            ease.ease_array(ts)
    """

    def __init__(self, operation: str, logger: Optional[logging.Logger] = None,
                 level: int = logging.DEBUG, **context):
        self.operation = operation
        self.logger = logger or get_logger(ROOT_LOGGER_NAME)
        self.level = level
        self.context = context
        self._start = 0.0

    def _describe(self) -> str:
        if not self.context:
            return self.operation
        ctx = ", ".join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.operation} [{ctx}]"

    def __enter__(self) -> "LogContext":
        self._start = time.perf_counter()
        self.logger.log(self.level, f"Starting {self._describe()}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        elapsed_ms = (time.perf_counter() - self._start) * 1000
        if exc_type is not None:
            self.logger.error(f"Failed {self._describe()} after {elapsed_ms:.3f}ms: {exc_val}")
        else:
            self.logger.log(self.level, f"Finished {self._describe()} in {elapsed_ms:.3f}ms")
        return False


__all__ = [
    "get_logger",
    "setup_logging",
    "log_performance",
    "LogContext",
]
