"""Logging configuration for Syndic."""

import logging

from .config import settings

_ROOT_LOGGER_NAME = "syndic"
_handler: logging.Handler | None = None


def init_logging(level: str | None = None, fmt: str | None = None) -> logging.Logger:
    """
    Configure the package logger with a single console handler.

    Calling this more than once replaces the previous handler instead of
    stacking a new one.

    Args:
        level: Log level name. Defaults to ``settings.log_level``.
        fmt: Log record format. Defaults to ``settings.log_format``.

    Returns:
        The configured package logger.
    """
    global _handler

    root_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    root_logger.setLevel((level or settings.log_level).upper())

    if _handler is not None:
        root_logger.removeHandler(_handler)

    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(fmt or settings.log_format))
    root_logger.addHandler(_handler)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger nested under the package logger.

    Args:
        name: Usually the caller's ``__name__``.

    Returns:
        Logger named ``syndic.<name>``.
    """
    if name == _ROOT_LOGGER_NAME or name.startswith(f"{_ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{name}")
