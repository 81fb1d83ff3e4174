"""Call logging for the public transformation functions."""

from __future__ import annotations

import functools
import logging
import os
import threading
import time
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

LOGGER_NAME = "restquery"
LOG_FILE_ENV = "RESTQUERY_LOG_FILE"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"

_logger: logging.Logger | None = None
_logger_lock = threading.Lock()


def get_logger() -> logging.Logger:
    """Return the package logger, attaching its handler on first use.

    A file handler is attached when ``RESTQUERY_LOG_FILE`` is set, otherwise
    a NullHandler so the host application decides where records go.
    """
    global _logger
    if _logger is not None:
        return _logger

    with _logger_lock:
        if _logger is not None:
            return _logger

        logger = logging.getLogger(LOGGER_NAME)
        if not logger.handlers:
            log_file = os.environ.get(LOG_FILE_ENV)
            if log_file:
                os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
                handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
                handler.setFormatter(logging.Formatter(LOG_FORMAT))
                logger.setLevel(logging.DEBUG)
            else:
                handler = logging.NullHandler()
            logger.addHandler(handler)
        _logger = logger

    return _logger


def reset_logger() -> None:
    """Close and detach package handlers so the next call re-reads the environment."""
    global _logger
    with _logger_lock:
        logger = logging.getLogger(LOGGER_NAME)
        for handler in logger.handlers[:]:
            handler.close()
            logger.removeHandler(handler)
        _logger = None


def _describe_args(args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    arg_parts = [repr(a) for a in args]
    arg_parts += [f"{k}={v!r}" for k, v in kwargs.items()]
    return ", ".join(arg_parts)


def log_transform(fn: F) -> F:
    """Decorator that logs calls to a transformation function.

    Arguments are only rendered when a record will actually be emitted.
    """

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = get_logger()
        debug = logger.isEnabledFor(logging.DEBUG)
        if debug:
            logger.debug("CALL: %s(%s)", fn.__qualname__, _describe_args(args, kwargs))

        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            elapsed = time.monotonic() - start
            if logger.isEnabledFor(logging.WARNING):
                logger.warning(
                    "FAIL: %s(%s) -> %s: %s (%.3fs)",
                    fn.__qualname__, _describe_args(args, kwargs),
                    type(exc).__name__, exc, elapsed,
                )
            raise
        if debug:
            elapsed = time.monotonic() - start
            logger.debug("OK: %s -> %r (%.3fs)", fn.__qualname__, result, elapsed)
        return result

    return wrapper  # type: ignore[return-value]
