# srlog/facility.py
"""The process-wide srlog context and module-level shortcuts.

Library code logs through the functions in this module; the host
application configures the same context through them. The context is
created from ``LogSettings`` on first use.
"""

import threading
from typing import Any

from .context import LogContext
from .levels import LogLevel, LogOption
from .types import LogCallback

_context: LogContext | None = None
_context_lock = threading.Lock()


def get_context() -> LogContext:
    """Return the process-wide context, creating it on first use."""
    global _context
    with _context_lock:
        if _context is None:
            _context = LogContext.from_settings()
        return _context


def set_context(context: LogContext | None) -> LogContext | None:
    """Replace the process-wide context and return the previous one.

    Passing None drops the current context; the next use creates a fresh
    one from the settings.
    """
    global _context
    with _context_lock:
        previous, _context = _context, context
    return previous


def set_loglevel(loglevel: LogLevel | int) -> None:
    get_context().set_loglevel(loglevel)


def get_loglevel() -> LogLevel:
    return get_context().get_loglevel()


def set_logopts(logopts: LogOption | int) -> None:
    get_context().set_logopts(logopts)


def get_logopts() -> LogOption:
    return get_context().get_logopts()


def set_logdomain(logdomain: str) -> None:
    get_context().set_logdomain(logdomain)


def get_logdomain() -> str:
    return get_context().get_logdomain()


def set_callback(callback: LogCallback, data: Any = None) -> None:
    get_context().set_callback(callback, data)


def set_default_callback() -> None:
    get_context().set_default_callback()


def log(level: int, fmt: str, /, *args: Any, **kwargs: Any) -> int:
    return get_context().log(level, fmt, *args, **kwargs)


def error(fmt: str, /, *args: Any, **kwargs: Any) -> int:
    return get_context().log(LogLevel.ERROR, fmt, *args, **kwargs)


def warn(fmt: str, /, *args: Any, **kwargs: Any) -> int:
    return get_context().log(LogLevel.WARN, fmt, *args, **kwargs)


def info(fmt: str, /, *args: Any, **kwargs: Any) -> int:
    return get_context().log(LogLevel.INFO, fmt, *args, **kwargs)


def debug(fmt: str, /, *args: Any, **kwargs: Any) -> int:
    return get_context().log(LogLevel.DEBUG, fmt, *args, **kwargs)


def spew(fmt: str, /, *args: Any, **kwargs: Any) -> int:
    return get_context().log(LogLevel.SPEW, fmt, *args, **kwargs)
