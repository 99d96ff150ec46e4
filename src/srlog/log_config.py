# srlog/log_config.py
"""Routing srlog messages into Loguru.

Hosts that already log through Loguru can hand srlog's output to it instead
of the built-in stderr writer. ``configure_logging`` sets up a single Loguru
sink with a standardized format, aligns the srlog threshold with the sink
level and installs a ``LoguruBridge`` as the dispatch target.
"""

import sys
from typing import Any

from loguru import logger

from .context import LogContext
from .exceptions import InvalidArgumentError
from .facility import get_context
from .levels import LogLevel
from .types import format_message

LOGURU_LEVELS: dict[LogLevel, str] = {
    LogLevel.ERROR: "ERROR",
    LogLevel.WARN: "WARNING",
    LogLevel.INFO: "INFO",
    LogLevel.DEBUG: "DEBUG",
    LogLevel.SPEW: "TRACE",
}
"""Loguru level name for each srlog severity."""

_THRESHOLDS: dict[str, LogLevel] = {
    "TRACE": LogLevel.SPEW,
    "DEBUG": LogLevel.DEBUG,
    "INFO": LogLevel.INFO,
    "SUCCESS": LogLevel.INFO,
    "WARNING": LogLevel.WARN,
    "ERROR": LogLevel.ERROR,
    "CRITICAL": LogLevel.ERROR,
}

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "{extra[domain]}<level>{message}</level>"
)


def _format_record(record: dict[str, Any]) -> str:
    """Loguru format function; records logged without a domain get an empty one."""
    record["extra"].setdefault("domain", "")
    return LOG_FORMAT + "\n{exception}"


class LoguruBridge:
    """Dispatch target forwarding srlog records to Loguru.

    Records above the context threshold are dropped before they reach
    Loguru. The current domain of the context is bound as
    ``extra["domain"]``. When the callback data is a Loguru logger (for
    example one returned by ``logger.bind()``), records go there instead of
    the global logger.
    """

    def __init__(self, context: LogContext):
        self._context = context

    def __call__(
        self, data: Any, level: int, fmt: str, /, *args: Any, **kwargs: Any
    ) -> int:
        name = LOGURU_LEVELS.get(level)  # type: ignore[call-overload]
        if name is None or level > self._context.get_loglevel():
            return 0
        message = format_message(fmt, args, kwargs)
        target = data if data is not None else logger
        target.bind(domain=self._context.get_logdomain()).log(name, message)
        return len(message)


def configure_logging(
    level: str = "INFO", sink=sys.stderr, context: LogContext | None = None
) -> LoguruBridge:
    """
    Configures Loguru and routes srlog output through it.

    Removes default handlers and adds a new one with the specified level and
    sink, then sets the srlog threshold to the matching severity and installs
    a ``LoguruBridge`` on the context.

    Args:
        level: The minimum Loguru level (e.g., "DEBUG", "INFO", "WARNING").
        sink: The output sink (e.g., sys.stderr, "file.log").
        context: The srlog context to route; the process-wide one by default.

    Returns:
        LoguruBridge: The installed dispatch target.

    Raises:
        InvalidArgumentError: If ``level`` is not a standard Loguru level.
    """
    loguru_level = level.upper()
    threshold = _THRESHOLDS.get(loguru_level)
    if threshold is None:
        raise InvalidArgumentError(f"Unknown Loguru level {level!r}.")
    context = context or get_context()

    logger.remove()  # Remove default handler
    logger.add(
        sink,
        level=loguru_level,
        format=_format_record,
        colorize=sink is sys.stderr,  # Only colorize if writing to stderr
        backtrace=True,
        diagnose=True,
    )

    bridge = LoguruBridge(context)
    context.set_callback(bridge)
    context.set_loglevel(threshold)
    logger.bind(domain=context.get_logdomain()).info(
        f"Loguru logger configured with level={loguru_level} writing to {sink}"
    )
    return bridge
