# srlog/context.py
"""The srlog logging context.

A ``LogContext`` owns everything that decides what happens to a log call:
the severity threshold, the timestamp options, the domain prefix and the
active dispatch target. All log calls funnel through ``LogContext.log``,
which hands them to the active target. The built-in target,
``LogContext.default_callback``, filters by threshold and writes one line
per record to the diagnostic stream.

State is guarded by a single lock. The lock is only held while state is
read or replaced; dispatch targets always run outside of it, so a target
may itself log without deadlocking.
"""

import sys
import threading
import time
from datetime import UTC, datetime as dt
from typing import Any, Self, TextIO

from .config import LogSettings, get_settings
from .exceptions import InvalidArgumentError
from .levels import LOGDOMAIN_DEFAULT, LOGDOMAIN_MAXLEN, LogLevel, LogOption
from .types import LogCallback, format_message

_EPOCH = dt(1970, 1, 1)


def _now_us() -> int:
    """Current wall-clock time in microseconds since the Unix epoch."""
    return time.time_ns() // 1000


def format_timestamp(logopts: int, now_us: int) -> str:
    """Render the timestamp segment selected by ``logopts``.

    Returns ``"YYYYMMDD "`` for the date and ``"HHMMSS "``,
    ``"HHMMSS,mmm "`` or ``"HHMMSS,uuuuuu "`` for the time of day. A failed
    calendar conversion does not abort the record: the segment is prefixed
    with a short failure note and the calendar fields fall back to the
    Unix epoch.

    Args:
        logopts: The format option mask in effect.
        now_us: The wall-clock time in microseconds since the Unix epoch.

    Returns:
        str: The rendered segment, empty when no timestamp option is set.
    """
    if not logopts & LogOption.TIMESTAMP:
        return ""

    seconds, micros = divmod(now_us, 1_000_000)
    utc = bool(logopts & LogOption.UTC)
    parts: list[str] = []
    try:
        stamp = dt.fromtimestamp(seconds, tz=UTC) if utc else dt.fromtimestamp(seconds)
    except (OverflowError, OSError, ValueError) as exc:
        parts.append(f"{'gmtime' if utc else 'localtime'}() failed: {exc} ")
        stamp = _EPOCH

    if logopts & LogOption.DATE:
        parts.append(f"{stamp:%Y%m%d} ")
    if logopts & LogOption.CLOCK:
        parts.append(f"{stamp:%H%M%S}")
        if logopts & LogOption.TIME_US:
            parts.append(f",{micros:06d} ")
        elif logopts & LogOption.TIME_MS:
            parts.append(f",{micros // 1000:03d} ")
        else:
            parts.append(" ")
    return "".join(parts)


class LogContext:
    """Severity-filtered logging state with a pluggable dispatch target.

    Attributes:
        _loglevel: Records above this severity are dropped by the default writer.
        _logopts: Timestamp options for the default writer.
        _logdomain: Prefix written before every message; empty disables it.
        _callback: The active dispatch target.
        _callback_data: Opaque value passed to the active dispatch target.
        _stream: Output of the default writer; None means ``sys.stderr``.
        _lock: Guards all of the above.
    """

    def __init__(
        self,
        loglevel: LogLevel | int = LogLevel.WARN,
        logopts: LogOption | int = LogOption.NONE,
        logdomain: str = LOGDOMAIN_DEFAULT,
        *,
        stream: TextIO | None = None,
    ):
        """Initialize a context with the given starting configuration.

        No diagnostics are emitted while the context is being set up.

        Args:
            loglevel: Initial severity threshold.
            logopts: Initial timestamp options.
            logdomain: Initial domain prefix, truncated to ``LOGDOMAIN_MAXLEN``.
            stream: Where the default writer writes. Resolved to the current
                ``sys.stderr`` on every write when omitted.

        Raises:
            InvalidArgumentError: If any initial value is out of range.
        """
        if not isinstance(logdomain, str):
            raise InvalidArgumentError(f"Invalid log domain {logdomain!r}.")
        self._lock = threading.Lock()
        self._loglevel: LogLevel = LogLevel.parse(loglevel)
        self._logopts: LogOption = LogOption.parse(logopts)
        self._logdomain: str = logdomain[:LOGDOMAIN_MAXLEN]
        self._stream = stream
        self._callback: LogCallback = self.default_callback
        self._callback_data: Any = None

    @classmethod
    def from_settings(
        cls, settings: LogSettings | None = None, *, stream: TextIO | None = None
    ) -> Self:
        """Create a context from ``LogSettings`` (environment / .env by default)."""
        settings = settings or get_settings()
        return cls(
            settings.loglevel, settings.logopts, settings.logdomain, stream=stream
        )

    # --- Configuration state ---

    def set_loglevel(self, loglevel: LogLevel | int) -> None:
        """Set the severity threshold.

        ``LogLevel.NONE`` disables all output of the default writer. After
        the change a debug message is logged, which is only visible if the
        new threshold lets it through.

        Raises:
            InvalidArgumentError: If the level is outside NONE..SPEW.
        """
        try:
            level = LogLevel.parse(loglevel)
        except InvalidArgumentError as exc:
            self.error(exc.message)
            raise
        with self._lock:
            self._loglevel = level
        self.debug("srlog loglevel set to {} ({}).", int(level), level.name.lower())

    def get_loglevel(self) -> LogLevel:
        with self._lock:
            return self._loglevel

    def set_logopts(self, logopts: LogOption | int) -> None:
        """Set the timestamp options of the default writer.

        Raises:
            InvalidArgumentError: If the mask has bits outside ``LogOption.ALL``.
        """
        try:
            opts = LogOption.parse(logopts)
        except InvalidArgumentError as exc:
            self.error(exc.message)
            raise
        with self._lock:
            self._logopts = opts
        self.debug("srlog log options set to {}.", int(opts))

    def get_logopts(self) -> LogOption:
        with self._lock:
            return self._logopts

    def set_logdomain(self, logdomain: str) -> None:
        """Set the domain prefix written before every message.

        Strings longer than ``LOGDOMAIN_MAXLEN`` characters are silently
        truncated. Pass an empty string to write no prefix at all. No
        separator is added, so a domain such as ``"sr: "`` carries its own.

        Raises:
            InvalidArgumentError: If ``logdomain`` is None or not a string.
        """
        if not isinstance(logdomain, str):
            message = f"Invalid log domain {logdomain!r}."
            self.error(message)
            raise InvalidArgumentError(message)
        domain = logdomain[:LOGDOMAIN_MAXLEN]
        with self._lock:
            self._logdomain = domain
        self.debug("Log domain set to '{}'.", domain)

    def get_logdomain(self) -> str:
        with self._lock:
            return self._logdomain

    # --- Callback registry ---

    def set_callback(self, callback: LogCallback, data: Any = None) -> None:
        """Route all log calls to ``callback``.

        The callback becomes responsible for filtering, formatting and
        output. Nothing is logged on success.

        Args:
            callback: The dispatch target. Must not be None.
            data: Opaque value passed as first argument on every call. It is
                only stored and passed on, never inspected. May be None.

        Raises:
            InvalidArgumentError: If ``callback`` is None or not callable.
        """
        if callback is None or not callable(callback):
            message = f"Invalid log callback {callback!r}."
            self.error(message)
            raise InvalidArgumentError(message)
        with self._lock:
            self._callback = callback
            self._callback_data = data

    def set_default_callback(self) -> None:
        """Restore the built-in writer and drop the callback data."""
        # Must not log: the callback being replaced may be broken.
        with self._lock:
            self._callback = self.default_callback
            self._callback_data = None

    def get_callback(self) -> tuple[LogCallback, Any]:
        """Return the active ``(callback, data)`` pair."""
        with self._lock:
            return self._callback, self._callback_data

    # --- Dispatch ---

    def log(self, level: int, fmt: str, /, *args: Any, **kwargs: Any) -> int:
        """Send a message at ``level`` to the active dispatch target.

        ``fmt`` uses ``str.format`` syntax. Supplying arguments that match
        its placeholders is the caller's obligation; a mismatch raises the
        error ``str.format`` raises.

        Returns:
            int: Whatever the dispatch target returns, for the default
                writer the number of characters written.
        """
        with self._lock:
            callback, data = self._callback, self._callback_data
        return callback(data, level, fmt, *args, **kwargs)

    def error(self, fmt: str, /, *args: Any, **kwargs: Any) -> int:
        return self.log(LogLevel.ERROR, fmt, *args, **kwargs)

    def warn(self, fmt: str, /, *args: Any, **kwargs: Any) -> int:
        return self.log(LogLevel.WARN, fmt, *args, **kwargs)

    def info(self, fmt: str, /, *args: Any, **kwargs: Any) -> int:
        return self.log(LogLevel.INFO, fmt, *args, **kwargs)

    def debug(self, fmt: str, /, *args: Any, **kwargs: Any) -> int:
        return self.log(LogLevel.DEBUG, fmt, *args, **kwargs)

    def spew(self, fmt: str, /, *args: Any, **kwargs: Any) -> int:
        return self.log(LogLevel.SPEW, fmt, *args, **kwargs)

    def default_callback(
        self, data: Any, level: int, fmt: str, /, *args: Any, **kwargs: Any
    ) -> int:
        """The built-in dispatch target.

        Writes ``[date][time][domain]message`` plus a newline to the stream
        when ``level`` is at or below the threshold. ``data`` is ignored.

        Returns:
            int: Characters written, 0 when the record was filtered out or
                the stream is missing or unusable.
        """
        with self._lock:
            loglevel, logopts, logdomain = (
                self._loglevel,
                self._logopts,
                self._logdomain,
            )

        if level <= LogLevel.NONE or level > loglevel:
            return 0

        message = format_message(fmt, args, kwargs)
        record = f"{format_timestamp(logopts, _now_us())}{logdomain}{message}\n"

        stream = self._stream if self._stream is not None else sys.stderr
        if stream is None:
            # No stderr at all (pythonw, detached daemons).
            return 0
        try:
            stream.write(record)
            stream.flush()
        except (OSError, ValueError):
            # Closed or broken stream; the record is lost, the caller carries on.
            return 0
        return len(record)
