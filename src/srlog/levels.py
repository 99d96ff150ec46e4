# srlog/levels.py
"""Severity levels and format options understood by the srlog facility.

Severities are ordered from most to least important; a record passes the
default writer when its level is numerically less than or equal to the
configured threshold. Format options are bit flags selecting the timestamp
fields the default writer renders.
"""

from enum import IntEnum, IntFlag
from typing import Self

from .exceptions import InvalidArgumentError

LOGDOMAIN_MAXLEN = 30
"""Maximum number of characters kept from a log domain string."""

LOGDOMAIN_DEFAULT = "sr: "
"""Domain prefix used until a host sets its own."""


class LogLevel(IntEnum):
    """Ordered severity levels. ``NONE`` as a threshold suppresses everything."""

    NONE = 0
    ERROR = 1
    WARN = 2
    INFO = 3
    DEBUG = 4
    SPEW = 5

    @classmethod
    def parse(cls, value: "LogLevel | int | str") -> Self:
        """Convert a level given as member, number or name.

        Names are case-insensitive and accept the common aliases
        ``err``, ``warning`` and ``dbg``.

        Raises:
            InvalidArgumentError: If the value does not name a defined level.
        """
        if isinstance(value, bool):
            raise InvalidArgumentError(f"Invalid loglevel {value!r}.")
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                raise InvalidArgumentError(f"Invalid loglevel {value}.") from None
        if isinstance(value, str):
            text = value.strip()
            number = _to_int(text)
            if number is not None:
                return cls.parse(number)
            name = _LEVEL_ALIASES.get(text.lower(), text.upper())
            try:
                return cls[name]
            except KeyError:
                raise InvalidArgumentError(f"Invalid loglevel {value!r}.") from None
        raise InvalidArgumentError(f"Invalid loglevel {value!r}.")


def _to_int(text: str) -> int | None:
    """Return ``text`` as an integer, or None when it is not a plain number."""
    try:
        return int(text)
    except ValueError:
        return None


_LEVEL_ALIASES = {
    "err": "ERROR",
    "warning": "WARN",
    "dbg": "DEBUG",
    "trace": "SPEW",
}


class LogOption(IntFlag):
    """Timestamp options for the default writer.

    ``TIME_US`` wins over ``TIME_MS`` when both are set. ``UTC`` switches the
    calendar conversion from local time to UTC and renders nothing on its own.
    """

    NONE = 0
    DATE = 1
    TIME = 2
    TIME_MS = 4
    TIME_US = 8
    UTC = 16

    # Composite masks
    TIMESTAMP = DATE | TIME | TIME_MS | TIME_US
    CLOCK = TIME | TIME_MS | TIME_US
    ALL = DATE | TIME | TIME_MS | TIME_US | UTC

    @classmethod
    def parse(cls, value: "LogOption | int | str") -> Self:
        """Convert an option mask given as number or as names joined by ``,`` or ``|``.

        Raises:
            InvalidArgumentError: If the value carries bits outside ``ALL``
                or names an unknown option.
        """
        if isinstance(value, bool):
            raise InvalidArgumentError(f"Invalid log options {value!r}.")
        if isinstance(value, int):
            if value < 0 or int(value) & ~int(cls.ALL):
                raise InvalidArgumentError(f"Invalid log options {int(value)}.")
            return cls(value)
        if isinstance(value, str):
            text = value.strip()
            number = _to_int(text)
            if number is not None:
                return cls.parse(number)
            mask = cls.NONE
            for part in text.replace("|", ",").split(","):
                part = part.strip().upper().replace("-", "_")
                if not part:
                    continue
                try:
                    mask |= cls[part]
                except KeyError:
                    raise InvalidArgumentError(
                        f"Invalid log option {part.lower()!r}."
                    ) from None
            return mask
        raise InvalidArgumentError(f"Invalid log options {value!r}.")
