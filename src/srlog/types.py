# srlog/types.py
"""Callback types for the srlog dispatch path.

Every log call is routed to exactly one dispatch target: the built-in
writer of a ``LogContext`` or a callable installed by the host application.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class LogCallback(Protocol):
    """Protocol for a dispatch target receiving every log call.

    A custom target is fully responsible for filtering, formatting and
    output; nothing is filtered before it is invoked.

    Args:
        data: The opaque value registered together with the callback. srlog
            stores and passes it on without looking at it; it may be None.
        level: The severity of the call (a ``LogLevel`` value).
        fmt: The ``str.format`` style template.
        *args: Positional arguments for the template.
        **kwargs: Keyword arguments for the template.

    Returns:
        int: Number of characters written. Informational only.
    """

    def __call__(
        self, data: Any, level: int, fmt: str, /, *args: Any, **kwargs: Any
    ) -> int: ...


def format_message(fmt: str, args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    """Render a log template against its arguments.

    A template given without arguments is returned verbatim so literal
    braces need no escaping.

    Raises:
        IndexError, KeyError, ValueError: If the template and arguments do
            not match. Matching them is the caller's obligation.
    """
    if not args and not kwargs:
        return fmt
    return fmt.format(*args, **kwargs)
