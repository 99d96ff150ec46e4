# tests/conftest.py
import io
from typing import Any

import pytest

from srlog import facility
from srlog.config import get_settings
from srlog.context import LogContext
from srlog.types import format_message

SRLOG_ENV_VARS = ("SRLOG_LOGLEVEL", "SRLOG_LOGOPTS", "SRLOG_LOGDOMAIN")


class Recorder:
    """Dispatch target that keeps ``(data, level, message)`` instead of writing."""

    def __init__(self, result: int = 0):
        self.entries: list[tuple[Any, int, str]] = []
        self.result = result

    def __call__(self, data, level, fmt, /, *args, **kwargs) -> int:
        self.entries.append((data, level, format_message(fmt, args, kwargs)))
        return self.result


@pytest.fixture
def stream() -> io.StringIO:
    """In-memory diagnostic stream for the default writer."""
    return io.StringIO()


@pytest.fixture
def ctx(stream) -> LogContext:
    """A fresh context with default configuration writing to ``stream``."""
    return LogContext(stream=stream)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture(autouse=True)
def isolated_facility(monkeypatch):
    """Keep environment settings and the process-wide context out of each test."""
    for var in SRLOG_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    previous = facility.set_context(None)
    yield
    facility.set_context(previous)
    get_settings.cache_clear()
