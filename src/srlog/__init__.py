"""srlog: severity-filtered, pluggable logging for embeddable libraries.

Library code logs through ``error()``, ``warn()``, ``info()``, ``debug()``
and ``spew()``. The embedding application decides what happens to those
messages: it sets the threshold, timestamp options and domain prefix, or
installs its own dispatch target with ``set_callback()``. By default records
are written to stderr as ``[date][time][domain]message``.
"""

__version__ = "0.1.0"

from . import config, context, exceptions, facility, levels, log_config, types
from .context import LogContext
from .exceptions import ConfigurationError, InvalidArgumentError, SrlogError
from .facility import (
    debug,
    error,
    get_context,
    get_logdomain,
    get_loglevel,
    get_logopts,
    info,
    log,
    set_callback,
    set_context,
    set_default_callback,
    set_logdomain,
    set_loglevel,
    set_logopts,
    spew,
    warn,
)
from .levels import LOGDOMAIN_DEFAULT, LOGDOMAIN_MAXLEN, LogLevel, LogOption
from .log_config import LoguruBridge, configure_logging
from .types import LogCallback, format_message

__all__ = [
    "__version__",
    "config",
    "context",
    "exceptions",
    "facility",
    "levels",
    "log_config",
    "types",
    "LOGDOMAIN_DEFAULT",
    "LOGDOMAIN_MAXLEN",
    "ConfigurationError",
    "InvalidArgumentError",
    "LogCallback",
    "LogContext",
    "LogLevel",
    "LogOption",
    "LoguruBridge",
    "SrlogError",
    "configure_logging",
    "debug",
    "error",
    "format_message",
    "get_context",
    "get_logdomain",
    "get_loglevel",
    "get_logopts",
    "info",
    "log",
    "set_callback",
    "set_context",
    "set_default_callback",
    "set_logdomain",
    "set_loglevel",
    "set_logopts",
    "spew",
    "warn",
]
