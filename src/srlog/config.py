# srlog/config.py
from functools import lru_cache

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError
from .levels import LOGDOMAIN_DEFAULT, LogLevel, LogOption


class LogSettings(BaseSettings):
    """
    Start-up configuration of the process-wide srlog context, loaded from
    environment variables (prefixed with 'SRLOG_') or a .env file.

    Levels and options may be given as numbers or by name, e.g.
    ``SRLOG_LOGLEVEL=debug`` and ``SRLOG_LOGOPTS=date,time_ms``.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SRLOG_",
        extra="ignore",  # Ignore extra fields found in environment
        case_sensitive=False,
    )

    loglevel: int = Field(
        default=int(LogLevel.WARN),
        description="Initial severity threshold (none, error, warn, info, debug, spew)",
    )
    logopts: int = Field(
        default=int(LogOption.NONE),
        description="Initial timestamp options (date, time, time_ms, time_us, utc)",
    )
    logdomain: str = Field(
        default=LOGDOMAIN_DEFAULT,
        description="Initial domain prefix; longer values are truncated",
    )

    @field_validator("loglevel", mode="before")
    @classmethod
    def _parse_loglevel(cls, value: object) -> int:
        # InvalidArgumentError is a ValueError, so pydantic reports it as such.
        return int(LogLevel.parse(value))  # type: ignore[arg-type]

    @field_validator("logopts", mode="before")
    @classmethod
    def _parse_logopts(cls, value: object) -> int:
        return int(LogOption.parse(value))  # type: ignore[arg-type]


@lru_cache
def get_settings() -> LogSettings:
    """
    Provides access to the srlog start-up settings.

    The instance is cached; call ``get_settings.cache_clear()`` to reload.

    Returns:
        LogSettings: The settings instance.

    Raises:
        ConfigurationError: If a configured value is invalid.
    """
    try:
        return LogSettings()
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid srlog settings: {exc}") from exc
