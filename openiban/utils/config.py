"""Application settings loaded from environment variables and ``.env``.

Priority chain (highest to lowest):
  1. Init kwargs
  2. Env vars with the ``OPENIBAN_`` prefix
  3. ``.env`` file in the working directory
  4. Code defaults

Command line flags such as ``--log-level`` override the loaded values.

Only the command line layer reads settings; the validation core takes the
locale and options as explicit arguments.
"""

from functools import lru_cache
from typing import Literal, get_args

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from openiban.i18n.catalog import DEFAULT_LOCALE, SUPPORTED_LOCALES

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_LEVELS: tuple[str, ...] = get_args(LogLevel)


class Settings(BaseSettings):
    """OpenIBAN settings."""

    model_config = SettingsConfigDict(
        env_prefix="OPENIBAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    locale: str = Field(default=DEFAULT_LOCALE, description="Locale for validation messages")
    log_level: LogLevel = Field(default="WARNING", description="Minimum log level")
    json_logs: bool = Field(default=False, description="Emit logs as JSON lines")
    debug: bool = Field(default=False, description="Colorful development log output")

    @field_validator("locale")
    @classmethod
    def _validate_locale(cls, value: str) -> str:
        locale = value.strip().lower()
        if locale not in SUPPORTED_LOCALES:
            raise ValueError(
                f"Unsupported locale: {value}. Supported: {', '.join(SUPPORTED_LOCALES)}"
            )
        return locale

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the cached settings instance."""
    return Settings()


def reload_settings() -> Settings:
    """Drop cached settings and read them again (environment changes, tests)."""
    get_settings.cache_clear()
    return get_settings()
