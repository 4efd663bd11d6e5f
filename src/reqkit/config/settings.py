"""
Configuration models for reqkit.

Pydantic-based settings that supply default header values and logging
options from the environment.
"""

from enum import Enum
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    """Valid logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class LogFormat(str, Enum):
    """Supported log output formats."""

    CONSOLE = "console"
    JSON = "json"
    RICH = "rich"


class ReqkitSettings(BaseSettings):
    """Settings that can be overridden by environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="REQKIT_",
        case_sensitive=False,
        extra="ignore",
    )

    user_agent: Optional[str] = Field(None, description="Default User-Agent header")
    language: Optional[str] = Field(None, description="Default Accept-Language header")
    log_level: LogLevel = Field(LogLevel.INFO, description="Logging level")
    log_format: LogFormat = Field(LogFormat.CONSOLE, description="Log output format")

    @field_validator("user_agent", "language")
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and len(v.strip()) == 0:
            return None
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_log_format(cls, v):
        if isinstance(v, str):
            return v.lower()
        return v
