"""Configuration for reqkit."""

from .settings import LogFormat, LogLevel, ReqkitSettings

__all__ = ["ReqkitSettings", "LogLevel", "LogFormat"]
