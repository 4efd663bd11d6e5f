"""
reqkit Logging Package

- config: Logging configuration
- formatters: Log formatting (JSON, console, rich)
- manager: Handler setup for the reqkit logger hierarchy
"""

from .config import LoggingConfig, create_default_config
from .formatters import StructuredFormatter, create_console_formatter, create_rich_handler
from .manager import configure_from_settings, configure_logging, get_logger

__all__ = [
    "LoggingConfig",
    "create_default_config",
    "StructuredFormatter",
    "create_console_formatter",
    "create_rich_handler",
    "configure_logging",
    "configure_from_settings",
    "get_logger",
]
