"""
Logging setup for the reqkit logger hierarchy.

reqkit is a library, so only the ``reqkit`` logger is touched; the root
logger and its handlers belong to the application.
"""

import logging
import sys
from typing import Optional

from reqkit.config import ReqkitSettings

from .config import LoggingConfig
from .formatters import StructuredFormatter, create_console_formatter, create_rich_handler

PACKAGE_LOGGER = "reqkit"

_installed_handler: Optional[logging.Handler] = None


def _create_handler(config: LoggingConfig) -> logging.Handler:
    if config.format_type == "rich":
        handler = create_rich_handler()
        handler.setFormatter(logging.Formatter("%(message)s"))
    elif config.format_type == "json":
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(StructuredFormatter(config.service_name, config.version))
    else:  # console format
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(create_console_formatter())
    handler.setLevel(config.level)
    return handler


def configure_logging(config: LoggingConfig) -> logging.Handler:
    """Attach a handler to the ``reqkit`` logger.

    Calling this again replaces the handler installed by the previous call.

    Returns:
        The installed handler
    """
    global _installed_handler

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if _installed_handler is not None:
        package_logger.removeHandler(_installed_handler)

    handler = _create_handler(config)
    package_logger.addHandler(handler)
    package_logger.setLevel(config.level)
    _installed_handler = handler
    return handler


def configure_from_settings(settings: Optional[ReqkitSettings] = None) -> logging.Handler:
    """Configure logging from environment-backed settings."""
    from reqkit import __version__

    settings = settings or ReqkitSettings()
    config = LoggingConfig(
        level=settings.log_level.value,
        format_type=settings.log_format.value,
        version=__version__,
    )
    return configure_logging(config)


def get_logger(name: str) -> logging.Logger:
    """Get a logger inside the ``reqkit`` hierarchy."""
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
