"""
reqkit: HTTP request helpers

Builds outbound request headers and represents failed HTTP responses as
typed errors. Network transport is left to the HTTP client of your choice.

- constants: MIME types and header names
- headers: Fluent header builder
- exceptions: RequestError and the reqkit exception hierarchy
- config: Environment-backed settings
- logging: Optional logging setup for the reqkit logger
"""

import logging

__version__ = "0.1.0"

from .config import ReqkitSettings
from .constants import CONTENTTYPE_JSON
from .exceptions import ReqkitError, RequestError
from .headers import HeaderBuilder, default_headers, headers

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CONTENTTYPE_JSON",
    "HeaderBuilder",
    "headers",
    "default_headers",
    "ReqkitError",
    "RequestError",
    "ReqkitSettings",
]
