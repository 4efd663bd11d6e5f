"""
reqkit Exception Hierarchy

Exception Hierarchy:
    ReqkitError (base)
    └── RequestError

- base: Core ReqkitError base class
- request: Failed HTTP response error
- templates: Message templates and error codes
"""

from .base import ReqkitError
from .request import RequestError
from .templates import ErrorCodes, ErrorMessageTemplates

__all__ = [
    "ReqkitError",
    "RequestError",
    "ErrorCodes",
    "ErrorMessageTemplates",
]
