"""
HTTP request exceptions.

RequestError wraps an unsuccessful HTTP response. Deciding whether a response
failed is up to the caller; this module only provides the error shape.
"""

import logging
from types import SimpleNamespace
from typing import Any

from .base import ReqkitError
from .templates import ErrorCodes, ErrorMessageTemplates

logger = logging.getLogger(__name__)


def _response_status(response: Any) -> int:
    """Read the status code from a response-like object.

    Accepts objects with a ``status`` attribute (urllib, aiohttp, httpx-style
    test doubles) and falls back to ``status_code`` (requests, httpx).
    """
    status = getattr(response, "status", None)
    if status is None:
        status = response.status_code
    return status


class RequestError(ReqkitError):
    """Raised by callers when an HTTP response indicates failure.

    Args:
        response: Completed response exposing ``status`` or ``status_code``
        data: Optional payload such as a parsed error body. Stored by
            reference, never copied.
    """

    def __init__(self, response: Any, data: Any = None):
        status = _response_status(response)
        self._status = status
        self._data = data

        super().__init__(
            ErrorMessageTemplates.REQUEST_FAILED.format(status=status),
            error_code=ErrorCodes.REQUEST_FAILED,
            context={"status": status},
        )
        logger.debug("Created RequestError for status %s", status)

    @property
    def status(self) -> int:
        """HTTP status code captured at construction time."""
        return self._status

    @property
    def data(self) -> Any:
        """Payload passed at construction, by reference."""
        return self._data

    def __reduce__(self):
        return (
            self.__class__,
            (SimpleNamespace(status=self._status), self._data),
            self.__dict__.copy(),
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(status={self._status!r}, data={self._data!r})"
