"""
Base exception class for reqkit.

Errors are immutable once constructed: every attribute is a read-only
property and ``context`` is handed out as a copy.
"""

import uuid
from datetime import datetime
from typing import Any, Dict, Optional


class ReqkitError(Exception):
    """Base exception for all reqkit errors.

    Attributes:
        message: The error message
        error_code: Optional error code for programmatic handling
        context: Structured details for logging
        correlation_id: Short ID for tracking this error across logs
        timestamp: Construction time
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self._message = message
        self._error_code = error_code
        self._context = dict(context) if context else {}
        self._correlation_id = uuid.uuid4().hex[:8]
        self._timestamp = datetime.now()
        super().__init__(message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def error_code(self) -> Optional[str]:
        return self._error_code

    @property
    def context(self) -> Dict[str, Any]:
        return dict(self._context)

    @property
    def correlation_id(self) -> str:
        return self._correlation_id

    @property
    def timestamp(self) -> datetime:
        return self._timestamp

    def __str__(self) -> str:
        return self._message

    def __reduce__(self):
        # State carries correlation_id and timestamp across copy/pickle
        return (
            self.__class__,
            (self._message, self._error_code, self._context),
            self.__dict__.copy(),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self._message,
            "error_code": self._error_code,
            "correlation_id": self._correlation_id,
            "timestamp": self._timestamp.isoformat(),
            "context": self.context,
        }
