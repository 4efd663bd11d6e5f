"""
Fluent builder for outbound HTTP request headers.

The builder accumulates a case-sensitive header mapping through chained
``with_*`` calls and hands out plain ``dict`` copies via ``export()``, ready
to pass as the ``headers`` argument of an HTTP client call. Names are stored
exactly as given; case-insensitive matching is left to the transport.
"""

import logging
from typing import Dict, Mapping, Optional

from reqkit.config import ReqkitSettings
from reqkit.constants import (
    BEARER_PREFIX,
    CONTENTTYPE_JSON,
    HEADER_ACCEPT_LANGUAGE,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    HEADER_USER_AGENT,
)

logger = logging.getLogger(__name__)


class HeaderBuilder:
    """Mutable header builder with chainable setters.

    The initial mapping is copied on construction, so nothing done through
    the builder ever touches the caller's object.
    """

    def __init__(self, initial: Optional[Mapping[str, str]] = None):
        self._headers: Dict[str, str] = dict(initial) if initial else {}
        logger.debug("Created header builder with %d initial headers", len(self._headers))

    @classmethod
    def create(cls, initial: Optional[Mapping[str, str]] = None) -> "HeaderBuilder":
        """Create a builder, optionally seeded with ``initial`` headers."""
        return cls(initial)

    def with_bearer(self, token: str) -> "HeaderBuilder":
        """Set ``Authorization: Bearer <token>``.

        The token is inserted verbatim and the header is set even when the
        token is empty.
        """
        self._headers[HEADER_AUTHORIZATION] = BEARER_PREFIX + token
        return self

    def with_language(self, language: Optional[str] = None) -> "HeaderBuilder":
        """Set ``Accept-Language`` when ``language`` is non-empty."""
        if language:
            self._headers[HEADER_ACCEPT_LANGUAGE] = language
        return self

    def with_content_type_json(self) -> "HeaderBuilder":
        return self.with_content_type(CONTENTTYPE_JSON)

    def with_content_type(self, content_type: str) -> "HeaderBuilder":
        """Set ``Content-Type`` unconditionally."""
        self._headers[HEADER_CONTENT_TYPE] = content_type
        return self

    def with_header(self, key: str, value: Optional[str] = None) -> "HeaderBuilder":
        """Set an arbitrary header when ``value`` is non-empty.

        A missing or empty value leaves any existing header under ``key``
        untouched.
        """
        if value:
            self._headers[key] = value
        return self

    def export(self) -> Dict[str, str]:
        """Return a new, independent copy of the accumulated headers."""
        return dict(self._headers)

    def __contains__(self, key: object) -> bool:
        return key in self._headers

    def __len__(self) -> int:
        return len(self._headers)

    def __repr__(self) -> str:
        # Values may carry credentials
        return f"{self.__class__.__name__}(keys={list(self._headers)!r})"


def headers(initial: Optional[Mapping[str, str]] = None) -> HeaderBuilder:
    """Create a :class:`HeaderBuilder`.

    Example:
        >>> headers().with_bearer("abc123").with_content_type_json().export()
        {'Authorization': 'Bearer abc123', 'Content-Type': 'application/json'}
    """
    return HeaderBuilder(initial)


def default_headers(settings: Optional[ReqkitSettings] = None) -> HeaderBuilder:
    """Create a builder seeded with defaults from settings.

    Unset values add nothing, following the same rules as
    :meth:`HeaderBuilder.with_header` and :meth:`HeaderBuilder.with_language`.

    Args:
        settings: Settings to read; loaded from the environment when omitted
    """
    settings = settings or ReqkitSettings()
    return (
        HeaderBuilder()
        .with_header(HEADER_USER_AGENT, settings.user_agent)
        .with_language(settings.language)
    )
