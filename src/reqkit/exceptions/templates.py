"""
Standardized error message templates and error codes.
"""


class ErrorMessageTemplates:
    """Error message templates for consistent formatting."""

    REQUEST_FAILED = "Request failed with status code {status}"


class ErrorCodes:
    """Error codes for programmatic handling."""

    REQUEST_FAILED = "HTTP_001"
