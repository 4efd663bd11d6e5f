"""
Library-wide constants for reqkit.

MIME types and header names used when building outbound request headers.
New constants may be added; existing values never change.
"""

# Content types
CONTENTTYPE_JSON = "application/json"

# Header names
HEADER_AUTHORIZATION = "Authorization"
HEADER_ACCEPT_LANGUAGE = "Accept-Language"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_USER_AGENT = "User-Agent"

# Authorization schemes
BEARER_PREFIX = "Bearer "
