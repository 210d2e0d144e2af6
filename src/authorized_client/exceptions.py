# authorized_client/exceptions.py
"""Exception hierarchy for authorized_client.

Construction failures derive from :class:`AuthConnectionError`, so a caller
can treat any failed ``connect`` as a single authorization failure. Per-call
failures derive from :class:`RequestError` and leave the client usable.
"""

from typing import Optional


class AuthorizedClientError(Exception):
    """Base exception for all authorized_client errors."""


class SettingsError(AuthorizedClientError):
    """Raised when settings cannot be loaded or validated."""


class AuthConnectionError(AuthorizedClientError):
    """Raised when the client credentials exchange fails.

    Args:
        message: Human-readable error description.
        status_code: HTTP status returned by the token endpoint, if any.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class AuthServerResponseError(AuthConnectionError):
    """Raised when the token endpoint answers with a malformed payload."""


class RequestError(AuthorizedClientError):
    """Base class for failures of a single resource request."""


class RequestTransportError(RequestError):
    """Raised on network-level failures (timeout, DNS, connection refused)."""


class HttpStatusError(RequestError):
    """Raised when a resource endpoint returns a non-success status.

    Args:
        status_code: HTTP status code of the response.
        url: URL that was requested.
        body: Response body as text.
    """

    def __init__(self, status_code: int, url: str, body: str = ""):
        super().__init__(f"Unsupported status code (CODE={status_code}) from {url}")
        self.status_code = status_code
        self.url = url
        self.body = body


class SerializationError(RequestError):
    """Raised when a request body cannot be serialized to JSON."""


class DeserializationError(RequestError):
    """Raised when a response body is not valid JSON or has the wrong shape."""
