"""Authorized Client - JSON REST calls behind OAuth 2.0 client credentials.

This library makes it easy to call REST endpoints protected by OAuth 2.0
client credentials authorization:
- Client credentials token exchange at connect time
- Bearer token injection on every request
- JSON response decoding into plain values or pydantic-validated types

Built on httpx and pydantic. Only JSON bodies are supported.
"""

from .client import AuthorizedClient
from .dispatcher import RequestDispatcher
from .exceptions import (
    AuthConnectionError,
    AuthorizedClientError,
    AuthServerResponseError,
    DeserializationError,
    HttpStatusError,
    RequestError,
    RequestTransportError,
    SerializationError,
    SettingsError,
)
from .settings import Settings
from .token import Token, safe_display_token
from .token_provider import TokenProvider

__version__ = "0.1.0"

__all__ = [
    "AuthorizedClient",
    "Settings",
    "Token",
    "TokenProvider",
    "RequestDispatcher",
    "safe_display_token",
    "AuthorizedClientError",
    "SettingsError",
    "AuthConnectionError",
    "AuthServerResponseError",
    "RequestError",
    "RequestTransportError",
    "HttpStatusError",
    "SerializationError",
    "DeserializationError",
]
