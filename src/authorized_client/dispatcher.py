# authorized_client/dispatcher.py
"""Bearer-authorized request dispatch and JSON response decoding."""

import functools
import json
import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from .exceptions import (
    DeserializationError,
    HttpStatusError,
    RequestTransportError,
    SerializationError,
)
from .token import Token

logger = logging.getLogger(__name__)

_BODY_ADAPTER: TypeAdapter[Any] = TypeAdapter(Any)


def serialize_body(body: Any) -> bytes:
    """
    Serialize a request body to JSON.

    Plain JSON values, pydantic models and dataclasses are supported.

    Raises:
        SerializationError: If the body cannot be represented as JSON
    """
    try:
        return _BODY_ADAPTER.dump_json(body)
    except ValueError as e:  # PydanticSerializationError
        raise SerializationError(f"Failed to serialize body: {e}") from e


@functools.lru_cache(maxsize=128)
def _response_adapter(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


def decode_json(response: httpx.Response, response_type: Any = None) -> Any:
    """
    Decode a JSON response body.

    Args:
        response: Successful response
        response_type: Type to validate the body against; plain JSON values
            are returned when omitted

    Returns:
        The decoded body, or ``None`` for 204 No Content

    Raises:
        DeserializationError: If the body is not valid JSON or does not
            match ``response_type``
    """
    if response.status_code == 204:
        return None

    if response_type is None:
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DeserializationError(
                f"Response from {response.request.url} is not valid JSON: {e}"
            ) from e

    try:
        adapter = _response_adapter(response_type)
    except TypeError:
        # unhashable type annotations cannot be cached
        adapter = TypeAdapter(response_type)

    try:
        return adapter.validate_json(response.content)
    except ValidationError as e:
        raise DeserializationError(
            f"Response from {response.request.url} does not match {response_type!r}: {e}"
        ) from e


def decode_text(response: httpx.Response) -> str:
    """Response body as text."""
    return response.text


class RequestDispatcher:
    """Sends requests with the bearer token attached."""

    def __init__(self, http_client: httpx.AsyncClient, token: Token):
        """
        Initialize dispatcher.

        Args:
            http_client: Transport used for every request
            token: Bearer token attached to every request
        """
        self.http_client = http_client
        self._token = token

    @property
    def token(self) -> Token:
        return self._token

    def build_request(
        self,
        method: str,
        url: str,
        body: Any = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Request:
        """Build a request carrying the Authorization header."""
        request_headers = httpx.Headers(headers or {})
        content = None
        if body is not None:
            content = serialize_body(body)
            request_headers["Content-Type"] = "application/json"
        request_headers["Authorization"] = self._token.get_authorization_header()

        return self.http_client.build_request(
            method, url, content=content, headers=request_headers
        )

    async def send(
        self,
        method: str,
        url: str,
        *,
        body: Any = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        """
        Send an authorized request.

        Args:
            method: HTTP method (GET, POST, etc.)
            url: Full URL to request
            body: Optional JSON body
            headers: Optional extra headers; Authorization is always overridden

        Returns:
            The response, with its body read

        Raises:
            SerializationError: If the body cannot be serialized
            RequestTransportError: If the request fails at the network level
            HttpStatusError: If the response status is not 2xx
        """
        request = self.build_request(method.upper(), url, body, headers)
        logger.debug(f"{request.method} {request.url}")

        try:
            response = await self.http_client.send(request)
        except httpx.HTTPError as e:
            raise RequestTransportError(
                f"{request.method} {request.url} failed: {e}"
            ) from e

        logger.debug(f"{request.method} {request.url} -> {response.status_code}")

        if not response.is_success:
            raise HttpStatusError(response.status_code, str(request.url), response.text)

        return response
