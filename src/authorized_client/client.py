# authorized_client/client.py
"""HTTP client authorized through the OAuth 2.0 client credentials grant."""

import logging
from typing import Any, Dict, Optional, Type, TypeVar, overload

import httpx

from .dispatcher import RequestDispatcher, decode_json, decode_text
from .settings import Settings
from .token import Token
from .token_provider import TokenProvider

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AuthorizedClient:
    """JSON REST client holding a bearer token from a client credentials exchange.

    Instances only come from :meth:`connect`, which fetches the token up front;
    a client without a token never exists. The token is never refreshed, so
    once it expires the resource server's 401 surfaces as
    :class:`~authorized_client.exceptions.HttpStatusError`.

    Example:
        ```python
        settings = Settings(
            client_id="xxxxxxxxxx",
            client_secret="xxxxxxxxxx",
            token_url="https://authorization-server.com/token",
            scopes=["profile", "email"],
        )
        async with await AuthorizedClient.connect(settings) as client:
            info = await client.get("https://protected-endpoint.com/info", MyResponse)
        ```
    """

    def __init__(
        self,
        settings: Settings,
        token: Token,
        http_client: httpx.AsyncClient,
        owns_http_client: bool = False,
    ):
        self._settings = settings
        self._dispatcher = RequestDispatcher(http_client, token)
        self._http_client = http_client
        self._owns_http_client = owns_http_client

    @classmethod
    async def connect(
        cls, settings: Settings, *, http_client: Optional[httpx.AsyncClient] = None
    ) -> "AuthorizedClient":
        """
        Create a client, immediately fetching a bearer token.

        When this fails the settings are probably incorrect.

        Args:
            settings: Client credentials and token endpoint
            http_client: Transport to use; timeouts, proxies and pooling are
                taken from it. A new one is created (and owned) if omitted.

        Returns:
            A ready client

        Raises:
            AuthConnectionError: If the token exchange fails
        """
        owns_http_client = http_client is None
        if http_client is None:
            http_client = httpx.AsyncClient()

        logger.debug(f"Initial connect to '{settings.token_url}'")
        try:
            token = await TokenProvider(settings, http_client).fetch()
        except BaseException:
            if owns_http_client:
                await http_client.aclose()
            raise

        logger.info(
            f"Successfully connected: got bearer token from {settings.token_url}"
        )
        return cls(settings, token, http_client, owns_http_client=owns_http_client)

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def token(self) -> Token:
        return self._dispatcher.token

    @overload
    async def request(
        self,
        method: str,
        url: str,
        *,
        body: Any = None,
        response_type: None = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any: ...

    @overload
    async def request(
        self,
        method: str,
        url: str,
        *,
        body: Any = None,
        response_type: Type[T],
        headers: Optional[Dict[str, str]] = None,
    ) -> T: ...

    async def request(
        self,
        method: str,
        url: str,
        *,
        body: Any = None,
        response_type: Any = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """
        Make a request to the endpoint and decode the JSON response.

        The bearer token is included automatically. Any 2xx status is a
        success; everything else raises.

        Args:
            method: HTTP method (GET, POST, etc.)
            url: Full URL to request
            body: Optional JSON-serializable body
            response_type: Type to validate the response against
            headers: Optional extra headers

        Returns:
            The decoded response body

        Raises:
            RequestTransportError: If the request fails at the network level
            HttpStatusError: If the response status is not 2xx
            SerializationError: If the body cannot be serialized
            DeserializationError: If the response is not the expected JSON
        """
        response = await self._dispatcher.send(method, url, body=body, headers=headers)
        return decode_json(response, response_type)

    @overload
    async def get(self, url: str, response_type: None = None) -> Any: ...

    @overload
    async def get(self, url: str, response_type: Type[T]) -> T: ...

    async def get(self, url: str, response_type: Any = None) -> Any:
        """GET a JSON resource. See :meth:`request`."""
        return await self.request("GET", url, response_type=response_type)

    async def get_plain_text(self, url: str) -> str:
        """GET a resource and return the body as text."""
        response = await self._dispatcher.send("GET", url)
        return decode_text(response)

    @overload
    async def post(self, url: str, body: Any, response_type: None = None) -> Any: ...

    @overload
    async def post(self, url: str, body: Any, response_type: Type[T]) -> T: ...

    async def post(self, url: str, body: Any, response_type: Any = None) -> Any:
        """POST a JSON body and decode the JSON response. See :meth:`request`."""
        return await self.request("POST", url, body=body, response_type=response_type)

    async def post_plain_text(self, url: str, body: Any) -> str:
        """POST a JSON body and return the response body as text."""
        response = await self._dispatcher.send("POST", url, body=body)
        return decode_text(response)

    async def post_ignore_response(self, url: str, body: Any) -> None:
        """POST a JSON body, discarding the response body."""
        await self._dispatcher.send("POST", url, body=body)

    @overload
    async def put(self, url: str, body: Any, response_type: None = None) -> Any: ...

    @overload
    async def put(self, url: str, body: Any, response_type: Type[T]) -> T: ...

    async def put(self, url: str, body: Any, response_type: Any = None) -> Any:
        """PUT a JSON body and decode the JSON response. See :meth:`request`."""
        return await self.request("PUT", url, body=body, response_type=response_type)

    @overload
    async def patch(self, url: str, body: Any, response_type: None = None) -> Any: ...

    @overload
    async def patch(self, url: str, body: Any, response_type: Type[T]) -> T: ...

    async def patch(self, url: str, body: Any, response_type: Any = None) -> Any:
        """PATCH a JSON body and decode the JSON response. See :meth:`request`."""
        return await self.request("PATCH", url, body=body, response_type=response_type)

    @overload
    async def delete(self, url: str, response_type: None = None) -> Any: ...

    @overload
    async def delete(self, url: str, response_type: Type[T]) -> T: ...

    async def delete(self, url: str, response_type: Any = None) -> Any:
        """DELETE a resource and decode the JSON response, if any. See :meth:`request`."""
        return await self.request("DELETE", url, response_type=response_type)

    async def aclose(self) -> None:
        """Release the transport if this client created it."""
        if self._owns_http_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> "AuthorizedClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
