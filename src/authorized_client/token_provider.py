# authorized_client/token_provider.py
"""Client credentials token exchange."""

import json
import logging
from typing import Dict

import httpx

from .exceptions import AuthConnectionError, AuthServerResponseError
from .settings import Settings
from .token import Token

logger = logging.getLogger(__name__)


class TokenProvider:
    """Exchanges a client id and secret for a bearer token."""

    def __init__(self, settings: Settings, http_client: httpx.AsyncClient):
        """
        Initialize token provider.

        Args:
            settings: Client credentials and token endpoint
            http_client: Transport used for the token request
        """
        self.settings = settings
        self.http_client = http_client

    def build_form(self) -> Dict[str, str]:
        """Form fields of the client credentials request."""
        data = {
            "grant_type": "client_credentials",
            "client_id": self.settings.client_id,
            "client_secret": self.settings.client_secret,
        }
        if self.settings.scopes:
            data["scope"] = self.settings.scope_string()
        return data

    async def fetch(self) -> Token:
        """
        Perform the client credentials exchange.

        Returns:
            The issued bearer token

        Raises:
            AuthConnectionError: If the token endpoint cannot be reached or
                answers with a non-success status
            AuthServerResponseError: If the token response is malformed
        """
        token_url = self.settings.token_url
        logger.debug(f"Requesting client credentials token from {token_url}")

        try:
            response = await self.http_client.post(
                token_url,
                data=self.build_form(),
                headers={"Accept": "application/json"},
            )
        except httpx.HTTPError as e:
            logger.error(f"Token request to {token_url} failed: {e}")
            raise AuthConnectionError(f"Token request failed: {e}") from e

        if not response.is_success:
            logger.error(
                f"Token endpoint {token_url} returned status {response.status_code}"
            )
            raise AuthConnectionError(
                f"Token request failed with status {response.status_code}: "
                f"{response.text}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"Token endpoint {token_url} returned a non-JSON body")
            raise AuthServerResponseError(
                f"Token response is not valid JSON: {e}",
                status_code=response.status_code,
            ) from e

        token = Token.from_response(payload)
        logger.debug(
            f"Exchanged client credentials for a {token.token_type} token "
            f"(expires_in={token.expires_in})"
        )
        return token
