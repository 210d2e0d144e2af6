# authorized_client/token.py
"""Bearer token model."""

import time
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import AuthServerResponseError


def safe_display_token(token: str, prefix_len: int = 20, suffix_len: int = 6) -> str:
    """Safely display a token with most characters redacted.

    Short tokens reveal at most a quarter of their characters (never more
    than four) and no suffix.
    """
    if len(token) <= prefix_len + suffix_len:
        shown = min(len(token) // 4, 4)
        return f"{token[:shown]}...{'*' * 8}"

    prefix = token[:prefix_len]
    suffix = token[-suffix_len:]
    redacted_len = len(token) - prefix_len - suffix_len

    return f"{prefix}...{'*' * min(redacted_len, 20)}...{suffix}"


class Token(BaseModel):
    """Access token issued by a client credentials exchange.

    Created once per client and never mutated.
    """

    model_config = ConfigDict(frozen=True)

    access_token: str = Field(min_length=1, repr=False)
    token_type: str = "Bearer"
    expires_in: Optional[int] = None
    scope: Optional[str] = None
    issued_at: float = Field(default_factory=time.time)

    @property
    def expires_at(self) -> Optional[float]:
        """Epoch seconds at which the token expires, if the server said."""
        if self.expires_in is None:
            return None
        return self.issued_at + self.expires_in

    def is_expired(self) -> bool:
        """Check whether the token is past its advertised lifetime."""
        expires_at = self.expires_at
        if expires_at is None:
            return False
        return time.time() >= expires_at

    def get_authorization_header(self) -> str:
        """Authorization header value for this token."""
        return f"Bearer {self.access_token}"

    @classmethod
    def from_response(cls, payload: Any) -> "Token":
        """
        Build a token from a token endpoint JSON payload.

        Args:
            payload: Decoded JSON body of the token response

        Returns:
            The issued token

        Raises:
            AuthServerResponseError: If the payload is not a valid token response
        """
        if not isinstance(payload, dict):
            raise AuthServerResponseError(
                f"Token response must be a JSON object, got {type(payload).__name__}"
            )
        if "access_token" not in payload:
            raise AuthServerResponseError("Token response missing 'access_token' field")

        fields = {
            name: payload[name]
            for name in ("access_token", "token_type", "expires_in", "scope")
            if payload.get(name) is not None
        }
        try:
            return cls.model_validate(fields)
        except ValidationError as e:
            raise AuthServerResponseError(f"Malformed token response: {e}") from e
