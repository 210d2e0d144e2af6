# authorized_client/settings.py
"""Client credentials configuration."""

import json
from pathlib import Path
from typing import Any, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import SettingsError


class Settings(BaseModel):
    """Settings for a client credentials exchange.

    Immutable once built. Scopes keep the order they were given in.
    """

    model_config = ConfigDict(frozen=True)

    client_id: str
    client_secret: str = Field(repr=False)
    token_url: str
    scopes: tuple[str, ...] = ()

    def scope_string(self) -> str:
        """Scopes in the space-delimited form the token endpoint expects."""
        return " ".join(self.scopes)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Settings":
        """
        Build settings from a mapping.

        Args:
            data: Mapping with client_id, client_secret, token_url and scopes

        Returns:
            Validated settings

        Raises:
            SettingsError: If a field is missing or has the wrong type
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise SettingsError(f"Invalid settings: {e}") from e

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "Settings":
        """
        Load settings from a JSON document.

        Args:
            path: Path to the JSON file

        Returns:
            Validated settings

        Raises:
            SettingsError: If the file cannot be read or is not valid settings
        """
        try:
            with open(path, "r") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise SettingsError(f"Cannot load settings from {path}: {e}") from e

        if not isinstance(data, dict):
            raise SettingsError(f"Settings in {path} must be a JSON object")
        return cls.from_dict(data)
