#!/usr/bin/env python3
"""
Example calling a protected JSON API with client credentials.

Usage:
    uv run examples/client_credentials_example.py settings.json https://api.example.com/me

settings.json:
    {
        "client_id": "...",
        "client_secret": "...",
        "token_url": "https://auth.example.com/oauth/token",
        "scopes": ["profile"]
    }
"""

import asyncio
import json
import logging
import sys

from authorized_client import (
    AuthConnectionError,
    AuthorizedClient,
    RequestError,
    Settings,
    safe_display_token,
)


def print_section(title: str):
    """Print a formatted section header."""
    print("\n" + "=" * 70)
    print(title)
    print("=" * 70)


async def main(settings_path: str, url: str) -> int:
    settings = Settings.from_json_file(settings_path)

    print_section(f"Connecting to {settings.token_url}")
    try:
        client = await AuthorizedClient.connect(settings)
    except AuthConnectionError as e:
        print(f"❌ Token exchange failed: {e}")
        return 1

    async with client:
        print(f"✅ Access Token: {safe_display_token(client.token.access_token)}")
        if client.token.expires_in is not None:
            print(f"Expires In: {client.token.expires_in} seconds")

        print_section(f"GET {url}")
        try:
            data = await client.get(url)
        except RequestError as e:
            print(f"❌ Request failed: {e}")
            return 1

        print(json.dumps(data, indent=2))
    return 0


if __name__ == "__main__":
    if len(sys.argv) != 3:
        print(__doc__)
        sys.exit(2)
    logging.basicConfig(level=logging.INFO)
    sys.exit(asyncio.run(main(sys.argv[1], sys.argv[2])))
