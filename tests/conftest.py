"""Shared fixtures: a mock authorization and resource server."""

import json
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest

from authorized_client import Settings

TOKEN_URL = "http://mock/token"
RESOURCE_URL = "http://mock/resource"


def json_response(data: Any, status_code: int = 200) -> httpx.Response:
    """Build a mock httpx.Response with JSON content."""
    return httpx.Response(
        status_code=status_code,
        headers={"content-type": "application/json"},
        json=data,
    )


class MockServer:
    """Routes requests by path and records everything it receives."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.token_payload: Any = {"access_token": "tok123", "token_type": "bearer"}
        self.token_status = 200
        self.routes: Dict[str, Callable[[httpx.Request], httpx.Response]] = {
            "/resource": self.echo_authorization,
        }

    def echo_authorization(self, request: httpx.Request) -> httpx.Response:
        return json_response({"echo": request.headers.get("authorization")})

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path == "/token":
            return json_response(self.token_payload, self.token_status)
        route = self.routes.get(request.url.path)
        if route is None:
            return json_response({"error": "not found"}, 404)
        return route(request)

    def requests_to(self, path: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path == path]

    def last_json(self, path: str) -> Optional[Any]:
        requests = self.requests_to(path)
        if not requests:
            return None
        return json.loads(requests[-1].content)


@pytest.fixture
def server():
    """Provide a mock server."""
    return MockServer()


@pytest.fixture
async def http_client(server):
    """Provide an httpx.AsyncClient wired to the mock server."""
    async with httpx.AsyncClient(transport=httpx.MockTransport(server.handler)) as client:
        yield client


@pytest.fixture
def settings():
    """Provide client credentials settings."""
    return Settings(
        client_id="abc",
        client_secret="secret",
        token_url=TOKEN_URL,
        scopes=["profile"],
    )
