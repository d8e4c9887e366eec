"""Authentication schemes attached to requests right before execution."""

from typing import Protocol

import aiohttp

from paywire.http.request import DecodableRequest


class Auth(Protocol):
    """Anything that can sign a request descriptor."""

    def apply(self, request: DecodableRequest) -> DecodableRequest:
        ...


class BasicAuth:
    """HTTP Basic auth with the credential as username and an empty password."""

    def __init__(self, username: str, password: str = ""):
        self._header = aiohttp.BasicAuth(username, password).encode()

    def apply(self, request: DecodableRequest) -> DecodableRequest:
        return request.with_header("Authorization", self._header)

    def __repr__(self) -> str:
        return "BasicAuth(<redacted>)"


class BearerAuth:
    """Bearer token auth (Authorization: Bearer <token>)."""

    def __init__(self, token: str):
        self._token = token

    def apply(self, request: DecodableRequest) -> DecodableRequest:
        return request.with_header("Authorization", f"Bearer {self._token}")

    def __repr__(self) -> str:
        return "BearerAuth(<redacted>)"
