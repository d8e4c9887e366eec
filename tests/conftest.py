"""Pytest configuration: canned fixtures and a fake aiohttp transport."""

import json
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest

from paywire.stripe.models import Subscription

FIXTURES = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> bytes:
    """Read a canned response body from tests/fixtures."""
    return (FIXTURES / name).read_bytes()


class MockResponse:
    def __init__(self, body: bytes, status: int):
        self.status = status
        self._body = body

    async def read(self):
        return self._body

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        pass


class MockSession:
    def __init__(self, transport: "FakeTransport"):
        self._transport = transport

    def request(self, method, url, headers=None, data=None):
        self._transport.calls.append(
            {"method": method, "url": url, "headers": headers or {}, "data": data}
        )
        if self._transport.error is not None:
            raise self._transport.error
        return MockResponse(self._transport.body, self._transport.status)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        pass


class FakeTransport:
    """Stands in for aiohttp.ClientSession and records every request."""

    def __init__(self):
        self.calls: list[dict[str, Any]] = []
        self.session_kwargs: list[dict[str, Any]] = []
        self.body = b"{}"
        self.status = 200
        self.error: Exception | None = None

    def respond(self, body: Any, status: int = 200) -> None:
        if isinstance(body, (dict, list)):
            body = json.dumps(body).encode("utf-8")
        elif isinstance(body, str):
            body = body.encode("utf-8")
        self.body = body
        self.status = status

    def fail(self, error: Exception) -> None:
        self.error = error

    def session(self, *args, **kwargs) -> MockSession:
        self.session_kwargs.append(kwargs)
        return MockSession(self)

    @property
    def last(self) -> dict[str, Any]:
        return self.calls[-1]


@pytest.fixture
def transport():
    """Patch aiohttp.ClientSession with a FakeTransport for the test's duration."""
    fake = FakeTransport()
    with patch("aiohttp.ClientSession", fake.session):
        yield fake


@pytest.fixture
def fixture_body():
    """Return the fixture loader so tests can read canned bodies by name."""
    return load_fixture


@pytest.fixture
def subscription() -> Subscription:
    """Active subscription with a single item (si_test on individual-monthly)."""
    return Subscription.model_validate_json(load_fixture("subscription.json"))


@pytest.fixture
def empty_subscription(subscription: Subscription) -> Subscription:
    """Subscription whose item list is empty."""
    items = subscription.items.model_copy(update={"data": []})
    return subscription.model_copy(update={"items": items})
