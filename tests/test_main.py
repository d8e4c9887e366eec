"""Tests for the boot sequence."""

import pytest

from paywire import main
from paywire.config import settings


@pytest.fixture
def stripe_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("STRIPE_SECRET_KEY", "sk_test_123")
    monkeypatch.setattr(settings, "_config", None)


@pytest.mark.asyncio
async def test_boot_lists_plans(stripe_env, transport, fixture_body, caplog):
    transport.respond(fixture_body("plans.json"))

    with caplog.at_level("INFO"):
        await main.boot()

    assert transport.last["url"] == "https://api.stripe.com/v1/plans"
    assert "2 plans visible" in caplog.text
    assert "sk_test_123" not in caplog.text


@pytest.mark.asyncio
async def test_boot_exits_on_remote_error(stripe_env, transport, fixture_body):
    transport.respond(fixture_body("error_invalid_request.json"), status=401)

    with pytest.raises(SystemExit) as exc_info:
        await main.boot()

    assert exc_info.value.code == 1


@pytest.mark.asyncio
async def test_boot_exits_without_secret_key(monkeypatch, tmp_path, transport):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("STRIPE_SECRET_KEY", raising=False)
    monkeypatch.setattr(settings, "_config", None)

    with pytest.raises(SystemExit):
        await main.boot()

    assert transport.calls == []
