"""Tests for the GitHub OAuth client."""

from pathlib import Path

import pytest

from paywire.github import endpoints
from paywire.github.client import GitHubClient, LiveGitHubClient
from paywire.github.models import GitHubAccessToken, GitHubApiError, GitHubEmail, GitHubOAuthError, GitHubUser
from paywire.http.errors import DecodeError, RemoteError

SNAPSHOTS = Path(__file__).parent / "fixtures" / "snapshots"


@pytest.fixture
def client() -> LiveGitHubClient:
    return LiveGitHubClient("deadbeef-client-id", "deadbeef-client-secret")


@pytest.mark.parametrize(
    "name, build",
    [
        ("github-fetch-auth-token", lambda: endpoints.fetch_auth_token(
            "deadbeef-client-id", "deadbeef-client-secret", "deadbeef")),
        ("github-fetch-emails", lambda: endpoints.fetch_emails()),
        ("github-fetch-user", lambda: endpoints.fetch_user()),
    ],
)
def test_request_snapshots(name, build):
    expected = (SNAPSHOTS / f"{name}.txt").read_text(encoding="utf-8").rstrip("\n")

    assert build().render() == expected


def test_live_client_satisfies_protocol(client):
    assert isinstance(client, GitHubClient)


def test_missing_app_credentials_rejected():
    with pytest.raises(ValueError):
        LiveGitHubClient("", "secret")


@pytest.mark.asyncio
async def test_fetch_auth_token(client, transport):
    transport.respond({"access_token": "gho_abc", "scope": "user:email", "token_type": "bearer"})

    token = await client.fetch_auth_token("deadbeef")

    assert isinstance(token, GitHubAccessToken)
    assert token.access_token == "gho_abc"
    assert transport.last["method"] == "POST"
    assert transport.last["url"] == "https://github.com/login/oauth/access_token"
    assert transport.last["data"] == (
        b"client_id=deadbeef-client-id&client_secret=deadbeef-client-secret&code=deadbeef"
    )
    assert "Authorization" not in transport.last["headers"]


@pytest.mark.asyncio
async def test_bad_verification_code_is_remote_error(client, transport):
    """GitHub reports OAuth failures in a 200 response body."""
    transport.respond(
        {
            "error": "bad_verification_code",
            "error_description": "The code passed is incorrect or expired.",
            "error_uri": "https://docs.github.com/apps/troubleshooting-oauth-apps",
        }
    )

    with pytest.raises(RemoteError) as exc_info:
        await client.fetch_auth_token("expired")

    assert isinstance(exc_info.value.envelope, GitHubOAuthError)
    assert exc_info.value.envelope.error == "bad_verification_code"


@pytest.mark.asyncio
async def test_fetch_user_uses_bearer_token(client, transport, fixture_body):
    transport.respond(fixture_body("github_user.json"))

    user = await client.fetch_user("gho_abc")

    assert isinstance(user, GitHubUser)
    assert user.login == "blob"
    assert user.name == "Blob McBlob"
    assert transport.last["url"] == "https://api.github.com/user"
    assert transport.last["headers"]["Authorization"] == "Bearer gho_abc"
    assert transport.last["headers"]["Accept"] == "application/vnd.github.v3+json"


@pytest.mark.asyncio
async def test_fetch_emails(client, transport, fixture_body):
    transport.respond(fixture_body("github_emails.json"))

    emails = await client.fetch_emails("gho_abc")

    assert all(isinstance(email, GitHubEmail) for email in emails)
    assert [email.email for email in emails if email.primary] == ["blob@pointfree.co"]


@pytest.mark.asyncio
async def test_bad_credentials_is_remote_error(client, transport):
    transport.respond(
        {"message": "Bad credentials", "documentation_url": "https://docs.github.com/rest"},
        status=401,
    )

    with pytest.raises(RemoteError) as exc_info:
        await client.fetch_user("gho_revoked")

    assert isinstance(exc_info.value.envelope, GitHubApiError)
    assert exc_info.value.status == 401


@pytest.mark.asyncio
async def test_unknown_body_is_decode_error(client, transport):
    transport.respond("[]", status=200)

    with pytest.raises(DecodeError) as exc_info:
        await client.fetch_user("gho_abc")

    assert exc_info.value.raw == "[]"
