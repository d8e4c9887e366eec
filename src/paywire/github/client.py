"""GitHub client facade for the OAuth login flow."""

from typing import Any, Optional, Protocol, Union, runtime_checkable

from paywire.github import endpoints
from paywire.github.models import (
    GitHubAccessToken,
    GitHubApiError,
    GitHubEmail,
    GitHubOAuthError,
    GitHubToken,
    GitHubUser,
)
from paywire.http.auth import BearerAuth
from paywire.http.executor import execute

GitHubErrorEnvelope = Union[GitHubOAuthError, GitHubApiError]


@runtime_checkable
class GitHubClient(Protocol):
    async def fetch_auth_token(self, code: str) -> GitHubAccessToken: ...

    async def fetch_emails(self, token: GitHubToken) -> list[GitHubEmail]: ...

    async def fetch_user(self, token: GitHubToken) -> GitHubUser: ...


class LiveGitHubClient:
    """
    GitHubClient bound to an OAuth app's credentials.

    User endpoints are signed with the user's access token (Bearer); the
    token exchange sends the app credentials in the form body.
    """

    def __init__(self, client_id: str, client_secret: str, timeout: Optional[float] = None):
        if not client_id or not client_secret:
            raise ValueError("GitHub client_id and client_secret are required")
        self._client_id = client_id
        self._client_secret = client_secret
        self._timeout = timeout

    @classmethod
    def from_config(cls, config: Any) -> "LiveGitHubClient":
        """Build a client from an AppConfig."""
        return cls(
            config.github_client_id,
            config.github_client_secret.get_secret_value(),
            timeout=config.http_timeout_seconds,
        )

    async def fetch_auth_token(self, code: str) -> GitHubAccessToken:
        return await execute(
            endpoints.fetch_auth_token(self._client_id, self._client_secret, code),
            error_type=GitHubErrorEnvelope,
            timeout=self._timeout,
        )

    async def fetch_emails(self, token: GitHubToken) -> list[GitHubEmail]:
        return await execute(
            endpoints.fetch_emails(),
            error_type=GitHubErrorEnvelope,
            auth=BearerAuth(token),
            timeout=self._timeout,
        )

    async def fetch_user(self, token: GitHubToken) -> GitHubUser:
        return await execute(
            endpoints.fetch_user(),
            error_type=GitHubErrorEnvelope,
            auth=BearerAuth(token),
            timeout=self._timeout,
        )
