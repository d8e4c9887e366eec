"""GitHub OAuth token exchange and user lookup."""

from paywire.github.client import GitHubClient, GitHubErrorEnvelope, LiveGitHubClient
from paywire.github.models import (
    GitHubAccessToken,
    GitHubApiError,
    GitHubEmail,
    GitHubOAuthError,
    GitHubToken,
    GitHubUser,
)

__all__ = [
    "GitHubClient",
    "LiveGitHubClient",
    "GitHubErrorEnvelope",
    "GitHubAccessToken",
    "GitHubApiError",
    "GitHubEmail",
    "GitHubOAuthError",
    "GitHubToken",
    "GitHubUser",
]
