"""GitHub endpoint functions for the OAuth login flow."""

from paywire.http.form import params
from paywire.http.request import DecodableRequest, Post, build_request
from paywire.github.models import GitHubAccessToken, GitHubEmail, GitHubUser

GITHUB_OAUTH_BASE_URL = "https://github.com/login/oauth/"
GITHUB_API_BASE_URL = "https://api.github.com/"

GITHUB_API_ACCEPT = "application/vnd.github.v3+json"


def fetch_auth_token(
    client_id: str, client_secret: str, code: str
) -> DecodableRequest[GitHubAccessToken]:
    """
    Exchange an OAuth callback code for a user access token.

    The app credentials travel in the form body, so the executor attaches
    no auth to this request.
    """
    return build_request(
        GITHUB_OAUTH_BASE_URL,
        "access_token",
        GitHubAccessToken,
        Post(params(client_id=client_id, client_secret=client_secret, code=code)),
    ).with_header("Accept", "application/json")


def fetch_emails() -> DecodableRequest[list[GitHubEmail]]:
    return build_request(GITHUB_API_BASE_URL, "user/emails", list[GitHubEmail]).with_header(
        "Accept", GITHUB_API_ACCEPT
    )


def fetch_user() -> DecodableRequest[GitHubUser]:
    return build_request(GITHUB_API_BASE_URL, "user", GitHubUser).with_header(
        "Accept", GITHUB_API_ACCEPT
    )
