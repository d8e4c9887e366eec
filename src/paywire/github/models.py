"""GitHub OAuth and user models."""

from typing import NewType, Optional

from pydantic import BaseModel

GitHubToken = NewType("GitHubToken", str)
GitHubUserId = NewType("GitHubUserId", int)


class GitHubAccessToken(BaseModel):
    access_token: GitHubToken
    scope: Optional[str] = None
    token_type: Optional[str] = None


class GitHubEmail(BaseModel):
    email: str
    primary: bool
    verified: Optional[bool] = None


class GitHubUser(BaseModel):
    avatar_url: str
    id: GitHubUserId
    login: str
    name: Optional[str] = None


class GitHubOAuthError(BaseModel):
    """Error body of the OAuth token exchange (returned with a 200 status)."""

    error: str
    error_description: Optional[str] = None
    error_uri: Optional[str] = None


class GitHubApiError(BaseModel):
    """Error body of the REST API (e.g. {"message": "Bad credentials"})."""

    message: str
    documentation_url: Optional[str] = None
