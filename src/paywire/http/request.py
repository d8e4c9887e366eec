"""Typed request descriptors and HTTP method variants."""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Generic, Mapping, Optional, TypeVar, Union
from urllib.parse import urlsplit

from paywire.http.form import ParamBag, encode

A = TypeVar("A")

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


@dataclass(frozen=True)
class Get:
    """GET request without a body."""


@dataclass(frozen=True)
class Post:
    """POST request with a form-encoded body."""

    params: ParamBag = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))


@dataclass(frozen=True)
class Delete:
    """DELETE request with a form-encoded body."""

    params: ParamBag = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))


Method = Union[Get, Post, Delete]


@dataclass(frozen=True)
class DecodableRequest(Generic[A]):
    """
    Unexecuted HTTP request paired with the type its response decodes into.

    result_type is anything pydantic's TypeAdapter accepts (a model class,
    list[Model], ListEnvelope[Model], ...).
    """

    method: str
    url: str
    result_type: Any
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None

    def __post_init__(self) -> None:
        # Read-only view over a private copy
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    def with_header(self, name: str, value: str) -> "DecodableRequest[A]":
        """Return a copy with one header added or replaced."""
        headers = dict(self.headers)
        headers[name] = value
        return replace(self, headers=headers)

    def render(self) -> str:
        """
        Render method, URL, headers and body as stable text.

        Headers are sorted by name so the output does not depend on the
        order in which they were attached.
        """
        lines = [f"{self.method} {self.url}"]
        lines.extend(f"{name}: {value}" for name, value in sorted(self.headers.items()))
        text = "\n".join(lines)
        if self.body is not None:
            text += "\n\n" + self.body.decode("utf-8")
        return text


def _check_base_url(base_url: str) -> None:
    parts = urlsplit(base_url)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise ValueError(f"Base URL must be an absolute http(s) URL, got {base_url!r}")


def build_request(
    base_url: str,
    path: str,
    result_type: Any,
    method: Method = Get(),
) -> DecodableRequest:
    """
    Build a request descriptor for a resource path.

    The path is appended verbatim, so literal query strings such as
    "subscriptions/sub_1?expand[]=customer" survive unchanged.

    Args:
        base_url: Absolute API origin ending in "/" (e.g. https://api.stripe.com/v1/)
        path: Relative resource path, optionally with a query string
        result_type: Decode target for the response body
        method: Get(), Post(params) or Delete(params)

    Returns:
        DecodableRequest with method, URL and (for POST/DELETE) a form body

    Raises:
        ValueError: If base_url is not an absolute http(s) URL
    """
    _check_base_url(base_url)
    request: DecodableRequest = DecodableRequest(
        method="GET",
        url=base_url + path,
        result_type=result_type,
    )

    if isinstance(method, Get):
        return request
    if isinstance(method, Post):
        verb = "POST"
    elif isinstance(method, Delete):
        verb = "DELETE"
    else:
        raise TypeError(f"Unknown method variant: {method!r}")

    return replace(
        request,
        method=verb,
        body=encode(method.params),
    ).with_header("Content-Type", FORM_CONTENT_TYPE)
