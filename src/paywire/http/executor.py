"""Authenticated request execution and response decoding."""

import asyncio
import logging
from functools import lru_cache
from typing import Any, Optional

import aiohttp
from pydantic import TypeAdapter, ValidationError

from paywire.http.auth import Auth
from paywire.http.errors import DecodeError, NothingToUpdate, RemoteError
from paywire.http.request import DecodableRequest

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def decode_response(
    result_type: Any,
    data: bytes,
    error_type: Any,
    status: Optional[int] = None,
) -> Any:
    """
    Decode a response body as the expected type, falling back to the error envelope.

    The success type is tried first regardless of status code. If that
    fails, the body is decoded as error_type; if that also fails the
    original decode failure is reported along with the raw text.

    Args:
        result_type: Expected decode target
        data: Raw response body
        error_type: Error envelope decode target
        status: HTTP status code, carried into RemoteError

    Returns:
        Decoded value of result_type

    Raises:
        RemoteError: If the body is a well-formed error envelope
        DecodeError: If the body matches neither type
    """
    try:
        return _adapter(result_type).validate_json(data)
    except ValidationError as e:
        decode_failure = e

    try:
        envelope = _adapter(error_type).validate_json(data)
    except ValidationError:
        raw = data.decode("utf-8", errors="replace")
        logger.warning(f"Response matched neither success nor error schema (status={status})")
        raise DecodeError(raw, decode_failure) from decode_failure

    logger.warning(f"Remote error response (status={status})")
    raise RemoteError(envelope, status)


async def execute(
    request: Optional[DecodableRequest],
    *,
    error_type: Any,
    auth: Optional[Auth] = None,
    timeout: Optional[float] = None,
) -> Any:
    """
    Sign, send and decode a single request.

    One round trip, no retries. Transport failures propagate unchanged.

    Args:
        request: Descriptor to run; None means there is nothing to send
        error_type: Error envelope decode target for this API
        auth: Authentication scheme attached before sending
        timeout: Total timeout in seconds (None uses aiohttp's default)

    Returns:
        Decoded value of request.result_type

    Raises:
        NothingToUpdate: If request is None (no network call is made)
        aiohttp.ClientError: On connection, DNS or TLS failure
        asyncio.TimeoutError: If the round trip exceeds the timeout
        RemoteError: If the API returned an error envelope
        DecodeError: If the body could not be decoded
    """
    if request is None:
        raise NothingToUpdate()

    if auth is not None:
        request = auth.apply(request)

    session_kwargs: dict[str, Any] = {}
    if timeout is not None:
        session_kwargs["timeout"] = aiohttp.ClientTimeout(total=timeout)

    logger.debug(f"{request.method} {request.url}")

    try:
        async with aiohttp.ClientSession(**session_kwargs) as session:
            async with session.request(
                request.method,
                request.url,
                headers=dict(request.headers),
                data=request.body,
            ) as response:
                status = response.status
                data = await response.read()
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        logger.warning(f"Transport failure for {request.method} {request.url}: {e!r}")
        raise

    logger.debug(f"{request.method} {request.url} -> {status}")
    return decode_response(request.result_type, data, error_type, status)
