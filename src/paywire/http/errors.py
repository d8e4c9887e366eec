"""Exception hierarchy for request execution outcomes."""

from typing import Any, Optional


class PaywireError(Exception):
    """Base exception for all errors raised by paywire."""


class NothingToUpdate(PaywireError):
    """No request could be built for the given input, so none was sent."""

    def __init__(self, message: str = "No request to execute"):
        super().__init__(message)


class RemoteError(PaywireError):
    """The API answered with a well-formed error envelope."""

    def __init__(self, envelope: Any, status: Optional[int] = None):
        super().__init__(f"Remote error (status={status}): {envelope!r}")
        self.envelope = envelope
        self.status = status


class DecodeError(PaywireError):
    """
    The response body matched neither the expected model nor the error envelope.

    Usually means the client models and the remote API version disagree.
    """

    def __init__(self, raw: str, error: Exception):
        super().__init__(f"Could not decode response: {error}")
        self.raw = raw
        self.error = error
