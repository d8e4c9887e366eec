"""Request construction, form encoding and authenticated execution."""

from paywire.http.auth import Auth, BasicAuth, BearerAuth
from paywire.http.errors import DecodeError, NothingToUpdate, PaywireError, RemoteError
from paywire.http.executor import decode_response, execute
from paywire.http.form import (
    Absent,
    Indexed,
    Nested,
    Param,
    ParamBag,
    Scalar,
    encode,
    encode_pairs,
    params,
    to_param,
)
from paywire.http.request import DecodableRequest, Delete, Get, Method, Post, build_request

__all__ = [
    # Descriptors
    "DecodableRequest",
    "Method",
    "Get",
    "Post",
    "Delete",
    "build_request",
    # Form encoding
    "Param",
    "ParamBag",
    "Scalar",
    "Nested",
    "Indexed",
    "Absent",
    "encode",
    "encode_pairs",
    "params",
    "to_param",
    # Auth
    "Auth",
    "BasicAuth",
    "BearerAuth",
    # Execution
    "execute",
    "decode_response",
    # Errors
    "PaywireError",
    "NothingToUpdate",
    "RemoteError",
    "DecodeError",
]
