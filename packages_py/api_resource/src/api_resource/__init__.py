"""
Typed HTTP resource client for Python.

Describe an endpoint as a resource (method, base URL, path, query
parameters), then fetch it with a request body and a response type. The
response is decoded into that type, or a typed ApiError is raised.
"""
from .types import (
    ApiResource,
    EmptyBody,
    HttpMethod,
    Resource,
)
from .errors import (
    ApiError,
    ApiErrorKind,
    DecodingFailedError,
    EncodingFailedError,
    InvalidUrlError,
    MissingBodyError,
    NetworkFailedError,
)
from .config import (
    ClientConfig,
    ResolvedConfig,
    TimeoutConfig,
    resolve_config,
)
from .codec import encode_body, decode_body
from .core.url_builder import build_url
from .core.request_builder import build_wire_request
from .core.requester import AsyncRequester, SyncRequester
from .factory import (
    create_requester,
    create_async_requester,
    create_sync_requester,
    fetch,
    fetch_sync,
)

__all__ = [
    # Types
    "ApiResource",
    "EmptyBody",
    "HttpMethod",
    "Resource",
    # Errors
    "ApiError",
    "ApiErrorKind",
    "DecodingFailedError",
    "EncodingFailedError",
    "InvalidUrlError",
    "MissingBodyError",
    "NetworkFailedError",
    # Config
    "ClientConfig",
    "ResolvedConfig",
    "TimeoutConfig",
    "resolve_config",
    # Codec
    "encode_body",
    "decode_body",
    # Building
    "build_url",
    "build_wire_request",
    # Requesters
    "AsyncRequester",
    "SyncRequester",
    # Factory
    "create_requester",
    "create_async_requester",
    "create_sync_requester",
    "fetch",
    "fetch_sync",
]

__version__ = "0.1.0"
