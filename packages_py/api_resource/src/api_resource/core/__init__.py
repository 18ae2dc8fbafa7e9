"""
Core modules for api_resource.
"""
from .url_builder import build_url, join_path
from .request_builder import build_headers, build_wire_request
from .requester import AsyncRequester, SyncRequester, build_httpx_timeout

__all__ = [
    "build_url",
    "join_path",
    "build_headers",
    "build_wire_request",
    "AsyncRequester",
    "SyncRequester",
    "build_httpx_timeout",
]
