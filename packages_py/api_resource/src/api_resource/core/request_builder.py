"""
Wire request building for api resources.
"""
import logging
from typing import Any, Dict, Optional

import httpx

from ..codec import encode_body
from ..config import ResolvedConfig, resolve_config
from ..types import ApiResource, HttpMethod
from .url_builder import build_url

logger = logging.getLogger("api_resource.request_builder")


def build_headers(
    config: ResolvedConfig,
    headers: Optional[Dict[str, str]] = None,
) -> Dict[str, str]:
    """Build request headers. Every wire request carries a JSON body."""
    result = dict(config.headers)

    if headers:
        result.update(headers)

    lower_keys = {k.lower() for k in result}
    if "content-type" not in lower_keys:
        result["content-type"] = config.content_type
    if "accept" not in lower_keys:
        result["accept"] = "application/json"

    return result


def build_wire_request(
    resource: ApiResource,
    body: Optional[Any] = None,
    config: Optional[ResolvedConfig] = None,
    headers: Optional[Dict[str, str]] = None,
) -> httpx.Request:
    """
    Build the request for a resource.

    The body is always encoded and attached; ``None`` becomes ``{}``.

    Raises:
        InvalidUrlError: the resource URL cannot be built.
        EncodingFailedError: the body cannot be serialized.
    """
    if config is None:
        config = resolve_config()

    url = build_url(resource, join_endpoint=config.join_endpoint)
    method = HttpMethod(resource.method)
    content = encode_body(body)

    logger.debug(
        f"build_wire_request: method={method.value}, url={url}, body_bytes={len(content)}"
    )

    return httpx.Request(
        method=method.value,
        url=url,
        headers=build_headers(config, headers),
        content=content,
    )
