"""
Factory functions for creating requesters, and one-shot fetch helpers.
"""
from typing import Any, Dict, Optional, Type, Union

import httpx

from .config import ClientConfig, TimeoutConfig
from .core.requester import AsyncRequester, SyncRequester
from .types import ApiResource, ResponseT


def _make_config(
    timeout: Optional[Union[float, TimeoutConfig]] = None,
    default_headers: Optional[Dict[str, str]] = None,
    content_type: str = "application/json",
    join_endpoint: bool = False,
    strict_decoding: bool = True,
    verify_ssl: Optional[bool] = None,
) -> ClientConfig:
    return ClientConfig(
        timeout=timeout,
        headers=default_headers or {},
        content_type=content_type,
        join_endpoint=join_endpoint,
        strict_decoding=strict_decoding,
        verify_ssl=verify_ssl,
    )


def create_requester(
    httpx_client: Optional[Union[httpx.AsyncClient, httpx.Client]] = None,
    **options: Any,
) -> Union[AsyncRequester, SyncRequester]:
    """
    Create a requester.

    A sync requester is returned when ``httpx_client`` is an ``httpx.Client``;
    otherwise an async one. Remaining keyword arguments are the same as
    ``create_async_requester``.

    Example:
        requester = create_requester(timeout=10.0)
        async with requester:
            user = await requester.fetch(resource, response_type=User)
    """
    if isinstance(httpx_client, httpx.Client):
        return create_sync_requester(httpx_client=httpx_client, **options)
    return create_async_requester(httpx_client=httpx_client, **options)


def create_async_requester(
    httpx_client: Optional[httpx.AsyncClient] = None,
    timeout: Optional[Union[float, TimeoutConfig]] = None,
    default_headers: Optional[Dict[str, str]] = None,
    content_type: str = "application/json",
    join_endpoint: bool = False,
    strict_decoding: bool = True,
    verify_ssl: Optional[bool] = None,
) -> AsyncRequester:
    """
    Create an async requester.

    Args:
        httpx_client: Pre-configured httpx.AsyncClient.
        timeout: Request timeout (seconds or TimeoutConfig).
        default_headers: Default headers for all requests.
        content_type: Content type of request bodies.
        join_endpoint: Append resource endpoints to the base path.
        strict_decoding: Reject lax type coercions when decoding.
        verify_ssl: TLS verification; None defers to the environment.

    Returns:
        AsyncRequester instance.
    """
    config = _make_config(
        timeout, default_headers, content_type, join_endpoint, strict_decoding, verify_ssl
    )
    return AsyncRequester(config, httpx_client=httpx_client)


def create_sync_requester(
    httpx_client: Optional[httpx.Client] = None,
    timeout: Optional[Union[float, TimeoutConfig]] = None,
    default_headers: Optional[Dict[str, str]] = None,
    content_type: str = "application/json",
    join_endpoint: bool = False,
    strict_decoding: bool = True,
    verify_ssl: Optional[bool] = None,
) -> SyncRequester:
    """
    Create a sync requester.

    Takes the same arguments as ``create_async_requester`` with an
    ``httpx.Client`` instead of an ``httpx.AsyncClient``.
    """
    config = _make_config(
        timeout, default_headers, content_type, join_endpoint, strict_decoding, verify_ssl
    )
    return SyncRequester(config, httpx_client=httpx_client)


async def fetch(
    resource: ApiResource,
    body: Optional[Any] = None,
    *,
    response_type: Type[ResponseT],
    client: Optional[httpx.AsyncClient] = None,
    config: Optional[ClientConfig] = None,
) -> ResponseT:
    """
    Fetch one resource.

    Uses ``client`` when given and leaves it open; otherwise a short-lived
    httpx client is opened and closed around the call.
    """
    if client is not None:
        return await AsyncRequester(config, httpx_client=client).fetch(
            resource, body, response_type=response_type
        )
    async with AsyncRequester(config) as requester:
        return await requester.fetch(resource, body, response_type=response_type)


def fetch_sync(
    resource: ApiResource,
    body: Optional[Any] = None,
    *,
    response_type: Type[ResponseT],
    client: Optional[httpx.Client] = None,
    config: Optional[ClientConfig] = None,
) -> ResponseT:
    """Blocking counterpart of ``fetch``."""
    if client is not None:
        return SyncRequester(config, httpx_client=client).fetch(
            resource, body, response_type=response_type
        )
    with SyncRequester(config) as requester:
        return requester.fetch(resource, body, response_type=response_type)
