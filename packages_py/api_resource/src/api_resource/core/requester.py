"""
Resource requesters using httpx.
"""
import asyncio
import logging
from typing import Any, Dict, Optional, Type

import httpx
from pydantic import TypeAdapter

from ..codec import decode_body, response_adapter
from ..config import ClientConfig, ResolvedConfig, TimeoutConfig, resolve_config
from ..errors import ApiError, ApiErrorKind, error_for
from ..types import ApiResource, ResponseT
from .request_builder import build_wire_request
from .url_builder import build_url

logger = logging.getLogger("api_resource.requester")


def build_httpx_timeout(timeout: TimeoutConfig) -> httpx.Timeout:
    """Translate a TimeoutConfig into an httpx.Timeout."""
    return httpx.Timeout(
        connect=timeout.connect,
        read=timeout.read,
        write=timeout.write,
        pool=timeout.connect,
    )


def _network_failed(request: httpx.Request, error: Exception) -> ApiError:
    logger.debug(
        f"fetch: transport error for {request.method} {request.url}: "
        f"{type(error).__name__}: {error}"
    )
    return error_for(ApiErrorKind.NETWORK_FAILED)


def _decode_response(
    response: httpx.Response,
    response_type: Type[ResponseT],
    config: ResolvedConfig,
    adapter: TypeAdapter,
) -> ResponseT:
    # A missing payload is decoded as empty bytes, which then fails to decode
    payload = response.content or b""
    logger.debug(
        f"fetch: {response.status_code} {response.reason_phrase or ''} "
        f"from {response.request.url}, {len(payload)} bytes"
    )
    return decode_body(
        payload, response_type, strict=config.strict_decoding, adapter=adapter
    )


class AsyncRequester:
    """Asynchronous resource requester."""

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        httpx_client: Optional[httpx.AsyncClient] = None,
    ):
        self._config = resolve_config(config)
        if httpx_client is not None:
            self._client = httpx_client
        else:
            self._client = httpx.AsyncClient(
                timeout=build_httpx_timeout(self._config.timeout),
                verify=self._config.verify_ssl,
            )
        self._closed = False

    @property
    def config(self) -> ResolvedConfig:
        return self._config

    def build_url(self, resource: ApiResource) -> str:
        """Build the URL of a resource using this requester's settings."""
        return build_url(resource, join_endpoint=self._config.join_endpoint)

    def build_request(
        self,
        resource: ApiResource,
        body: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Request:
        """Build the wire request for a resource."""
        return build_wire_request(resource, body, self._config, headers)

    async def fetch(
        self,
        resource: ApiResource,
        body: Optional[Any] = None,
        *,
        response_type: Type[ResponseT],
        headers: Optional[Dict[str, str]] = None,
    ) -> ResponseT:
        """
        Fetch a resource and decode its response into ``response_type``.

        Resolves exactly once: returns the decoded value or raises a single
        ApiError.

        Raises:
            InvalidUrlError: the resource URL cannot be built.
            EncodingFailedError: the body cannot be serialized.
            NetworkFailedError: the transport failed (any cause).
            DecodingFailedError: the response does not decode into
                ``response_type``.
        """
        if self._closed:
            raise RuntimeError("Requester has been closed")

        adapter = response_adapter(response_type)
        request = self.build_request(resource, body, headers)

        try:
            response = await self._client.send(request)
        except httpx.RequestError as e:
            raise _network_failed(request, e) from None

        return _decode_response(response, response_type, self._config, adapter)

    def get_resource(
        self,
        resource: ApiResource,
        body: Optional[Any] = None,
        *,
        response_type: Type[ResponseT],
        headers: Optional[Dict[str, str]] = None,
    ) -> "asyncio.Task[ResponseT]":
        """
        Start fetching a resource right away and return the pending task.

        Must be called from a running event loop.
        """
        loop = asyncio.get_running_loop()
        return loop.create_task(
            self.fetch(resource, body, response_type=response_type, headers=headers)
        )

    async def close(self) -> None:
        """Close the requester and its httpx client."""
        self._closed = True
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncRequester":
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context manager."""
        await self.close()


class SyncRequester:
    """Synchronous resource requester."""

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        httpx_client: Optional[httpx.Client] = None,
    ):
        self._config = resolve_config(config)
        if httpx_client is not None:
            self._client = httpx_client
        else:
            self._client = httpx.Client(
                timeout=build_httpx_timeout(self._config.timeout),
                verify=self._config.verify_ssl,
            )
        self._closed = False

    @property
    def config(self) -> ResolvedConfig:
        return self._config

    def build_url(self, resource: ApiResource) -> str:
        """Build the URL of a resource using this requester's settings."""
        return build_url(resource, join_endpoint=self._config.join_endpoint)

    def build_request(
        self,
        resource: ApiResource,
        body: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Request:
        """Build the wire request for a resource."""
        return build_wire_request(resource, body, self._config, headers)

    def fetch(
        self,
        resource: ApiResource,
        body: Optional[Any] = None,
        *,
        response_type: Type[ResponseT],
        headers: Optional[Dict[str, str]] = None,
    ) -> ResponseT:
        """Fetch a resource, blocking. Same failures as AsyncRequester.fetch."""
        if self._closed:
            raise RuntimeError("Requester has been closed")

        adapter = response_adapter(response_type)
        request = self.build_request(resource, body, headers)

        try:
            response = self._client.send(request)
        except httpx.RequestError as e:
            raise _network_failed(request, e) from None

        return _decode_response(response, response_type, self._config, adapter)

    def close(self) -> None:
        """Close the requester and its httpx client."""
        self._closed = True
        self._client.close()

    def __enter__(self) -> "SyncRequester":
        """Enter sync context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit sync context manager."""
        self.close()
