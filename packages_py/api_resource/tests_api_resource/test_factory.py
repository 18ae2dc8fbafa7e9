"""
Tests for factory.py
Logic testing: Decision/Branch, Path coverage
"""
import pytest
from pydantic import BaseModel

import httpx

from api_resource.config import TimeoutConfig
from api_resource.core.requester import AsyncRequester, SyncRequester
from api_resource.errors import DecodingFailedError, NetworkFailedError
from api_resource.factory import (
    create_async_requester,
    create_requester,
    create_sync_requester,
    fetch,
    fetch_sync,
)

from .conftest import ErrorMockAsyncTransport, MockAsyncTransport, MockSyncTransport


class Animal(BaseModel):
    name: str


class TestCreateRequester:
    """Tests for create_requester function."""

    # Decision: default creates async requester
    def test_default(self):
        assert isinstance(create_requester(), AsyncRequester)

    # Decision: with AsyncClient creates async requester
    def test_async_client(self):
        requester = create_requester(httpx_client=httpx.AsyncClient())
        assert isinstance(requester, AsyncRequester)

    # Decision: with Client creates sync requester
    def test_sync_client(self):
        requester = create_requester(httpx_client=httpx.Client())
        assert isinstance(requester, SyncRequester)

    # Path: options forwarded
    def test_options_forwarded(self):
        requester = create_requester(timeout=60.0, join_endpoint=True)
        assert requester.config.timeout == TimeoutConfig(connect=60.0, read=60.0, write=60.0)
        assert requester.config.join_endpoint is True


class TestCreateAsyncRequester:
    """Tests for create_async_requester function."""

    def test_defaults(self):
        requester = create_async_requester()
        assert requester.config.headers == {}
        assert requester.config.strict_decoding is True

    def test_headers_and_decoding(self):
        requester = create_async_requester(
            default_headers={"X-Client": "tests"}, strict_decoding=False
        )
        assert requester.config.headers == {"X-Client": "tests"}
        assert requester.config.strict_decoding is False


class TestCreateSyncRequester:
    """Tests for create_sync_requester function."""

    def test_creates_sync(self):
        requester = create_sync_requester(timeout=TimeoutConfig(read=5.0), verify_ssl=False)
        assert isinstance(requester, SyncRequester)
        assert requester.config.timeout.read == 5.0
        assert requester.config.verify_ssl is False


class TestFetch:
    """Tests for the one-shot fetch helpers."""

    # Path: caller client is used and left open
    @pytest.mark.asyncio
    async def test_fetch_with_client(self, cats_resource, mock_async_transport):
        client = httpx.AsyncClient(transport=mock_async_transport)

        result = await fetch(cats_resource, response_type=Animal, client=client)

        assert result == Animal(name="cats")
        assert client.is_closed is False
        await client.aclose()

    # Error Path: schema mismatch through the helper
    @pytest.mark.asyncio
    async def test_fetch_mismatch(self, cats_resource):
        transport = MockAsyncTransport(response_content=b'{"nm": "cats"}')
        async with httpx.AsyncClient(transport=transport) as client:
            with pytest.raises(DecodingFailedError):
                await fetch(cats_resource, response_type=Animal, client=client)

    # Path: short-lived client is created and closed
    @pytest.mark.asyncio
    async def test_fetch_without_client(self, cats_resource, monkeypatch):
        transport = ErrorMockAsyncTransport(httpx.ConnectError("down"))
        created = []
        real_async_client = httpx.AsyncClient

        def make_client(**kwargs):
            client = real_async_client(transport=transport)
            created.append(client)
            return client

        monkeypatch.setattr(httpx, "AsyncClient", make_client)

        with pytest.raises(NetworkFailedError):
            await fetch(cats_resource, response_type=Animal)

        assert len(created) == 1
        assert created[0].is_closed is True
        assert transport.calls == 1

    # Path: sync helper with caller client
    def test_fetch_sync_with_client(self, cats_resource, mock_sync_transport):
        with httpx.Client(transport=mock_sync_transport) as client:
            result = fetch_sync(cats_resource, response_type=Animal, client=client)
            assert client.is_closed is False

        assert result == Animal(name="cats")

    # Path: sync helper without client
    def test_fetch_sync_without_client(self, cats_resource, monkeypatch):
        transport = MockSyncTransport()
        real_client = httpx.Client
        monkeypatch.setattr(httpx, "Client", lambda **kwargs: real_client(transport=transport))

        assert fetch_sync(cats_resource, response_type=Animal) == Animal(name="cats")
        assert len(transport.requests) == 1

    # Error Path: response type is a required keyword
    def test_fetch_sync_requires_response_type(self, cats_resource, mock_sync_transport):
        with httpx.Client(transport=mock_sync_transport) as client:
            with pytest.raises(TypeError):
                fetch_sync(cats_resource, client=client)

        assert mock_sync_transport.requests == []
