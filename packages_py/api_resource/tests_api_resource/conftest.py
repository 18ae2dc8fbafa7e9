"""
Shared fixtures for api_resource tests.
"""
import pytest

import httpx

from api_resource.types import HttpMethod, Resource


class MockAsyncTransport(httpx.AsyncBaseTransport):
    """Mock async transport returning a fixed response and recording requests."""

    def __init__(
        self,
        response_status: int = 200,
        response_content: bytes = b'{"name": "cats"}',
    ) -> None:
        self.response_status = response_status
        self.response_content = response_content
        self.requests: list[httpx.Request] = []

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        """Record the request and return the configured response."""
        self.requests.append(request)
        return httpx.Response(
            status_code=self.response_status,
            headers={"content-type": "application/json"},
            content=self.response_content,
        )

    async def aclose(self) -> None:
        """Close the transport."""
        pass


class MockSyncTransport(httpx.BaseTransport):
    """Mock sync transport returning a fixed response and recording requests."""

    def __init__(
        self,
        response_status: int = 200,
        response_content: bytes = b'{"name": "cats"}',
    ) -> None:
        self.response_status = response_status
        self.response_content = response_content
        self.requests: list[httpx.Request] = []

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        """Record the request and return the configured response."""
        self.requests.append(request)
        return httpx.Response(
            status_code=self.response_status,
            headers={"content-type": "application/json"},
            content=self.response_content,
        )

    def close(self) -> None:
        """Close the transport."""
        pass


class ErrorMockAsyncTransport(httpx.AsyncBaseTransport):
    """Mock async transport that raises errors."""

    def __init__(self, error: Exception) -> None:
        self.error = error
        self.calls = 0

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        """Raise the configured error."""
        self.calls += 1
        raise self.error

    async def aclose(self) -> None:
        """Close the transport."""
        pass


class ErrorMockSyncTransport(httpx.BaseTransport):
    """Mock sync transport that raises errors."""

    def __init__(self, error: Exception) -> None:
        self.error = error
        self.calls = 0

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        """Raise the configured error."""
        self.calls += 1
        raise self.error

    def close(self) -> None:
        """Close the transport."""
        pass


@pytest.fixture
def cats_resource():
    """GET https://api.example.com?q=cats"""
    return Resource(
        method=HttpMethod.GET,
        base="https://api.example.com",
        endpoint="/search",
        parameters={"q": "cats"},
    )


@pytest.fixture
def mock_async_transport():
    """Create a mock async transport for testing."""
    return MockAsyncTransport()


@pytest.fixture
def mock_sync_transport():
    """Create a mock sync transport for testing."""
    return MockSyncTransport()
