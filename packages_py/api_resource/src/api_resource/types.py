"""
Type definitions for api_resource.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel, ConfigDict


ResponseT = TypeVar("ResponseT")


class HttpMethod(str, Enum):
    """HTTP method of a resource"""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


@runtime_checkable
class ApiResource(Protocol):
    """
    Description of one API endpoint.

    Any object exposing these four attributes can be fetched: a dataclass,
    an enum whose members return values from properties, or a plain class.
    URL building lives in free functions (see ``core.url_builder``) rather
    than on the protocol itself.
    """

    @property
    def method(self) -> HttpMethod:
        """HTTP method used for the request."""
        ...

    @property
    def endpoint(self) -> str:
        """Path of the endpoint, relative to ``base``."""
        ...

    @property
    def base(self) -> str:
        """Base URL string."""
        ...

    @property
    def parameters(self) -> Optional[Mapping[str, str]]:
        """Query parameters, or None."""
        ...


@dataclass(frozen=True)
class Resource:
    """Ready-made immutable ApiResource."""

    method: HttpMethod
    base: str
    endpoint: str = ""
    parameters: Optional[Mapping[str, str]] = None


class EmptyBody(BaseModel):
    """Payload with no fields, serialized as ``{}``."""

    model_config = ConfigDict(extra="forbid", frozen=True)
