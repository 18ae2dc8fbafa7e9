"""
Error taxonomy for api_resource.

Every failure of building, sending or decoding a resource request is reported
as exactly one ApiErrorKind. The exceptions carry the kind and nothing else;
the underlying cause (transport or codec error) is not kept.
"""
from enum import Enum
from typing import Dict, Type


class ApiErrorKind(str, Enum):
    """Closed set of failure kinds"""
    INVALID_URL = "invalid_url"
    ENCODING_FAILED = "encoding_failed"
    NETWORK_FAILED = "network_failed"
    MISSING_BODY = "missing_body"  # reserved, never raised by the fetcher
    DECODING_FAILED = "decoding_failed"


class ApiError(Exception):
    """Base class for all api_resource failures."""

    kind: ApiErrorKind

    def __init__(self, kind: ApiErrorKind):
        super().__init__(kind.value)
        self.kind = kind

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind.value!r})"


class InvalidUrlError(ApiError):
    """Base URL unparsable or components could not be reassembled."""

    def __init__(self) -> None:
        super().__init__(ApiErrorKind.INVALID_URL)


class EncodingFailedError(ApiError):
    """Request body could not be serialized."""

    def __init__(self) -> None:
        super().__init__(ApiErrorKind.ENCODING_FAILED)


class NetworkFailedError(ApiError):
    """Transport-level failure of any cause."""

    def __init__(self) -> None:
        super().__init__(ApiErrorKind.NETWORK_FAILED)


class MissingBodyError(ApiError):
    """Payload retrieval produced no buffer at all."""

    def __init__(self) -> None:
        super().__init__(ApiErrorKind.MISSING_BODY)


class DecodingFailedError(ApiError):
    """Response bytes could not be parsed into the expected type."""

    def __init__(self) -> None:
        super().__init__(ApiErrorKind.DECODING_FAILED)


_ERRORS_BY_KIND: Dict[ApiErrorKind, Type[ApiError]] = {
    ApiErrorKind.INVALID_URL: InvalidUrlError,
    ApiErrorKind.ENCODING_FAILED: EncodingFailedError,
    ApiErrorKind.NETWORK_FAILED: NetworkFailedError,
    ApiErrorKind.MISSING_BODY: MissingBodyError,
    ApiErrorKind.DECODING_FAILED: DecodingFailedError,
}


def error_for(kind: ApiErrorKind) -> ApiError:
    """Create the exception instance for an error kind."""
    return _ERRORS_BY_KIND[kind]()
