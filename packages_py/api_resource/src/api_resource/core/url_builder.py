"""
URL building for api resources.
"""
import logging
from urllib.parse import SplitResult, quote, urlencode, urlsplit, urlunsplit

import httpx

from ..errors import ApiErrorKind, ApiError, error_for
from ..types import ApiResource

logger = logging.getLogger("api_resource.url_builder")

# Characters RFC 3986 never allows unescaped in a URL
_ILLEGAL_CHARS = frozenset(' "<>\\^`{|}')


def _invalid_url(base: str, reason: str) -> ApiError:
    logger.debug(f"build_url: invalid base {base!r}: {reason}")
    return error_for(ApiErrorKind.INVALID_URL)


def _has_illegal_chars(value: str) -> bool:
    return any(
        ch in _ILLEGAL_CHARS or ord(ch) < 0x20 or ord(ch) == 0x7F or ch.isspace()
        for ch in value
    )


def _split_base(base: str) -> SplitResult:
    """Parse the base URL string, or raise InvalidUrlError."""
    if not base:
        raise _invalid_url(base, "empty")
    if _has_illegal_chars(base):
        raise _invalid_url(base, "illegal characters")

    try:
        parts = urlsplit(base)
        # Accessing port validates it (non-numeric or out of range)
        parts.port
    except ValueError as e:
        raise _invalid_url(base, str(e)) from None

    if not parts.scheme or not parts.netloc:
        raise _invalid_url(base, "scheme and host are required")
    return parts


def join_path(base_path: str, endpoint: str) -> str:
    """Append an endpoint to a base path without doubling slashes."""
    if not endpoint:
        return base_path
    base_path = base_path.rstrip("/")
    if endpoint.startswith("/"):
        return f"{base_path}{endpoint}"
    return f"{base_path}/{endpoint}"


def build_url(resource: ApiResource, join_endpoint: bool = False) -> str:
    """
    Build the fully-qualified URL of a resource.

    When ``resource.parameters`` is non-empty it replaces any query already
    present in ``resource.base``. ``resource.endpoint`` is only added to the
    path when ``join_endpoint`` is set.

    ``base`` must be an absolute URL with a scheme and host. A bare host
    such as ``www.google.com`` is rejected rather than treated as a path.

    Raises:
        InvalidUrlError: ``base`` cannot be parsed, or the components cannot
            be reassembled into a valid URL.
    """
    base = resource.base
    parts = _split_base(base)

    path = parts.path
    if join_endpoint:
        path = join_path(path, resource.endpoint)

    query = parts.query
    parameters = resource.parameters
    if parameters:
        query = urlencode(list(parameters.items()), quote_via=quote)

    url = urlunsplit((parts.scheme, parts.netloc, path, query, parts.fragment))

    try:
        httpx.URL(url)
    except (httpx.InvalidURL, TypeError, ValueError) as e:
        raise _invalid_url(base, f"reassembled URL rejected: {e}") from None

    logger.debug(f"build_url: method={resource.method}, url={url}")
    return url
