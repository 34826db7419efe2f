import string
from typing import Any, Iterable, Mapping, Optional
from urllib.parse import quote, urlencode

import httpx

from ..models.exceptions import InvalidURL


def path_segment(value: Any, encode: bool = False) -> str:
    """Render one path segment, ``/<value>``.

    >>> path_segment("users")
    '/users'
    >>> path_segment("a b", encode=True)
    '/a%20b'
    """
    segment = str(value)
    if encode:
        segment = quote(segment, safe="")
    return f"/{segment}"


def build_path(url_path: Iterable[Any], encode: bool = False) -> str:
    return "".join(path_segment(segment, encode) for segment in url_path)


def build_query_string(
    query_params: Mapping[str, Any], encode: bool = False
) -> str:
    """Join query parameters as ``?k1=v1&k2=v2`` in mapping order.

    Without ``encode`` keys and values are concatenated as they are, which is
    what existing integrations expect. ``encode`` switches to ``urlencode``.
    """
    if encode:
        return f"?{urlencode(list(query_params.items()))}"

    return "?" + "&".join(f"{key}={value}" for key, value in query_params.items())


# RFC 3986 unreserved, reserved and the percent sign
URI_CHARACTERS = frozenset(
    string.ascii_letters + string.digits + "-._~:/?#[]@!$&'()*+,;=%"
)
MAX_PORT = 65535


def parse_url(url: str) -> httpx.URL:
    """Parse an assembled URL, raising `InvalidURL` when it is not usable.

    The string is sent as it is, so characters that would need escaping
    (spaces, control characters, non-ASCII) are rejected instead of being
    percent-encoded behind the caller's back.

    >>> parse_url("https://api.example.com/a b")
    Traceback (most recent call last):
        ...
    python_http_client.models.exceptions.InvalidURL: Invalid URL 'https://api.example.com/a b': invalid character ' '
    """
    invalid = next((char for char in url if char not in URI_CHARACTERS), None)
    if invalid is not None:
        raise InvalidURL(url, f"invalid character {invalid!r}")

    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, TypeError, ValueError) as e:
        raise InvalidURL(url, str(e)) from e

    if not parsed.scheme or not parsed.host:
        raise InvalidURL(url, "missing scheme or host")

    if parsed.port is not None and parsed.port > MAX_PORT:
        raise InvalidURL(url, f"port {parsed.port} out of range")

    return parsed


def join_url(host: str, path: str, query: Optional[str] = None) -> str:
    url = f"{host}{path}{query or ''}"
    parse_url(url)
    return url
