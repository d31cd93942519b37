"""URL decomposition into route tokens and query parameters."""

import re
from urllib.parse import quote, unquote, urlencode, urlsplit

from .errors import EmptyRoute, MalformedInput

# Whitespace and control characters are never valid inside a URL
_INVALID_CHARS = re.compile(r"[\s\x00-\x1f\x7f]")


def _split_host(netloc: str) -> str:
    """Strip userinfo and port from a netloc, keeping the host's case."""
    host = netloc.rpartition("@")[2]
    if host.startswith("["):
        return host[1 : host.find("]")] if "]" in host else host
    return host.partition(":")[0]


def _parse_query(query: str) -> dict[str, str]:
    """Decode a query string, dropping parameters that carry no value.

    Only percent-escapes are decoded; "+" is kept literally.
    """
    params: dict[str, str] = {}
    for pair in query.split("&"):
        if "=" not in pair:
            continue
        name, value = pair.split("=", 1)
        params[unquote(name)] = unquote(value)
    return params


def decompose_url(url: str) -> tuple[list[str], dict[str, str]]:
    """Split a deep link into its ordered tokens and query parameters.

    The host becomes the first token and each non-empty path segment
    follows in order:

        myapp://list/detail?id=456 -> (["list", "detail"], {"id": "456"})

    Raises:
        MalformedInput: If the string is not a parseable URL.
        EmptyRoute: If the URL has no host component.
    """
    if not isinstance(url, str):
        raise MalformedInput(f"Not a URL string: {url!r}")
    if not url or _INVALID_CHARS.search(url):
        raise MalformedInput(f"Not a URL: {url!r}", url=url)

    try:
        parts = urlsplit(url)
        # Accessing port validates it
        parts.port
    except ValueError as e:
        raise MalformedInput(f"Cannot parse URL {url!r}: {e}", url=url) from e

    if not parts.scheme:
        raise MalformedInput(f"URL has no scheme: {url!r}", url=url)

    host = unquote(_split_host(parts.netloc))
    if not host:
        raise EmptyRoute(f"URL has no host to route on: {url!r}", url=url)

    tokens = [host]
    tokens.extend(unquote(segment) for segment in parts.path.split("/") if segment)

    return tokens, _parse_query(parts.query)


def build_url(
    scheme: str,
    tokens: list[str],
    params: dict[str, str] | None = None,
) -> str:
    """Build a deep link from tokens and parameters.

    Args:
        scheme: URL scheme without the "://" separator
        tokens: Host followed by path segments; must not be empty
        params: Optional query parameters

    Returns:
        A URL such as "myapp://users/detail?id=123"
    """
    if not tokens:
        raise ValueError("At least one token is required to build a URL")
    path = "/".join(quote(token, safe="") for token in tokens)
    url = f"{scheme}://{path}"
    if params:
        url += "?" + urlencode(params, quote_via=quote)
    return url
