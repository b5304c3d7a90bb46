"""Stream URL resolution from nested URL maps.

URL maps nest by access level and market type::

    {"public": {"spot": "wss://stream.{hostname}/v5/public/spot"},
     "private": "wss://stream.{hostname}/v5/private"}

A path names a key or a sequence of keys. When the path ends on a nested
map, the first URL found in it (depth first, insertion order) is used.
``{hostname}`` placeholders are filled from the profile hostname.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

UrlMap = Mapping[str, Any]
UrlPath = str | Sequence[str]


def _first_url(urls: Mapping[str, Any]) -> str | None:
    for value in urls.values():
        if isinstance(value, str):
            return value
        if isinstance(value, Mapping):
            found = _first_url(value)
            if found is not None:
                return found
    return None


def _navigate(urls: Any, path: Sequence[str]) -> Any:
    current = urls
    for key in path:
        # A plain URL short-circuits the rest of the path
        if isinstance(current, str):
            return current
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
    return current


def interpolate_hostname(url: str, hostname: str | None) -> str:
    if hostname is None:
        return url
    return url.replace("{hostname}", hostname)


def resolve_url(
    urls: UrlMap | str | None,
    path: UrlPath = (),
    sandbox: bool = False,
    test_urls: UrlMap | str | None = None,
    hostname: str | None = None,
) -> str | None:
    """Resolve a stream URL.

    Args:
        urls: Production URL map (or a single URL)
        path: Key or key sequence, e.g. ``("public", "spot")``
        sandbox: Prefer ``test_urls`` when present
        test_urls: Testnet URL map
        hostname: Value for ``{hostname}`` placeholders

    Returns:
        The URL, or None when the path names nothing

    Example:
        >>> resolve_url({"public": {"spot": "wss://a", "linear": "wss://b"}}, "public")
        'wss://a'
    """
    source = test_urls if sandbox and test_urls is not None else urls
    keys = (path,) if isinstance(path, str) else tuple(path)

    found = _navigate(source, keys)
    if isinstance(found, Mapping):
        found = _first_url(found)
    if not isinstance(found, str):
        return None
    return interpolate_hostname(found, hostname)
