"""Re-authentication scheduling from credential lifetimes.

Both functions are pure. The session driver starts a timer for
``schedule_delay_ms(compute_ttl_ms(meta, config))`` after a successful
login and re-authenticates when it fires. ``None`` means "do not schedule".
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Final

SAFETY_MARGIN: Final = 0.8
MAX_DELAY_MS: Final = 86_400_000  # 24h


def _positive_int(source: Any, name: str) -> int | None:
    if source is None:
        return None
    if isinstance(source, Mapping):
        value = source.get(name)
    else:
        value = getattr(source, name, None)
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return None
    return value


def compute_ttl_ms(response_meta: Any, auth_config: Any) -> int | None:
    """Resolve the credential lifetime for re-auth scheduling.

    A positive ``ttl_ms`` reported by the exchange wins over the configured
    ``auth_ttl_ms``. Non-positive or non-integer values from either source
    are ignored.

    Args:
        response_meta: ``AuthResponseMeta`` or mapping with ``ttl_ms`` (or None)
        auth_config: ``AuthConfig`` or mapping with ``auth_ttl_ms`` (or None)

    Returns:
        TTL in milliseconds, or None when neither source provides one

    Examples:
        >>> compute_ttl_ms({"ttl_ms": 900_000}, {"auth_ttl_ms": 3_600_000})
        900000
        >>> compute_ttl_ms({"ttl_ms": -1}, {"auth_ttl_ms": 600_000})
        600000
    """
    response_ttl = _positive_int(response_meta, "ttl_ms")
    if response_ttl is not None:
        return response_ttl
    return _positive_int(auth_config, "auth_ttl_ms")


def schedule_delay_ms(ttl_ms: int | None) -> int | None:
    """Delay before re-authenticating, ahead of the real expiry.

    Returns ``min(int(ttl_ms * 0.8), 24h)``, or None for an absent or
    non-positive TTL.
    """
    if ttl_ms is None or ttl_ms <= 0:
        return None
    return min(int(ttl_ms * SAFETY_MARGIN), MAX_DELAY_MS)
