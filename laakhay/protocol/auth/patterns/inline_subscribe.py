"""Per-subscription signed auth (Coinbase).

Signature is HMAC-SHA256 hex over ``timestamp + channel + ",".join(symbols)``
and is merged into the subscribe message.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ...core.credentials import Credentials
from ...core.enums import AuthPattern
from ...core.types import AuthConfig
from ...signing import hmac_hex, timestamp_seconds
from ..base import NoMessageStrategy


class InlineSubscribe(NoMessageStrategy):
    pattern = AuthPattern.INLINE_SUBSCRIBE
    inline_auth = True

    def build_subscribe_auth(
        self,
        credentials: Credentials,
        config: AuthConfig,
        channel: str,
        symbols: Sequence[str],
    ) -> dict[str, Any] | None:
        timestamp = str(timestamp_seconds())
        payload = timestamp + channel + ",".join(symbols)
        return {
            "api_key": credentials.api_key,
            "timestamp": timestamp,
            "signature": hmac_hex(credentials.secret, payload),
        }
