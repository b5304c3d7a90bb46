"""JSON-RPC 2.0 subscriptions (Deribit).

Every message carries a correlation ``id`` drawn from the process-wide
generator, so two otherwise identical messages differ only in ``id``.
"""

from __future__ import annotations

from collections.abc import Sequence

from ...core.enums import SubscriptionPattern
from ...core.ids import next_request_id
from ...core.types import PatternConfig
from ..base import Channel, Message, SubscriptionStrategy


class JsonRpc(SubscriptionStrategy):
    pattern = SubscriptionPattern.JSONRPC

    subscribe_method = "public/subscribe"
    unsubscribe_method = "public/unsubscribe"

    def subscribe(self, channels: Sequence[Channel], config: PatternConfig) -> Message:
        return self._request(self.subscribe_method, channels)

    def unsubscribe(self, channels: Sequence[Channel], config: PatternConfig) -> Message:
        return self._request(self.unsubscribe_method, channels)

    def _request(self, method: str, channels: Sequence[Channel]) -> Message:
        return {
            "jsonrpc": "2.0",
            "method": method,
            "params": {"channels": list(channels)},
            "id": next_request_id(),
        }
