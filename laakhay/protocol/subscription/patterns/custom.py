"""Escape hatch for exchanges matching no shared shape.

``custom_type`` selects the shape:

- ``array_format``: one object per channel, ``[{"type": "ticker", "codes": [ch]}]``
- ``sendTopicAction``: ``{"sendTopicAction": {"action": ..., "topics": [...]}}``
- anything else: ``{"subscribe": true, "channels": [...]}``
"""

from __future__ import annotations

from collections.abc import Sequence

from ...core.enums import SubscriptionPattern
from ...core.types import PatternConfig
from ..base import Channel, Message, SubscriptionStrategy

ARRAY_FORMAT = "array_format"
SEND_TOPIC_ACTION = "sendTopicAction"


class Custom(SubscriptionStrategy):
    pattern = SubscriptionPattern.CUSTOM

    def subscribe(self, channels: Sequence[Channel], config: PatternConfig) -> Message:
        return self._build(channels, config, subscribe=True)

    def unsubscribe(self, channels: Sequence[Channel], config: PatternConfig) -> Message:
        return self._build(channels, config, subscribe=False)

    def _build(self, channels: Sequence[Channel], config: PatternConfig, *, subscribe: bool) -> Message:
        action = "subscribe" if subscribe else "unsubscribe"

        if config.custom_type == ARRAY_FORMAT:
            messages = []
            for channel in channels:
                item = {"type": "ticker", "codes": [channel]}
                if not subscribe:
                    item["isOnlyRealtime"] = True
                messages.append(item)
            return messages

        if config.custom_type == SEND_TOPIC_ACTION:
            return {SEND_TOPIC_ACTION: {"action": action, "topics": list(channels)}}

        return {action: True, "channels": list(channels)}
