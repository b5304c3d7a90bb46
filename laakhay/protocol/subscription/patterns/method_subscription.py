"""Single typed subscription: ``{"method": ..., "subscription": {"type": ...}}`` (Hyperliquid)."""

from __future__ import annotations

from typing import Any

from ...core.enums import SubscriptionPattern
from ...core.types import PatternConfig
from ..base import Channel, VerbStrategy, first_channel


class MethodSubscription(VerbStrategy):
    pattern = SubscriptionPattern.METHOD_SUBSCRIPTION
    default_op_field = "method"
    default_args_field = "subscription"

    def payload(self, channels: list[Channel], config: PatternConfig) -> Any:
        return {"type": first_channel(channels)}
