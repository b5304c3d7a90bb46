"""Generic action envelope: ``{"action": ..., "params": {"channels": [...]}}`` (Alpaca, LBank)."""

from __future__ import annotations

from typing import Any

from ...core.enums import SubscriptionPattern
from ...core.types import PatternConfig
from ..base import Channel, VerbStrategy


class ActionSubscribe(VerbStrategy):
    pattern = SubscriptionPattern.ACTION_SUBSCRIBE
    default_op_field = "action"
    default_args_field = "params"

    def payload(self, channels: list[Channel], config: PatternConfig) -> Any:
        return {"channels": channels}
