"""Nested channel list: ``{"method": ..., "params": {"channel": [...]}}`` (Kraken, Crypto.com)."""

from __future__ import annotations

from typing import Any

from ...core.enums import SubscriptionPattern
from ...core.types import PatternConfig
from ..base import Channel, VerbStrategy


class MethodParams(VerbStrategy):
    pattern = SubscriptionPattern.METHOD_PARAMS
    default_op_field = "method"
    default_args_field = "params"

    def payload(self, channels: list[Channel], config: PatternConfig) -> Any:
        return {"channel": channels}
