"""Op/args subscriptions: ``{"op": "subscribe", "args": ["tickers.BTCUSDT"]}`` (Bybit, Bitmex)."""

from __future__ import annotations

from ...core.enums import SubscriptionPattern
from ...core.types import ChannelRequest, ChannelTemplate, PatternConfig
from ..base import Channel, VerbStrategy, build_channel


class OpSubscribe(VerbStrategy):
    pattern = SubscriptionPattern.OP_SUBSCRIBE

    def format_channel(
        self,
        template: ChannelTemplate,
        request: ChannelRequest,
        config: PatternConfig,
    ) -> Channel:
        # e.g. "kline.1m.BTCUSDT", "orderbook.50.BTCUSDT"
        return build_channel(
            self.positional_parts(template, request, config),
            self.separator(template, config),
        )
