"""HTX-style subscriptions: ``{"sub": "market.btcusdt.trade.detail", "id": "id42"}``.

One channel per message; the ``id`` is a generated string.
"""

from __future__ import annotations

from collections.abc import Sequence

from ...core.enums import MarketIdFormat, SubscriptionPattern
from ...core.ids import next_string_id
from ...core.types import ChannelRequest, ChannelTemplate, PatternConfig
from ..base import Channel, Message, SubscriptionStrategy, build_channel, first_channel

MARKET_PREFIX = "market"


class SubBased(SubscriptionStrategy):
    pattern = SubscriptionPattern.SUB_BASED
    default_market_id_format = MarketIdFormat.LOWERCASE

    def subscribe(self, channels: Sequence[Channel], config: PatternConfig) -> Message:
        return {"sub": first_channel(channels), "id": next_string_id("id")}

    def unsubscribe(self, channels: Sequence[Channel], config: PatternConfig) -> Message:
        return {"unsub": first_channel(channels), "id": next_string_id("id")}

    def format_channel(
        self,
        template: ChannelTemplate,
        request: ChannelRequest,
        config: PatternConfig,
    ) -> Channel:
        if request.symbol is None:
            return template.channel_name
        return build_channel(
            [MARKET_PREFIX, self.market_id(request.symbol, template, config), template.channel_name],
            self.separator(template, config),
        )
