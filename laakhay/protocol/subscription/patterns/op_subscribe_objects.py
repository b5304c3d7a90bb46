"""Object-channel subscriptions: ``{"op": ..., "args": [{"channel", "instId"}]}`` (OKX)."""

from __future__ import annotations

from ...core.enums import MarketIdFormat, SubscriptionPattern
from ...core.market_id import format_market_id
from ...core.types import ChannelRequest, ChannelTemplate, PatternConfig
from ..base import Channel, VerbStrategy


class OpSubscribeObjects(VerbStrategy):
    pattern = SubscriptionPattern.OP_SUBSCRIBE_OBJECTS

    def format_channel(
        self,
        template: ChannelTemplate,
        request: ChannelRequest,
        config: PatternConfig,
    ) -> Channel:
        channel: dict[str, str] = {"channel": template.channel_name}
        if request.symbol is not None:
            # instId is always the exchange's native id, never re-cased
            channel["instId"] = format_market_id(request.symbol, MarketIdFormat.NATIVE, config.symbol_context)
        return channel
