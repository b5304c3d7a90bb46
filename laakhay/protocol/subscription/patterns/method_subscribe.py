"""Uppercase-verb subscriptions: ``{"method": "SUBSCRIBE", "params": ["btcusdt@trade"]}`` (Binance)."""

from __future__ import annotations

from ...core.enums import MarketIdFormat, SubscriptionPattern
from ...core.types import ChannelRequest, ChannelTemplate, PatternConfig
from ..base import Channel, VerbStrategy, build_channel


class MethodSubscribe(VerbStrategy):
    pattern = SubscriptionPattern.METHOD_SUBSCRIBE
    default_op_field = "method"
    default_args_field = "params"
    default_separator = "@"
    default_market_id_format = MarketIdFormat.LOWERCASE
    subscribe_verb = "SUBSCRIBE"
    unsubscribe_verb = "UNSUBSCRIBE"

    def format_channel(
        self,
        template: ChannelTemplate,
        request: ChannelRequest,
        config: PatternConfig,
    ) -> Channel:
        if request.symbol is None:
            return template.channel_name
        return build_channel(
            [self.market_id(request.symbol, template, config), template.channel_name],
            self.separator(template, config),
        )
