"""Request-type subscriptions: ``{"reqType": "sub", "dataType": "BTC-USDT@trade"}`` (BingX).

One channel per message; the market id precedes the channel name.
"""

from __future__ import annotations

from typing import Any

from ...core.enums import SubscriptionPattern
from ...core.types import ChannelRequest, ChannelTemplate, PatternConfig
from ..base import Channel, VerbStrategy, build_channel, first_channel


class ReqtypeSub(VerbStrategy):
    pattern = SubscriptionPattern.REQTYPE_SUB
    default_op_field = "reqType"
    default_args_field = "dataType"
    default_separator = "@"
    subscribe_verb = "sub"
    unsubscribe_verb = "unsub"

    def payload(self, channels: list[Channel], config: PatternConfig) -> Any:
        return first_channel(channels)

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
