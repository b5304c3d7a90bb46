"""Type/topic subscriptions (KuCoin, Coinbase).

Three shapes, selected by configuration:

- ``args_format`` string (default): ``{"type": "subscribe", "topic": "ticker:BTC-USDT"}``
- any other ``args_format``: ``{"type": "subscribe", "topic": [...]}``
- ``channels_field`` set: channel tokens are bare market ids and the channel
  name travels separately, e.g. ``{"type": "subscribe",
  "product_ids": ["BTC-USD"], "channels": ["ticker"]}``
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ...core.enums import ArgsFormat, SubscriptionPattern
from ...core.types import ChannelRequest, ChannelTemplate, PatternConfig
from ..base import Channel, Message, VerbStrategy, build_channel, first_channel


class TypeSubscribe(VerbStrategy):
    pattern = SubscriptionPattern.TYPE_SUBSCRIBE
    default_op_field = "type"
    default_args_field = "topic"
    default_separator = ":"

    def build_message(self, verb: str, channels: Sequence[Channel], config: PatternConfig) -> Message:
        message: dict[str, Any] = {self.op_field(config): verb}
        channels = list(channels)

        if config.channels_field:
            message[self.args_field(config)] = channels
            if config.channels_field == "channels":
                message["channels"] = [config.channel_name] if config.channel_name else []
            else:
                message[config.channels_field] = config.channel_name or ""
            return message

        if (config.args_format or ArgsFormat.STRING) == ArgsFormat.STRING:
            message[self.args_field(config)] = first_channel(channels)
        else:
            message[self.args_field(config)] = channels
        return message

    def format_channel(
        self,
        template: ChannelTemplate,
        request: ChannelRequest,
        config: PatternConfig,
    ) -> Channel:
        if request.symbol is None:
            return template.channel_name
        market_id = self.market_id(request.symbol, template, config)
        if config.channels_field:
            return market_id
        return build_channel([template.channel_name, market_id], self.separator(template, config))
