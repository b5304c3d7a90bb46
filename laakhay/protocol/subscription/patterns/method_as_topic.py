"""Method-as-topic subscriptions (Coinex, Phemex).

The method name is the channel itself, e.g. ``{"method": "ticker.subscribe",
"params": [], "id": 7}``. Only the first channel is sent per message.
"""

from __future__ import annotations

from collections.abc import Sequence

from ...core.enums import SubscriptionPattern
from ...core.ids import next_request_id
from ...core.types import ChannelRequest, ChannelTemplate, PatternConfig
from ..base import Channel, Message, SubscriptionStrategy, build_channel

SUBSCRIBE_SUFFIX = ".subscribe"
UNSUBSCRIBE_SUFFIX = ".unsubscribe"


class MethodAsTopic(SubscriptionStrategy):
    pattern = SubscriptionPattern.METHOD_AS_TOPIC
    default_op_field = "method"
    default_args_field = "params"

    def subscribe(self, channels: Sequence[Channel], config: PatternConfig) -> Message:
        method = channels[0] if channels else "subscribe"
        return self._request(str(method), config)

    def unsubscribe(self, channels: Sequence[Channel], config: PatternConfig) -> Message:
        method = str(channels[0]) if channels else ""
        return self._request(method.replace(SUBSCRIBE_SUFFIX, UNSUBSCRIBE_SUFFIX), config)

    def format_channel(
        self,
        template: ChannelTemplate,
        request: ChannelRequest,
        config: PatternConfig,
    ) -> Channel:
        base = template.channel_name + SUBSCRIBE_SUFFIX
        if request.symbol is None:
            return base
        return build_channel(
            [base, self.market_id(request.symbol, template, config)],
            self.separator(template, config),
        )

    def _request(self, method: str, config: PatternConfig) -> Message:
        return {
            self.op_field(config): method,
            self.args_field(config): [],
            "id": next_request_id(),
        }
