"""Event subscriptions (Gate, Bitfinex).

``args_format`` selects the payload: ``string`` sends the first channel,
``object_list`` and the default send the whole list.
"""

from __future__ import annotations

from typing import Any

from ...core.enums import ArgsFormat, SubscriptionPattern
from ...core.types import ChannelRequest, ChannelTemplate, PatternConfig
from ..base import Channel, VerbStrategy, build_channel, first_channel


class EventSubscribe(VerbStrategy):
    pattern = SubscriptionPattern.EVENT_SUBSCRIBE
    default_op_field = "event"
    default_args_field = "payload"

    def payload(self, channels: list[Channel], config: PatternConfig) -> Any:
        if config.args_format == ArgsFormat.STRING:
            return first_channel(channels)
        return channels

    def format_channel(
        self,
        template: ChannelTemplate,
        request: ChannelRequest,
        config: PatternConfig,
    ) -> Channel:
        return build_channel(
            self.positional_parts(template, request, config),
            self.separator(template, config),
        )
