"""Subscription message building."""

from .base import (
    Channel,
    Message,
    SubscriptionStrategy,
    VerbStrategy,
    apply_template_params,
    build_channel,
    maybe_add_part,
)
from .dispatch import (
    build_restore_message,
    build_subscribe,
    build_unsubscribe,
    collect_channels,
    format_channel,
    get_strategy,
    patterns,
)

__all__ = [
    "Channel",
    "Message",
    "SubscriptionStrategy",
    "VerbStrategy",
    "apply_template_params",
    "build_channel",
    "maybe_add_part",
    "build_restore_message",
    "build_subscribe",
    "build_unsubscribe",
    "collect_channels",
    "format_channel",
    "get_strategy",
    "patterns",
]
