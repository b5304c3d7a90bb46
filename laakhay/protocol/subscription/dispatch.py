"""Pattern dispatch for subscription messages.

Architecture:
    Strategies are registered once in a closed table keyed by
    ``SubscriptionPattern``. Callers name the pattern (usually through an
    ``ExchangeProfile``) and the dispatcher forwards to the shared strategy
    instance. An unknown pattern tag is a configuration fault and raises
    ``ConfigurationError``; it never falls back to another shape.

See Also:
    - subscription.base: Strategy contract and token helpers
    - exchanges.profile: Per-exchange facade that binds a pattern
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from ..core.enums import SubscriptionPattern
from ..core.exceptions import ConfigurationError
from ..core.types import ChannelRequest, ChannelTemplate, PatternConfig
from .base import Channel, Message, SubscriptionStrategy, apply_template_params, build_channel
from .patterns import (
    ActionSubscribe,
    Custom,
    EventSubscribe,
    JsonRpc,
    MethodAsTopic,
    MethodParams,
    MethodSubscribe,
    MethodSubscription,
    MethodTopics,
    OpSubscribe,
    OpSubscribeObjects,
    ReqtypeSub,
    SubBased,
    TypeSubscribe,
)

_STRATEGIES: dict[SubscriptionPattern, SubscriptionStrategy] = {
    strategy.pattern: strategy
    for strategy in (
        ActionSubscribe(),
        JsonRpc(),
        OpSubscribeObjects(),
        OpSubscribe(),
        MethodAsTopic(),
        MethodParams(),
        MethodTopics(),
        MethodSubscription(),
        ReqtypeSub(),
        TypeSubscribe(),
        SubBased(),
        MethodSubscribe(),
        EventSubscribe(),
        Custom(),
    )
}


def patterns() -> list[SubscriptionPattern]:
    """Return all supported subscription patterns."""
    return list(_STRATEGIES)


def get_strategy(pattern: SubscriptionPattern | str) -> SubscriptionStrategy:
    """Look up the strategy for a pattern tag.

    Raises:
        ConfigurationError: If the tag names no known pattern
    """
    try:
        key = SubscriptionPattern.parse(pattern)
    except ValueError as e:
        raise ConfigurationError(
            f"Unknown subscription pattern '{pattern}'. Valid patterns: {[p.value for p in _STRATEGIES]}",
            field="subscription_pattern",
            value=pattern,
        ) from e
    return _STRATEGIES[key]


def _as_config(config: PatternConfig | Mapping[str, Any] | None) -> PatternConfig:
    if config is None:
        return PatternConfig()
    if isinstance(config, PatternConfig):
        return config
    return PatternConfig.from_mapping(config)


def build_subscribe(
    channels: Sequence[Channel],
    pattern: SubscriptionPattern | str,
    config: PatternConfig | Mapping[str, Any] | None = None,
) -> Message:
    """Build a subscribe message for rendered channel tokens.

    Example:
        >>> build_subscribe(["tickers.BTCUSDT"], "op_subscribe")
        {'op': 'subscribe', 'args': ['tickers.BTCUSDT']}
    """
    return get_strategy(pattern).subscribe(list(channels), _as_config(config))


def build_unsubscribe(
    channels: Sequence[Channel],
    pattern: SubscriptionPattern | str,
    config: PatternConfig | Mapping[str, Any] | None = None,
) -> Message:
    """Build an unsubscribe message for rendered channel tokens."""
    return get_strategy(pattern).unsubscribe(list(channels), _as_config(config))


def format_channel(
    template: ChannelTemplate,
    request: ChannelRequest,
    pattern: SubscriptionPattern | str,
    config: PatternConfig | Mapping[str, Any] | None = None,
) -> Channel:
    """Render a channel request into the exchange's channel token.

    Template params with defaults are appended to string tokens after the
    positional parts, e.g. Deribit ``ticker.BTC-PERPETUAL.100ms``.
    """
    strategy = get_strategy(pattern)
    cfg = _as_config(config)
    channel = strategy.format_channel(template, request, cfg)
    if isinstance(channel, str) and template.params:
        parts = apply_template_params([channel], template.params, request.params)
        channel = build_channel(parts, strategy.separator(template, cfg))
    return channel


def collect_channels(subscriptions: Iterable[Mapping[str, Any]]) -> list[Channel]:
    """Unique channel tokens from previous subscriptions, first-seen order.

    Each subscription carries its token(s) under ``channel`` as a string,
    an object, or a list of those. Entries without a channel are skipped.
    """
    channels: list[Channel] = []
    for subscription in subscriptions:
        value = subscription.get("channel") if isinstance(subscription, Mapping) else None
        if value is None:
            continue
        items = value if isinstance(value, list) else [value]
        for item in items:
            if item not in channels:
                channels.append(item)
    return channels


def build_restore_message(
    subscriptions: Iterable[Mapping[str, Any]],
    pattern: SubscriptionPattern | str,
    config: PatternConfig | Mapping[str, Any] | None = None,
) -> Message | None:
    """Build one bulk subscribe message restoring previous subscriptions.

    Args:
        subscriptions: Subscription records from the previous session
        pattern: Subscription pattern tag
        config: Pattern configuration

    Returns:
        Subscribe message, or None when there is nothing to restore
    """
    channels = collect_channels(subscriptions)
    if not channels:
        return None
    return build_subscribe(channels, pattern, config)
