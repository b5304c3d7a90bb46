"""Base subscription strategy and channel-token helpers.

Architecture:
    A subscription strategy turns rendered channel tokens into one complete
    subscribe/unsubscribe wire message, and renders a ``ChannelRequest``
    into the token an exchange expects. Each variant lives in its own
    module and subclasses ``SubscriptionStrategy``; variants differ only in
    message shape and token layout.

Design Decisions:
    - Stateless strategies: Instances hold no mutable state, one shared
      instance per pattern is safe across sessions
    - Config-over-defaults: Every field name, separator and market-id
      format falls back to the variant's default when the config is silent
    - Template before config: ``ChannelTemplate`` separator/format override
      the pattern config, which overrides the variant default

Channel Token Rendering:
    1. Start from ``template.channel_name``
    2. Append timeframe, then stringified limit, then encoded market id
    3. Drop absent/empty parts and join with the separator
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, ClassVar

from ..core.enums import MarketIdFormat, SubscriptionPattern
from ..core.market_id import format_market_id
from ..core.types import ChannelRequest, ChannelTemplate, PatternConfig, TemplateParam

Channel = str | dict[str, Any]
Message = dict[str, Any] | list[dict[str, Any]]

POSITIONAL_PARAMS = frozenset({"symbol", "timeframe", "limit"})


def build_channel(parts: Iterable[Any], separator: str) -> str:
    """Join non-empty parts with a separator.

    Examples:
        >>> build_channel(["ticker", "1h", "BTCUSDT"], ".")
        'ticker.1h.BTCUSDT'
        >>> build_channel(["ticker", "", "BTCUSDT"], ".")
        'ticker.BTCUSDT'
    """
    return separator.join(str(part) for part in parts if part is not None and part != "")


def maybe_add_part(parts: list[Any], value: Any, transform: Any = None) -> list[Any]:
    """Return ``parts`` extended with ``value`` (transformed) unless it is None."""
    if value is None:
        return parts
    return [*parts, transform(value) if transform is not None else value]


def apply_template_params(
    parts: list[Any],
    template_params: Sequence[TemplateParam],
    runtime_params: Mapping[Any, Any] | None = None,
) -> list[Any]:
    """Append template params with non-null defaults to channel parts.

    Positional params (symbol, timeframe, limit) are rendered by the strategy
    itself and skipped here. A runtime value overrides the default.

    Args:
        parts: Channel parts rendered so far
        template_params: Params declared by the channel template
        runtime_params: Caller-supplied values keyed by param name

    Returns:
        New parts list
    """
    if not template_params:
        return parts

    runtime = {str(key): value for key, value in (runtime_params or {}).items() if isinstance(key, str)}
    result = list(parts)
    for param in template_params:
        if param.default is None or param.name in POSITIONAL_PARAMS:
            continue
        result.append(str(runtime.get(param.name, param.default)))
    return result


def first_channel(channels: Sequence[Channel], default: Any = "") -> Any:
    return channels[0] if channels else default


class SubscriptionStrategy(ABC):
    """Base class for subscribe/unsubscribe message strategies."""

    pattern: ClassVar[SubscriptionPattern]

    default_op_field: ClassVar[str] = "op"
    default_args_field: ClassVar[str] = "args"
    default_separator: ClassVar[str] = "."
    default_market_id_format: ClassVar[MarketIdFormat] = MarketIdFormat.NATIVE

    @abstractmethod
    def subscribe(self, channels: Sequence[Channel], config: PatternConfig) -> Message:
        """Build a subscribe message for rendered channel tokens."""
        ...

    @abstractmethod
    def unsubscribe(self, channels: Sequence[Channel], config: PatternConfig) -> Message:
        """Build an unsubscribe message for rendered channel tokens."""
        ...

    def format_channel(
        self,
        template: ChannelTemplate,
        request: ChannelRequest,
        config: PatternConfig,
    ) -> Channel:
        """Render ``channel_name<sep>market_id``, or the bare name without a symbol."""
        if request.symbol is None:
            return template.channel_name
        return build_channel(
            [template.channel_name, self.market_id(request.symbol, template, config)],
            self.separator(template, config),
        )

    def op_field(self, config: PatternConfig) -> str:
        return config.op_field or self.default_op_field

    def args_field(self, config: PatternConfig) -> str:
        return config.args_field or self.default_args_field

    def separator(self, template: ChannelTemplate | None, config: PatternConfig) -> str:
        if template is not None and template.separator is not None:
            return template.separator
        if config.separator is not None:
            return config.separator
        return self.default_separator

    def market_id_format(self, template: ChannelTemplate | None, config: PatternConfig) -> MarketIdFormat:
        if template is not None and template.market_id_format is not None:
            return template.market_id_format
        return config.market_id_format or self.default_market_id_format

    def market_id(self, symbol: str | None, template: ChannelTemplate | None, config: PatternConfig) -> str:
        return format_market_id(symbol, self.market_id_format(template, config), config.symbol_context)

    def positional_parts(
        self,
        template: ChannelTemplate,
        request: ChannelRequest,
        config: PatternConfig,
    ) -> list[Any]:
        """Channel name, timeframe, limit and market id, absent parts dropped."""
        parts: list[Any] = [template.channel_name]
        parts = maybe_add_part(parts, request.timeframe)
        parts = maybe_add_part(parts, request.limit, str)
        parts = maybe_add_part(parts, request.symbol, lambda s: self.market_id(s, template, config))
        return parts

    def __repr__(self) -> str:
        return f"{type(self).__name__}(pattern={self.pattern.value!r})"


class VerbStrategy(SubscriptionStrategy):
    """Strategy shaped ``{op_field: verb, args_field: payload}``.

    Subclasses pick the verbs and override ``payload`` to nest or narrow
    the channel list.
    """

    subscribe_verb: ClassVar[str] = "subscribe"
    unsubscribe_verb: ClassVar[str] = "unsubscribe"

    def subscribe(self, channels: Sequence[Channel], config: PatternConfig) -> Message:
        return self.build_message(self.subscribe_verb, channels, config)

    def unsubscribe(self, channels: Sequence[Channel], config: PatternConfig) -> Message:
        return self.build_message(self.unsubscribe_verb, channels, config)

    def build_message(self, verb: str, channels: Sequence[Channel], config: PatternConfig) -> Message:
        return {
            self.op_field(config): verb,
            self.args_field(config): self.payload(list(channels), config),
        }

    def payload(self, channels: list[Channel], config: PatternConfig) -> Any:
        return channels
