"""Exchange profile: one exchange's protocol configuration and facade.

Architecture:
    An ``ExchangeProfile`` is plain data: which subscription and auth
    patterns an exchange speaks, how its channels are named, where its
    endpoints live, how its stream envelopes look and which parse
    instructions apply to its responses. The facade methods forward to the
    pattern dispatchers with the profile's configuration bound, and emit
    telemetry tagged with the exchange id.

Design Decisions:
    - Immutable: profiles are frozen and safe to share across sessions
    - Data only: no business rules live in a profile
    - Explicit failures: using auth on a profile without an auth config
      raises ``ConfigurationError``; per-message results stay values

See Also:
    - exchanges.profiles: Built-in profiles
    - exchanges.registry: Process-wide profile lookup
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field, fields
from typing import Any

from .. import subscription, telemetry
from ..auth import (
    AuthBuildResult,
    AuthResult,
    PreAuthResult,
    build_auth_message,
    build_subscribe_auth,
    compute_ttl_ms,
    handle_auth_response,
    pre_auth,
    schedule_delay_ms,
)
from ..core.credentials import Credentials
from ..core.enums import SubscriptionPattern
from ..core.exceptions import ConfigurationError
from ..core.market_id import SymbolContext
from ..core.types import AuthConfig, AuthResponseMeta, ChannelRequest, ChannelTemplate, ParseInstruction, PatternConfig
from ..parsing import parser
from ..routing import Envelope, RoutedMessage, route
from ..subscription.base import Channel, Message
from .urls import UrlPath, resolve_url


def _check_urls(value: Any, field_name: str) -> None:
    if value is not None and not isinstance(value, str | Mapping):
        raise ConfigurationError(f"{field_name} must be a URL or a mapping of URLs", field=field_name, value=value)


def _templates(value: Mapping[str, Any]) -> dict[str, ChannelTemplate]:
    templates = {}
    for name, template in value.items():
        if isinstance(template, str):
            template = ChannelTemplate(channel_name=template)
        elif not isinstance(template, ChannelTemplate):
            template = ChannelTemplate.from_mapping(template)
        templates[name] = template
    return templates


def _instructions(value: Mapping[str, Iterable[Any]]) -> dict[str, tuple[ParseInstruction, ...]]:
    return {method: tuple(ParseInstruction.coerce(item) for item in items) for method, items in value.items()}


@dataclass(frozen=True)
class ExchangeProfile:
    """Protocol configuration for one exchange.

    Attributes:
        exchange_id: Lowercase exchange identifier (e.g. "bybit")
        subscription_pattern: Subscribe message shape
        pattern_config: Options for the subscription pattern
        channel_templates: Logical channel -> wire template
        timeframes: Unified timeframe -> exchange interval token
        auth: Auth configuration (None for public-only profiles)
        urls: Stream URL map
        test_urls: Testnet URL map
        hostname: Value for ``{hostname}`` URL placeholders
        envelope: Inbound message envelope
        channel_families: Wire channel -> payload family (None = control)
        parse_instructions: Parse method -> instructions
    """

    exchange_id: str
    subscription_pattern: SubscriptionPattern
    pattern_config: PatternConfig = field(default_factory=PatternConfig)
    channel_templates: Mapping[str, ChannelTemplate] = field(default_factory=dict)
    timeframes: Mapping[str, str] = field(default_factory=dict)
    auth: AuthConfig | None = None
    urls: Mapping[str, Any] | str | None = None
    test_urls: Mapping[str, Any] | str | None = None
    hostname: str | None = None
    envelope: Envelope | None = None
    channel_families: Mapping[str, str | None] = field(default_factory=dict)
    parse_instructions: Mapping[str, tuple[ParseInstruction, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.exchange_id, str) or not self.exchange_id:
            raise ConfigurationError("exchange_id must be a non-empty string", field="exchange_id", value=self.exchange_id)
        object.__setattr__(self, "exchange_id", self.exchange_id.lower())
        object.__setattr__(
            self, "subscription_pattern", subscription.get_strategy(self.subscription_pattern).pattern
        )

        if isinstance(self.pattern_config, Mapping):
            object.__setattr__(self, "pattern_config", PatternConfig.from_mapping(self.pattern_config))
        elif not isinstance(self.pattern_config, PatternConfig):
            raise ConfigurationError("Invalid pattern_config", field="pattern_config", value=self.pattern_config)

        if isinstance(self.auth, Mapping):
            object.__setattr__(self, "auth", AuthConfig.from_mapping(self.auth))
        if isinstance(self.envelope, Mapping):
            object.__setattr__(self, "envelope", Envelope.from_mapping(self.envelope))

        _check_urls(self.urls, "urls")
        _check_urls(self.test_urls, "test_urls")
        object.__setattr__(self, "channel_templates", _templates(self.channel_templates))
        object.__setattr__(self, "timeframes", dict(self.timeframes))
        object.__setattr__(self, "channel_families", dict(self.channel_families))
        object.__setattr__(self, "parse_instructions", _instructions(self.parse_instructions))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ExchangeProfile:
        """Build a profile from a configuration mapping (e.g. decoded JSON).

        Raises:
            ConfigurationError: On unknown keys or invalid values
        """
        unknown = set(data) - {f.name for f in fields(cls)}
        if unknown:
            raise ConfigurationError(f"Unknown profile keys: {sorted(unknown)}", field="profile")
        try:
            return cls(**data)
        except TypeError as e:
            raise ConfigurationError(f"Invalid profile: {e}", field="profile") from e

    # --- Subscriptions -------------------------------------------------

    def _config(self, context: SymbolContext | None) -> PatternConfig:
        if context is None:
            return self.pattern_config
        return self.pattern_config.with_symbol_context(context)

    def template(self, channel_name: str) -> ChannelTemplate:
        """Wire template for a logical channel; unmapped names pass through."""
        return self.channel_templates.get(channel_name) or ChannelTemplate(channel_name=channel_name)

    def format_channel(
        self,
        channel_name: str,
        symbol: str | None = None,
        *,
        timeframe: str | None = None,
        limit: int | None = None,
        params: Mapping[str, Any] | None = None,
        context: SymbolContext | None = None,
    ) -> Channel:
        """Render a logical channel into this exchange's channel token.

        Timeframes are translated through ``timeframes`` first, so the
        unified "1m" becomes Bybit's "1".
        """
        if timeframe is not None:
            timeframe = self.timeframes.get(timeframe, timeframe)
        request = ChannelRequest(
            channel_name=channel_name,
            symbol=symbol,
            timeframe=timeframe,
            limit=limit,
            params=dict(params or {}),
        )
        return subscription.format_channel(
            self.template(channel_name), request, self.subscription_pattern, self._config(context)
        )

    def subscribe(self, channels: Sequence[Channel], *, context: SymbolContext | None = None) -> Message:
        message = subscription.build_subscribe(channels, self.subscription_pattern, self._config(context))
        self._log_subscription("subscribe", len(channels))
        return message

    def unsubscribe(self, channels: Sequence[Channel], *, context: SymbolContext | None = None) -> Message:
        message = subscription.build_unsubscribe(channels, self.subscription_pattern, self._config(context))
        self._log_subscription("unsubscribe", len(channels))
        return message

    def restore_message(self, subscriptions: Iterable[Mapping[str, Any]]) -> Message | None:
        """Bulk subscribe message for a reconnect, or None if nothing to restore."""
        channels = subscription.collect_channels(subscriptions)
        if not channels:
            return None
        message = subscription.build_subscribe(channels, self.subscription_pattern, self.pattern_config)
        self._log_subscription("restore", len(channels))
        return message

    def _log_subscription(self, operation: str, channel_count: int) -> None:
        telemetry.log_subscription_built(
            exchange_id=self.exchange_id,
            pattern=str(self.subscription_pattern),
            operation=operation,
            channel_count=channel_count,
        )

    # --- Auth ----------------------------------------------------------

    def _require_auth(self) -> AuthConfig:
        if self.auth is None:
            raise ConfigurationError(f"Exchange '{self.exchange_id}' has no auth configuration", field="auth")
        return self.auth

    def auth_message(
        self,
        credentials: Credentials | Mapping[str, Any],
        options: Mapping[str, Any] | None = None,
    ) -> AuthBuildResult:
        config = self._require_auth()
        return build_auth_message(config.pattern, credentials, config, options)

    def subscribe_auth(
        self,
        credentials: Credentials | Mapping[str, Any],
        channel: str,
        symbols: Sequence[str] = (),
    ) -> dict[str, Any] | None:
        config = self._require_auth()
        return build_subscribe_auth(config.pattern, credentials, config, channel, symbols)

    def pre_auth(
        self,
        credentials: Credentials | Mapping[str, Any],
        *,
        market_type: str | None = None,
    ) -> PreAuthResult:
        config = self._require_auth()
        return pre_auth(config.pattern, credentials, config, market_type=market_type)

    def handle_auth_response(self, response: Any) -> AuthResult:
        config = self._require_auth()
        result = handle_auth_response(config.pattern, response, config)
        telemetry.log_auth_outcome(
            exchange_id=self.exchange_id,
            pattern=str(config.pattern),
            status=str(result.status),
            detail=result.detail if isinstance(result.detail, str) else None,
        )
        return result

    def reauth_delay_ms(self, meta: AuthResponseMeta | AuthResult | None = None) -> int | None:
        """Delay before re-authenticating, or None when no TTL is known.

        Args:
            meta: Hints from the auth ack (or the ``AuthResult`` carrying them)
        """
        config = self._require_auth()
        if isinstance(meta, AuthResult):
            meta = meta.meta
        ttl_ms = compute_ttl_ms(meta, config)
        delay_ms = schedule_delay_ms(ttl_ms)
        telemetry.log_reauth_scheduled(
            exchange_id=self.exchange_id,
            pattern=str(config.pattern),
            ttl_ms=ttl_ms,
            delay_ms=delay_ms,
        )
        return delay_ms

    # --- Inbound -------------------------------------------------------

    def parse(self, data: Any, parse_method: str) -> Any:
        """Add unified fields to a raw response for a parse method.

        Methods without instructions return ``data`` unchanged.
        """
        instructions = self.parse_instructions.get(parse_method)
        result = parser.parse(data, instructions)
        if instructions and isinstance(data, Mapping):
            telemetry.log_parse_applied(
                exchange_id=self.exchange_id,
                parse_method=parse_method,
                instruction_count=len(instructions),
                fields_added=len(result) - len(data),
            )
        return result

    def route(self, raw: Any) -> RoutedMessage:
        return route(raw, self.envelope, self.channel_families)

    def resolve_url(self, path: UrlPath = (), *, sandbox: bool = False) -> str | None:
        return resolve_url(self.urls, path, sandbox=sandbox, test_urls=self.test_urls, hostname=self.hostname)
