"""Static configuration records and per-call request types.

This module defines the immutable records that describe how one exchange
speaks the wire protocol: channel templates, subscription pattern options,
auth options and response parse instructions. Records are built once per
exchange integration and never mutated afterwards.

Every record validates itself in ``__post_init__``; a malformed record raises
``ConfigurationError`` at build time so no message is ever produced from a
configuration the exchange would reject.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, fields, replace
from typing import Any, TypeVar

from .enums import (
    ArgsFormat,
    AuthPattern,
    MarketIdFormat,
    SignatureEncoding,
    TimestampUnit,
    _TagEnum,
)
from .exceptions import ConfigurationError
from .market_id import SymbolContext

_T = TypeVar("_T")
_E = TypeVar("_E", bound=_TagEnum)


def _parse_tag(enum_cls: type[_E], value: Any, field_name: str) -> _E:
    try:
        return enum_cls.parse(value)
    except ValueError as e:
        valid = [member.value for member in enum_cls]
        raise ConfigurationError(
            f"Invalid {field_name} '{value}'. Valid values: {valid}",
            field=field_name,
            value=value,
        ) from e


def _parse_optional_tag(enum_cls: type[_E], value: Any, field_name: str) -> _E | None:
    if value is None:
        return None
    return _parse_tag(enum_cls, value, field_name)


def _check_str(value: Any, field_name: str, *, required: bool = False) -> None:
    if value is None and not required:
        return
    if not isinstance(value, str) or (required and not value):
        raise ConfigurationError(
            f"{field_name} must be a non-empty string, got {value!r}",
            field=field_name,
            value=value,
        )


def _check_positive_int(value: Any, field_name: str) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigurationError(
            f"{field_name} must be a positive integer, got {value!r}",
            field=field_name,
            value=value,
        )


def _set(obj: object, name: str, value: Any) -> None:
    # Frozen dataclasses normalize their own fields during __post_init__
    object.__setattr__(obj, name, value)


def _build(cls: type[_T], data: Mapping[str, Any]) -> _T:
    """Instantiate a record from a mapping, rejecting unknown keys."""
    if not isinstance(data, Mapping):
        raise ConfigurationError(
            f"{cls.__name__} configuration must be a mapping, got {type(data).__name__}",
            value=data,
        )
    known = {f.name for f in fields(cls)}  # type: ignore[arg-type]
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigurationError(
            f"Unknown {cls.__name__} keys: {unknown}",
            field=unknown[0],
            value=data[unknown[0]],
        )
    try:
        return cls(**data)
    except TypeError as e:
        raise ConfigurationError(f"Invalid {cls.__name__} configuration: {e}") from e


@dataclass(frozen=True)
class TemplateParam:
    """Extra channel parameter declared by a channel template.

    Attributes:
        name: Parameter name (e.g. "interval")
        default: Value appended when the caller supplies none (None = skip)
    """

    name: str
    default: Any = None

    def __post_init__(self) -> None:
        _check_str(self.name, "name", required=True)


@dataclass(frozen=True)
class ChannelTemplate:
    """Per-exchange rendering rule for one logical channel.

    Attributes:
        channel_name: Wire channel name (e.g. "tickers", "books5")
        separator: Part separator, overrides the pattern config separator
        market_id_format: Symbol encoding, overrides the pattern config format
        params: Additional non-positional parameters with defaults
    """

    channel_name: str
    separator: str | None = None
    market_id_format: MarketIdFormat | None = None
    params: tuple[TemplateParam, ...] = ()

    def __post_init__(self) -> None:
        _check_str(self.channel_name, "channel_name")
        if self.channel_name is None:
            raise ConfigurationError("channel_name is required", field="channel_name")
        _check_str(self.separator, "separator")
        _set(
            self,
            "market_id_format",
            _parse_optional_tag(MarketIdFormat, self.market_id_format, "market_id_format"),
        )
        params = tuple(
            param if isinstance(param, TemplateParam) else _build(TemplateParam, param)
            for param in (self.params or ())
        )
        _set(self, "params", params)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ChannelTemplate:
        """Build a template from a configuration mapping."""
        return _build(cls, data)


@dataclass(frozen=True)
class ChannelRequest:
    """Exchange-agnostic description of a subscription target.

    Attributes:
        channel_name: Logical channel (e.g. "ticker", "order_book")
        symbol: Unified symbol (e.g. "BTC/USDT"), if the channel is per-market
        timeframe: Candle interval (e.g. "1m")
        limit: Depth limit (e.g. order book levels)
        params: Runtime values for template params
    """

    channel_name: str
    symbol: str | None = None
    timeframe: str | None = None
    limit: int | None = None
    params: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class PatternConfig:
    """Options consumed by a subscription pattern.

    Each pattern supplies its own default for any option left as None, so an
    empty ``PatternConfig()`` renders the pattern's canonical shape.

    Attributes:
        op_field: Name of the operation key ("op", "method", "event", ...)
        args_field: Name of the payload key ("args", "params", "topic", ...)
        args_format: Payload layout discriminator
        separator: Channel token part separator
        market_id_format: Symbol encoding tag
        custom_type: Shape discriminator for the custom pattern
        symbol_context: Symbol table used to look up exchange market ids
        channels_field: Extra key carrying channel names (type_subscribe)
        channel_name: Channel name written to ``channels_field``
    """

    op_field: str | None = None
    args_field: str | None = None
    args_format: ArgsFormat | None = None
    separator: str | None = None
    market_id_format: MarketIdFormat | None = None
    custom_type: str | None = None
    symbol_context: SymbolContext | None = None
    channels_field: str | None = None
    channel_name: str | None = None

    def __post_init__(self) -> None:
        for name in ("op_field", "args_field", "separator", "custom_type", "channels_field", "channel_name"):
            _check_str(getattr(self, name), name)
        _set(self, "args_format", _parse_optional_tag(ArgsFormat, self.args_format, "args_format"))
        _set(
            self,
            "market_id_format",
            _parse_optional_tag(MarketIdFormat, self.market_id_format, "market_id_format"),
        )
        context = self.symbol_context
        if context is not None and not isinstance(context, SymbolContext):
            if not isinstance(context, Mapping):
                raise ConfigurationError(
                    "symbol_context must be a SymbolContext or a mapping of symbol to market id",
                    field="symbol_context",
                    value=context,
                )
            _set(self, "symbol_context", SymbolContext(markets=dict(context)))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> PatternConfig:
        """Build a pattern config from a configuration mapping."""
        return _build(cls, data)

    def with_symbol_context(self, context: SymbolContext | None) -> PatternConfig:
        """Return a copy bound to a symbol table."""
        return replace(self, symbol_context=context)


@dataclass(frozen=True)
class PreAuthEndpoint:
    """REST endpoint that issues a listen key for one market type."""

    market_type: str
    endpoint: str
    method: str = "POST"
    path: str | None = None
    api_section: str | None = None

    def __post_init__(self) -> None:
        _check_str(self.market_type, "market_type", required=True)
        _check_str(self.endpoint, "endpoint", required=True)
        _check_str(self.method, "method", required=True)
        _check_str(self.path, "path")
        _check_str(self.api_section, "api_section")


@dataclass(frozen=True)
class PreAuthConfig:
    """Out-of-band (REST) authentication endpoints.

    Attributes:
        endpoint: Token endpoint (rest_token)
        endpoints: Listen-key endpoints per market type (listen_key)
    """

    endpoint: str | None = None
    endpoints: tuple[PreAuthEndpoint, ...] = ()

    def __post_init__(self) -> None:
        _check_str(self.endpoint, "endpoint")
        endpoints = tuple(
            ep if isinstance(ep, PreAuthEndpoint) else _build(PreAuthEndpoint, ep)
            for ep in (self.endpoints or ())
        )
        _set(self, "endpoints", endpoints)


@dataclass(frozen=True)
class AuthConfig:
    """Options consumed by an auth pattern.

    Attributes:
        pattern: Auth strategy tag
        op_field: Operation key for op-style messages (default "op")
        op_value: Operation value ("auth", "login")
        event_field: Event key for event-style messages
        event_value: Event value ("auth")
        method_value: JSON-RPC method ("public/auth")
        token: Session token obtained out of band (rest_token)
        auth_ttl_ms: Static credential lifetime used when the ack carries none
        expires_offset_ms: Signature validity window (direct_hmac_expiry)
        encoding: Signature text encoding (direct_hmac_expiry)
        timestamp_unit: Signed timestamp resolution (iso_passphrase)
        channel: Login channel (sha512_newline)
        pre_auth: REST pre-auth endpoints (listen_key, rest_token)
    """

    pattern: AuthPattern
    op_field: str | None = None
    op_value: str | None = None
    event_field: str | None = None
    event_value: str | None = None
    method_value: str | None = None
    token: str | None = None
    auth_ttl_ms: int | None = None
    expires_offset_ms: int = 10_000
    encoding: SignatureEncoding = SignatureEncoding.HEX
    timestamp_unit: TimestampUnit = TimestampUnit.SECONDS
    channel: str | None = None
    pre_auth: PreAuthConfig | None = None

    def __post_init__(self) -> None:
        _set(self, "pattern", _parse_tag(AuthPattern, self.pattern, "pattern"))
        for name in ("op_field", "op_value", "event_field", "event_value", "method_value", "token", "channel"):
            _check_str(getattr(self, name), name)
        _check_positive_int(self.auth_ttl_ms, "auth_ttl_ms")
        _check_positive_int(self.expires_offset_ms, "expires_offset_ms")
        _set(self, "encoding", _parse_tag(SignatureEncoding, self.encoding, "encoding"))
        _set(self, "timestamp_unit", _parse_tag(TimestampUnit, self.timestamp_unit, "timestamp_unit"))
        if self.pre_auth is not None and not isinstance(self.pre_auth, PreAuthConfig):
            _set(self, "pre_auth", _build(PreAuthConfig, self.pre_auth))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> AuthConfig:
        """Build an auth config from a configuration mapping."""
        return _build(cls, data)

    def with_token(self, token: str | None) -> AuthConfig:
        """Return a copy carrying a session token obtained via REST."""
        return replace(self, token=token)


@dataclass(frozen=True)
class AuthResponseMeta:
    """Hints extracted from an auth acknowledgement.

    Attributes:
        ttl_ms: Credential lifetime reported by the exchange
        pattern: Auth pattern that produced the hint
    """

    ttl_ms: int | None = None
    pattern: AuthPattern | None = None


@dataclass(frozen=True)
class ParseInstruction:
    """Rule deriving one unified field from raw response keys.

    The coercion kind is kept as given; an unrecognized kind makes the
    parser skip the field instead of failing.

    Attributes:
        unified_field: Unified field name (e.g. "ask", "base_volume")
        coercion: Coercion kind tag (e.g. "number")
        source_keys: Raw keys to try, in priority order
    """

    unified_field: str
    coercion: str
    source_keys: tuple[str, ...]

    def __post_init__(self) -> None:
        keys = self.source_keys
        if isinstance(keys, str):
            keys = (keys,)
        _set(self, "source_keys", tuple(keys))
        if isinstance(self.coercion, _TagEnum):
            _set(self, "coercion", self.coercion.value)

    @classmethod
    def coerce(cls, value: ParseInstruction | Iterable[Any]) -> ParseInstruction:
        """Accept either an instruction or a ``(field, coercion, keys)`` tuple."""
        if isinstance(value, ParseInstruction):
            return value
        unified_field, coercion, source_keys = value
        return cls(unified_field, coercion, source_keys)
