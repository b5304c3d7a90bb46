"""Core enumerations for protocol adaptation.

Architecture:
    This module defines the closed sets of tags used by exchange configuration.
    Every strategy family (subscription, auth, coercion) is selected by one of
    these enums, so an unknown tag is rejected when configuration is built
    rather than when a message is produced.

Design Decisions:
    - String enums: Tags round-trip through JSON/TOML configuration unchanged
    - Lenient parsing: ``parse`` accepts ``":object_list"`` style tags as well
      as enum members and plain strings
    - Closed sets: Adding a variant means adding a member here and a strategy

Key Types:
    - SubscriptionPattern: Subscribe/unsubscribe wire shapes
    - AuthPattern: Login/auth handshake schemes
    - CoercionKind: Response value coercions
    - AuthStatus: Auth acknowledgement classification
    - ArgsFormat: Payload layout discriminator
    - MarketIdFormat: Market-id encoding tag

See Also:
    - core.types: Configuration records that carry these tags
"""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeVar

_E = TypeVar("_E", bound="_TagEnum")


class _TagEnum(str, Enum):
    """String enum with lenient tag parsing."""

    def __str__(self) -> str:
        """String representation returns the value."""
        return self.value

    @classmethod
    def parse(cls: type[_E], value: Any) -> _E:
        """Parse a configuration tag into an enum member.

        Args:
            value: Enum member, or string tag optionally prefixed with ``:``

        Returns:
            Matching enum member

        Raises:
            ValueError: If the tag is not a member of this enum
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls(value.strip().lstrip(":").lower())
        raise ValueError(f"Invalid {cls.__name__} tag: {value!r}")


class SubscriptionPattern(_TagEnum):
    """Subscribe/unsubscribe message shape used by an exchange."""

    ACTION_SUBSCRIBE = "action_subscribe"  # Alpaca, LBank
    JSONRPC = "jsonrpc"  # Deribit
    OP_SUBSCRIBE_OBJECTS = "op_subscribe_objects"  # OKX
    OP_SUBSCRIBE = "op_subscribe"  # Bybit, Bitmex
    METHOD_AS_TOPIC = "method_as_topic"  # Coinex, Phemex
    METHOD_PARAMS = "method_params"  # Kraken, Crypto.com
    METHOD_TOPICS = "method_topics"  # Exmo
    METHOD_SUBSCRIPTION = "method_subscription"  # Hyperliquid
    REQTYPE_SUB = "reqtype_sub"  # BingX
    TYPE_SUBSCRIBE = "type_subscribe"  # KuCoin, Coinbase
    SUB_BASED = "sub_based"  # HTX
    METHOD_SUBSCRIBE = "method_subscribe"  # Binance
    EVENT_SUBSCRIBE = "event_subscribe"  # Gate, Bitfinex
    CUSTOM = "custom"


class AuthPattern(_TagEnum):
    """WebSocket authentication scheme used by an exchange."""

    DIRECT_HMAC_EXPIRY = "direct_hmac_expiry"  # Bybit, Bitmex
    ISO_PASSPHRASE = "iso_passphrase"  # OKX, Bitget
    JSONRPC_LINEBREAK = "jsonrpc_linebreak"  # Deribit
    SHA384_NONCE = "sha384_nonce"  # Bitfinex
    SHA512_NEWLINE = "sha512_newline"  # Gate
    LISTEN_KEY = "listen_key"  # Binance
    REST_TOKEN = "rest_token"  # Kraken
    INLINE_SUBSCRIBE = "inline_subscribe"  # Coinbase


class CoercionKind(_TagEnum):
    """Type coercion applied to a raw response value."""

    NUMBER = "number"
    INTEGER = "integer"
    STRING = "string"
    STRING_LOWER = "string_lower"
    STRING_UPPER = "string_upper"
    BOOL = "bool"
    TIMESTAMP = "timestamp"
    VALUE = "value"
    LIST = "list"
    DICT = "dict"


class ArgsFormat(_TagEnum):
    """Layout of the channel payload inside a subscribe message."""

    STRING_LIST = "string_list"
    OBJECT_LIST = "object_list"
    STRING = "string"
    PARAMS_OBJECT = "params_object"


class MarketIdFormat(_TagEnum):
    """How a unified symbol is rendered as an exchange market id.

    Examples for ``BTC/USDT``: native ``BTCUSDT``, lowercase ``btcusdt``,
    uppercase ``BTCUSDT``, dashed ``BTC-USDT``, underscored ``BTC_USDT``.
    """

    NATIVE = "native"
    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    DASHED = "dashed"
    UNDERSCORED = "underscored"


class HashAlgorithm(_TagEnum):
    """Hash function backing an HMAC signature."""

    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"


class SignatureEncoding(_TagEnum):
    """Text encoding of a signature digest."""

    HEX = "hex"
    BASE64 = "base64"


class TimestampUnit(_TagEnum):
    """Resolution of a signed timestamp."""

    SECONDS = "seconds"
    MILLISECONDS = "milliseconds"


class AuthStatus(_TagEnum):
    """Classification of an auth acknowledgement."""

    OK = "ok"
    FAILED = "failed"
    INDETERMINATE = "indeterminate"  # Shape not recognized, never treated as success


class RouteKind(_TagEnum):
    """Outcome of routing an inbound message."""

    ROUTED = "routed"
    SYSTEM = "system"
    UNKNOWN = "unknown"
