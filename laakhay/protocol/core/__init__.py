"""Core components."""

from .credentials import Credentials
from .enums import (
    ArgsFormat,
    AuthPattern,
    AuthStatus,
    CoercionKind,
    HashAlgorithm,
    MarketIdFormat,
    RouteKind,
    SignatureEncoding,
    SubscriptionPattern,
    TimestampUnit,
)
from .exceptions import ConfigurationError, ProtocolError, ValidationError
from .ids import RequestIdGenerator, get_id_generator, next_request_id, next_string_id
from .market_id import DefaultMarketIdEncoder, MarketIdEncoder, SymbolContext, format_market_id
from .types import (
    AuthConfig,
    AuthResponseMeta,
    ChannelRequest,
    ChannelTemplate,
    ParseInstruction,
    PatternConfig,
    PreAuthConfig,
    PreAuthEndpoint,
    TemplateParam,
)

__all__ = [
    "Credentials",
    # Enums
    "ArgsFormat",
    "AuthPattern",
    "AuthStatus",
    "CoercionKind",
    "HashAlgorithm",
    "MarketIdFormat",
    "RouteKind",
    "SignatureEncoding",
    "SubscriptionPattern",
    "TimestampUnit",
    # Exceptions
    "ProtocolError",
    "ConfigurationError",
    "ValidationError",
    # Ids
    "RequestIdGenerator",
    "get_id_generator",
    "next_request_id",
    "next_string_id",
    # Market ids
    "MarketIdEncoder",
    "DefaultMarketIdEncoder",
    "SymbolContext",
    "format_market_id",
    # Configuration records
    "AuthConfig",
    "AuthResponseMeta",
    "ChannelRequest",
    "ChannelTemplate",
    "ParseInstruction",
    "PatternConfig",
    "PreAuthConfig",
    "PreAuthEndpoint",
    "TemplateParam",
]
