"""Laakhay Protocol - Exchange stream protocol adaptation core."""

from .auth import (
    NO_MESSAGE,
    AuthBuildFailure,
    AuthMessage,
    AuthResult,
    PreAuthResult,
    build_auth_message,
    build_subscribe_auth,
    compute_ttl_ms,
    handle_auth_response,
    pre_auth,
    requires_pre_auth,
    schedule_delay_ms,
)
from .core import (
    ArgsFormat,
    AuthConfig,
    AuthPattern,
    AuthResponseMeta,
    AuthStatus,
    ChannelRequest,
    ChannelTemplate,
    CoercionKind,
    ConfigurationError,
    Credentials,
    MarketIdFormat,
    ParseInstruction,
    PatternConfig,
    PreAuthConfig,
    PreAuthEndpoint,
    ProtocolError,
    RouteKind,
    SubscriptionPattern,
    SymbolContext,
    TemplateParam,
    ValidationError,
)
from .exchanges import ExchangeProfile, ProfileRegistry, get_profile, get_profile_registry, resolve_url
from .parsing import compile_mapping, parse, parse_many
from .routing import Envelope, RoutedMessage, route
from .subscription import (
    build_restore_message,
    build_subscribe,
    build_unsubscribe,
    format_channel,
)

__version__ = "0.1.0"

__all__ = [
    # Subscription
    "build_subscribe",
    "build_unsubscribe",
    "build_restore_message",
    "format_channel",
    # Auth
    "build_auth_message",
    "build_subscribe_auth",
    "handle_auth_response",
    "pre_auth",
    "requires_pre_auth",
    "compute_ttl_ms",
    "schedule_delay_ms",
    "AuthMessage",
    "AuthBuildFailure",
    "AuthResult",
    "PreAuthResult",
    "NO_MESSAGE",
    # Parsing and routing
    "parse",
    "parse_many",
    "compile_mapping",
    "route",
    "Envelope",
    "RoutedMessage",
    # Exchanges
    "ExchangeProfile",
    "ProfileRegistry",
    "get_profile",
    "get_profile_registry",
    "resolve_url",
    # Core types
    "ArgsFormat",
    "AuthConfig",
    "AuthPattern",
    "AuthResponseMeta",
    "AuthStatus",
    "ChannelRequest",
    "ChannelTemplate",
    "CoercionKind",
    "Credentials",
    "MarketIdFormat",
    "ParseInstruction",
    "PatternConfig",
    "PreAuthConfig",
    "PreAuthEndpoint",
    "RouteKind",
    "SubscriptionPattern",
    "SymbolContext",
    "TemplateParam",
    # Exceptions
    "ProtocolError",
    "ConfigurationError",
    "ValidationError",
]
