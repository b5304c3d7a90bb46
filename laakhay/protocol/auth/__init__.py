"""Auth handshake building, response classification and expiry scheduling."""

from .base import AuthStrategy, NoMessageStrategy, classify_response
from .dispatch import (
    build_auth_message,
    build_subscribe_auth,
    get_strategy,
    handle_auth_response,
    inline_auth,
    patterns,
    pre_auth,
    requires_pre_auth,
)
from .expiry import MAX_DELAY_MS, SAFETY_MARGIN, compute_ttl_ms, schedule_delay_ms
from .results import (
    AUTH_FAILED,
    AUTH_INDETERMINATE,
    NO_MESSAGE,
    AuthBuildFailure,
    AuthBuildResult,
    AuthMessage,
    AuthResult,
    PreAuthResult,
)

__all__ = [
    "AuthStrategy",
    "NoMessageStrategy",
    "classify_response",
    "build_auth_message",
    "build_subscribe_auth",
    "get_strategy",
    "handle_auth_response",
    "inline_auth",
    "patterns",
    "pre_auth",
    "requires_pre_auth",
    "MAX_DELAY_MS",
    "SAFETY_MARGIN",
    "compute_ttl_ms",
    "schedule_delay_ms",
    "AUTH_FAILED",
    "AUTH_INDETERMINATE",
    "NO_MESSAGE",
    "AuthBuildFailure",
    "AuthBuildResult",
    "AuthMessage",
    "AuthResult",
    "PreAuthResult",
]
