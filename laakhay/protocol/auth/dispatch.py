"""Pattern dispatch for auth handshakes.

Architecture:
    Auth strategies are registered once in a closed table keyed by
    ``AuthPattern``. The session driver calls these functions once per
    (re)connection; every call returns an explicit result value.

Lifecycle (driven by the session, outside this package):
    1. ``requires_pre_auth`` -> ``pre_auth`` selects a REST endpoint
    2. ``build_auth_message`` -> send unless ``NO_MESSAGE``
    3. ``handle_auth_response`` on the acknowledgement
    4. ``compute_ttl_ms``/``schedule_delay_ms`` for the re-auth timer
    5. ``build_subscribe_auth`` when subscribing (inline/token patterns)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from ..core.credentials import Credentials
from ..core.enums import AuthPattern, AuthStatus
from ..core.exceptions import ConfigurationError
from ..core.types import AuthConfig
from .base import AuthStrategy
from .patterns import (
    DirectHmacExpiry,
    InlineSubscribe,
    IsoPassphrase,
    JsonRpcLinebreak,
    ListenKey,
    RestToken,
    Sha384Nonce,
    Sha512Newline,
)
from .results import AuthBuildResult, AuthResult, PreAuthResult

logger = logging.getLogger(__name__)

_STRATEGIES: dict[AuthPattern, AuthStrategy] = {
    strategy.pattern: strategy
    for strategy in (
        DirectHmacExpiry(),
        IsoPassphrase(),
        JsonRpcLinebreak(),
        Sha384Nonce(),
        Sha512Newline(),
        ListenKey(),
        RestToken(),
        InlineSubscribe(),
    )
}


def patterns() -> list[AuthPattern]:
    """Return all supported auth patterns."""
    return list(_STRATEGIES)


def get_strategy(pattern: AuthPattern | str) -> AuthStrategy:
    """Look up the strategy for a pattern tag.

    Raises:
        ConfigurationError: If the tag names no known pattern
    """
    try:
        key = AuthPattern.parse(pattern)
    except ValueError as e:
        raise ConfigurationError(
            f"Unknown auth pattern '{pattern}'. Valid patterns: {[p.value for p in _STRATEGIES]}",
            field="pattern",
            value=pattern,
        ) from e
    return _STRATEGIES[key]


def _as_config(pattern: AuthPattern | str, config: AuthConfig | Mapping[str, Any] | None) -> AuthConfig:
    if not isinstance(config, AuthConfig):
        data = dict(config or {})
        data.setdefault("pattern", pattern)
        config = AuthConfig.from_mapping(data)
    if config.pattern != get_strategy(pattern).pattern:
        raise ConfigurationError(
            f"Auth config is for pattern '{config.pattern}', not '{pattern}'",
            field="pattern",
            value=config.pattern,
        )
    return config


def _as_credentials(credentials: Credentials | Mapping[str, Any]) -> Credentials:
    if isinstance(credentials, Credentials):
        return credentials
    return Credentials.model_validate(credentials)


def requires_pre_auth(pattern: AuthPattern | str) -> bool:
    """Whether the pattern authenticates out of band (REST) first."""
    return get_strategy(pattern).requires_pre_auth


def inline_auth(pattern: AuthPattern | str) -> bool:
    """Whether auth fields travel inside the subscribe message."""
    return get_strategy(pattern).inline_auth


def build_auth_message(
    pattern: AuthPattern | str,
    credentials: Credentials | Mapping[str, Any],
    config: AuthConfig | Mapping[str, Any] | None = None,
    options: Mapping[str, Any] | None = None,
) -> AuthBuildResult:
    """Build the auth message for a pattern.

    Args:
        pattern: Auth pattern tag
        credentials: API credentials
        config: Auth configuration
        options: Per-call options (``nonce``, ``request_id``)

    Returns:
        ``AuthMessage``, ``NO_MESSAGE``, or ``AuthBuildFailure``
    """
    return get_strategy(pattern).build_auth_message(
        _as_credentials(credentials),
        _as_config(pattern, config),
        options or {},
    )


def build_subscribe_auth(
    pattern: AuthPattern | str,
    credentials: Credentials | Mapping[str, Any],
    config: AuthConfig | Mapping[str, Any] | None,
    channel: str,
    symbols: Sequence[str] = (),
) -> dict[str, Any] | None:
    """Auth fields to merge into a subscribe message, or None."""
    return get_strategy(pattern).build_subscribe_auth(
        _as_credentials(credentials),
        _as_config(pattern, config),
        channel,
        list(symbols),
    )


def handle_auth_response(
    pattern: AuthPattern | str,
    response: Any,
    config: AuthConfig | Mapping[str, Any] | None = None,
) -> AuthResult:
    """Classify an auth acknowledgement.

    Returns:
        ``AuthResult``; unrecognized shapes are ``indeterminate``, never ok
    """
    result = get_strategy(pattern).handle_auth_response(response, _as_config(pattern, config))
    if result.status == AuthStatus.INDETERMINATE:
        logger.debug(
            "auth_response_unrecognized",
            extra={"pattern": str(AuthPattern.parse(pattern))},
        )
    return result


def pre_auth(
    pattern: AuthPattern | str,
    credentials: Credentials | Mapping[str, Any],
    config: AuthConfig | Mapping[str, Any] | None = None,
    *,
    market_type: str | None = None,
) -> PreAuthResult:
    """Select the out-of-band auth step for a pattern.

    No REST call is made; the result describes the endpoint the session
    driver should call.
    """
    return get_strategy(pattern).pre_auth(
        _as_credentials(credentials),
        _as_config(pattern, config),
        market_type,
    )
