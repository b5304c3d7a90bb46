"""Structured logging for protocol operations.

Emits snake_case events with context in ``extra``. Only identifiers,
pattern tags and outcomes are logged; credentials and signatures never
are.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_subscription_built(
    *,
    exchange_id: str,
    pattern: str,
    operation: str,
    channel_count: int,
) -> None:
    """Log a subscribe/unsubscribe/restore message build.

    Args:
        exchange_id: Exchange identifier
        pattern: Subscription pattern tag
        operation: "subscribe", "unsubscribe" or "restore"
        channel_count: Number of channel tokens in the message
    """
    logger.debug(
        "subscription_built",
        extra={
            "exchange_id": exchange_id,
            "pattern": pattern,
            "operation": operation,
            "channel_count": channel_count,
        },
    )


def log_auth_outcome(
    *,
    exchange_id: str,
    pattern: str,
    status: str,
    detail: str | None = None,
) -> None:
    """Log the classification of an auth response.

    Failures log at warning, everything else at debug.
    """
    level = logging.WARNING if status == "failed" else logging.DEBUG
    logger.log(
        level,
        "auth_failed" if status == "failed" else "auth_outcome",
        extra={
            "exchange_id": exchange_id,
            "pattern": pattern,
            "status": status,
            "detail": detail,
        },
    )


def log_reauth_scheduled(
    *,
    exchange_id: str,
    pattern: str,
    ttl_ms: int | None,
    delay_ms: int | None,
) -> None:
    logger.info(
        "reauth_scheduled" if delay_ms is not None else "reauth_not_scheduled",
        extra={
            "exchange_id": exchange_id,
            "pattern": pattern,
            "ttl_ms": ttl_ms,
            "delay_ms": delay_ms,
        },
    )


def log_parse_applied(
    *,
    exchange_id: str,
    parse_method: str,
    instruction_count: int,
    fields_added: int,
) -> None:
    logger.debug(
        "parse_applied",
        extra={
            "exchange_id": exchange_id,
            "parse_method": parse_method,
            "instruction_count": instruction_count,
            "fields_added": fields_added,
        },
    )
