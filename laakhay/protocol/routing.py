"""Inbound message routing.

Classifies a decoded stream message into a payload family using an
exchange's envelope description.

Architecture:
    Each exchange wraps stream payloads in its own envelope. An
    ``Envelope`` names where the channel lives (``discriminator_field``) and
    where the payload lives (``data_field``). The channel is resolved
    against a channel -> family table; families map to ``None`` for
    control traffic (pongs, subscription acks, auth replies).

Envelope Shapes:
    | Exchange | Discriminator    | Data          |
    |----------|------------------|---------------|
    | binance  | ``e``            | ``self``      |
    | bybit    | ``topic``        | ``data``      |
    | deribit  | ``params.channel`` | ``params.data`` |
    | okx      | ``arg.channel``  | ``data`` (unwrapped) |
    | gate     | ``channel``      | ``result``    |

Design Decisions:
    - Exact match first, then the longest registered prefix, so
      ``orderbook.50.BTCUSDT`` resolves through ``orderbook``
    - A message with no channel but with ``id`` and ``result`` is a
      request acknowledgement and is reported as system traffic
    - Routing never raises; anything unresolvable is ``unknown``
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .core.enums import RouteKind
from .core.exceptions import ConfigurationError

SELF = "self"


@dataclass(frozen=True)
class Envelope:
    """Where an exchange puts the channel and payload of a stream message."""

    discriminator_field: str
    data_field: str = SELF
    unwrap_list: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.discriminator_field, str) or not self.discriminator_field:
            raise ConfigurationError(
                "discriminator_field must be a non-empty string",
                field="discriminator_field",
                value=self.discriminator_field,
            )
        if not isinstance(self.data_field, str) or not self.data_field:
            raise ConfigurationError(
                "data_field must be a non-empty string", field="data_field", value=self.data_field
            )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Envelope:
        unknown = set(data) - {"discriminator_field", "data_field", "unwrap_list"}
        if unknown:
            raise ConfigurationError(f"Unknown envelope keys: {sorted(unknown)}", field="envelope")
        try:
            return cls(**data)
        except TypeError as e:
            raise ConfigurationError(f"Invalid envelope: {e}", field="envelope") from e


@dataclass(frozen=True)
class RoutedMessage:
    """Outcome of routing one message.

    ``family`` is set only for ``RouteKind.ROUTED``. ``payload`` is the
    extracted data for routed messages and the raw message otherwise.
    """

    kind: RouteKind
    family: str | None
    payload: Any

    @property
    def routed(self) -> bool:
        return self.kind is RouteKind.ROUTED


def get_nested(data: Any, path: str | None) -> Any:
    """Resolve a dot path in nested mappings.

    Examples:
        >>> get_nested({"a": {"b": "value"}}, "a.b")
        'value'
        >>> get_nested({}, "a.b.c") is None
        True
    """
    if path is None:
        return None
    current = data
    for key in path.split("."):
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
    return current


def unwrap_single(data: Any) -> Any:
    """``[item]`` -> ``item``; anything else unchanged."""
    if isinstance(data, list) and len(data) == 1:
        return data[0]
    return data


def extract_channel(raw: Mapping[str, Any], envelope: Envelope) -> str | None:
    channel = get_nested(raw, envelope.discriminator_field)
    return channel if isinstance(channel, str) and channel else None


def extract_data(raw: Mapping[str, Any], envelope: Envelope) -> Any:
    data = raw if envelope.data_field == SELF else get_nested(raw, envelope.data_field)
    return unwrap_single(data) if envelope.unwrap_list else data


_MISSING = object()


def resolve_family(channel: str, channel_families: Mapping[str, str | None]) -> Any:
    """Family for a channel, ``None`` for system channels, ``_MISSING`` if unmapped."""
    if channel in channel_families:
        return channel_families[channel]
    prefixes = [key for key in channel_families if key and channel.startswith(key)]
    if not prefixes:
        return _MISSING
    return channel_families[max(prefixes, key=len)]


def _is_response(raw: Mapping[str, Any]) -> bool:
    return "id" in raw and "result" in raw


def route(
    raw: Any,
    envelope: Envelope | Mapping[str, Any] | None,
    channel_families: Mapping[str, str | None] | None,
) -> RoutedMessage:
    """Route a decoded message to its payload family.

    Args:
        raw: Decoded message
        envelope: Envelope description (record or mapping); None routes
            everything to unknown
        channel_families: Channel name -> family, ``None`` for control
            channels

    Returns:
        RoutedMessage with kind routed, system or unknown
    """
    if envelope is None or not isinstance(raw, Mapping):
        return RoutedMessage(RouteKind.UNKNOWN, None, raw)
    if not isinstance(envelope, Envelope):
        envelope = Envelope.from_mapping(envelope)

    channel = extract_channel(raw, envelope)
    if channel is None:
        kind = RouteKind.SYSTEM if _is_response(raw) else RouteKind.UNKNOWN
        return RoutedMessage(kind, None, raw)

    family = resolve_family(channel, channel_families or {})
    if family is _MISSING:
        return RoutedMessage(RouteKind.UNKNOWN, None, raw)
    if family is None:
        return RoutedMessage(RouteKind.SYSTEM, None, raw)
    return RoutedMessage(RouteKind.ROUTED, family, extract_data(raw, envelope))
