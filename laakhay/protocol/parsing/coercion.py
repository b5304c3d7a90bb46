"""Safe accessors and value coercion for raw exchange payloads.

Architecture:
    Exchange payloads carry loosely typed values: numbers as strings,
    booleans as ``"true"``/``1``, timestamps in seconds or milliseconds.
    This module narrows them into unified types. Every coercion returns
    ``None`` for values it cannot convert, so a bad field is omitted rather
    than failing the whole response.

Design Decisions:
    - Empty string is missing: ``""`` behaves exactly like an absent key
    - Multi-key fallback: Keys are tried in order, first present value wins
    - Tolerant numbers: ``"42000.5abc"`` parses to ``42000.5``
    - bool is not a number: ``True`` never coerces to ``1``
    - Seconds heuristic: Timestamps below 1e12 are seconds and scaled to ms

Coercion Kinds:
    number, integer, string, string_lower, string_upper, bool, timestamp,
    value (passthrough), list, dict
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable, Mapping, Sequence
from datetime import UTC, datetime
from typing import Any

from ..core.enums import CoercionKind

SECONDS_THRESHOLD = 1e12

_NUMBER_PREFIX = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_INTEGER_FULL = re.compile(r"\s*[+-]?\d+\s*")

_TRUE_STRINGS = frozenset({"true", "1", "yes", "on"})
_FALSE_STRINGS = frozenset({"false", "0", "no", "off"})

Keys = str | Sequence[str]


def prop(data: Any, keys: Keys) -> Any:
    """Return the first present value among ``keys``.

    ``None`` and ``""`` count as missing.

    Args:
        data: Raw response mapping
        keys: One key or keys in priority order

    Returns:
        The value, or None
    """
    if not isinstance(data, Mapping):
        return None
    if isinstance(keys, str):
        keys = (keys,)
    for key in keys:
        value = data.get(key)
        if value is not None and value != "":
            return value
    return None


def to_number(value: Any) -> int | float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        match = _NUMBER_PREFIX.match(value)
        if match is None:
            return None
        number = float(match.group())
        return number if math.isfinite(number) else None
    return None


def to_integer(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return int(value)
    if isinstance(value, str):
        if _INTEGER_FULL.fullmatch(value):
            return int(value)
        number = to_number(value)
        return int(number) if number is not None else None
    return None


def to_string(value: Any) -> str | None:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, int | float):
        return str(value)
    return None


def to_string_lower(value: Any) -> str | None:
    text = to_string(value)
    return text.lower() if text is not None else None


def to_string_upper(value: Any) -> str | None:
    text = to_string(value)
    return text.upper() if text is not None else None


def to_bool(value: Any) -> bool | None:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if value in (0, 1):
            return bool(value)
        return None
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
    return None


def _datetime_ms(value: datetime) -> int:
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return int(value.timestamp() * 1000)


def to_timestamp(value: Any) -> int | None:
    """Normalize to integer milliseconds since epoch.

    Numbers below 1e12 are treated as seconds. ISO-8601 strings and
    ``datetime`` values are accepted; naive datetimes are taken as UTC.
    """
    if isinstance(value, datetime):
        return _datetime_ms(value)

    number: int | float | None
    if isinstance(value, str) and not _NUMBER_PREFIX.fullmatch(value.strip()):
        try:
            return _datetime_ms(datetime.fromisoformat(value.strip()))
        except ValueError:
            number = to_number(value)
    else:
        number = to_number(value)

    if number is None or not math.isfinite(number):
        return None
    if number < SECONDS_THRESHOLD:
        return int(number * 1000)
    return int(number)


def to_list(value: Any) -> list[Any] | None:
    if isinstance(value, list | tuple):
        return list(value)
    return None


def to_dict(value: Any) -> dict[str, Any] | None:
    if isinstance(value, Mapping):
        return dict(value)
    return None


def to_value(value: Any) -> Any:
    return value


COERCIONS: dict[CoercionKind, Callable[[Any], Any]] = {
    CoercionKind.NUMBER: to_number,
    CoercionKind.INTEGER: to_integer,
    CoercionKind.STRING: to_string,
    CoercionKind.STRING_LOWER: to_string_lower,
    CoercionKind.STRING_UPPER: to_string_upper,
    CoercionKind.BOOL: to_bool,
    CoercionKind.TIMESTAMP: to_timestamp,
    CoercionKind.VALUE: to_value,
    CoercionKind.LIST: to_list,
    CoercionKind.DICT: to_dict,
}


def get_coercion(kind: CoercionKind | str) -> Callable[[Any], Any] | None:
    """Coercion function for a kind tag; None for an unrecognized kind."""
    try:
        return COERCIONS[CoercionKind.parse(kind)]
    except ValueError:
        return None


def coerce(kind: CoercionKind | str, value: Any) -> Any:
    """Apply a coercion to one value. Unknown kinds yield None."""
    func = get_coercion(kind)
    if func is None or value is None:
        return None
    return func(value)


def safe(data: Any, keys: Keys, kind: CoercionKind | str, default: Any = None) -> Any:
    """Look up ``keys`` in ``data`` and coerce the first present value.

    Example:
        >>> safe({"askPrice": "42000.5"}, ["ask", "askPrice"], "number")
        42000.5
    """
    result = coerce(kind, prop(data, keys))
    return default if result is None else result


def safe_number(data: Any, keys: Keys, default: Any = None) -> int | float | None:
    return safe(data, keys, CoercionKind.NUMBER, default)


def safe_integer(data: Any, keys: Keys, default: Any = None) -> int | None:
    return safe(data, keys, CoercionKind.INTEGER, default)


def safe_string(data: Any, keys: Keys, default: Any = None) -> str | None:
    return safe(data, keys, CoercionKind.STRING, default)


def safe_bool(data: Any, keys: Keys, default: Any = None) -> bool | None:
    return safe(data, keys, CoercionKind.BOOL, default)


def safe_timestamp(data: Any, keys: Keys, default: Any = None) -> int | None:
    return safe(data, keys, CoercionKind.TIMESTAMP, default)


def safe_integer_product(data: Any, keys: Keys, factor: int | float, default: Any = None) -> int | None:
    """Number scaled by ``factor`` and truncated (e.g. BTC -> satoshi)."""
    number = to_number(prop(data, keys))
    if number is None or not math.isfinite(number * factor):
        return default
    return int(number * factor)
