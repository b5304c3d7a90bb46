"""Response parser.

Applies parse instructions to a raw response mapping and returns a new
mapping holding every original key plus the unified keys that could be
coerced. Original keys are never removed or overwritten; when a unified
key already exists in the raw payload the raw value is kept.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from ..core.exceptions import ValidationError
from ..core.types import ParseInstruction
from .coercion import coerce, prop
from .fields import to_unified_key

InstructionLike = ParseInstruction | tuple[str, str, Sequence[str]]


def unified_fields(
    data: Mapping[str, Any],
    instructions: Iterable[InstructionLike],
) -> dict[str, Any]:
    """Compute the unified side mapping for one response.

    Instructions whose source keys are all absent, whose value fails
    coercion, or whose coercion kind is unknown contribute nothing.
    """
    side: dict[str, Any] = {}
    for item in instructions:
        instruction = ParseInstruction.coerce(item)
        if not instruction.source_keys:
            continue
        value = coerce(instruction.coercion, prop(data, instruction.source_keys))
        if value is not None:
            side[to_unified_key(instruction.unified_field)] = value
    return side


def parse(data: Any, instructions: Iterable[InstructionLike] | None) -> Any:
    """Add unified fields to a raw response.

    Args:
        data: Raw response mapping
        instructions: Parse instructions (``ParseInstruction`` or tuples)

    Returns:
        New mapping with original and unified keys; ``data`` itself when
        there are no instructions or it is not a mapping

    Example:
        >>> parse({"askPrice": "42000.5"}, [("ask", "number", ["askPrice"])])
        {'askPrice': '42000.5', 'ask': 42000.5}
    """
    if not instructions or not isinstance(data, Mapping):
        return data

    result = dict(data)
    for key, value in unified_fields(data, instructions).items():
        result.setdefault(key, value)
    return result


def parse_many(
    items: Iterable[Any],
    instructions: Iterable[InstructionLike] | None,
) -> list[dict[str, Any]]:
    """Parse a list payload element by element.

    Raises:
        ValidationError: If an element is not a mapping
    """
    instructions = list(instructions or [])
    parsed = []
    for index, item in enumerate(items):
        if not isinstance(item, Mapping):
            raise ValidationError(f"Expected a mapping at index {index}, got {type(item).__name__}")
        parsed.append(parse(item, instructions))
    return parsed
