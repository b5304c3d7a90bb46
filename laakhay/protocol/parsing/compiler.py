"""Compile mapping-analysis data into parse instructions.

Mapping analysis describes, per parse method and exchange, where each
unified field comes from::

    {"methods": {"parseTicker": {"exchange_mappings": {"binance": {
        "ask": {"category": "safe_accessor", "fields": ["askPrice"]},
        "datetime": {"category": "iso8601"},
    }}}}}

Only categories that read straight from the raw payload produce
instructions; literals, computed and derived values are skipped.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from ..core.enums import CoercionKind
from ..core.exceptions import ConfigurationError
from ..core.types import ParseInstruction
from .fields import METHOD_SCHEMAS, underscore

logger = logging.getLogger(__name__)

GENERATABLE_CATEGORIES: Final = frozenset({"safe_accessor", "resolved_safe_accessor", "variable_ref"})


def type_to_coercion(type_str: str) -> CoercionKind:
    """Map a schema type string to a coercion kind.

    Examples:
        >>> type_to_coercion("number | undefined")
        <CoercionKind.NUMBER: 'number'>
        >>> type_to_coercion("Dict")
        <CoercionKind.VALUE: 'value'>
    """
    if type_str.startswith("integer"):
        return CoercionKind.INTEGER
    if type_str.startswith("number"):
        return CoercionKind.NUMBER
    if type_str.startswith("String"):
        return CoercionKind.STRING
    if type_str.startswith("boolean"):
        return CoercionKind.BOOL
    return CoercionKind.VALUE


def _source_keys(category: str, mapping: Mapping[str, Any]) -> tuple[str, ...]:
    if category == "variable_ref":
        raw = mapping.get("raw")
        return (raw,) if isinstance(raw, str) and raw else ()
    fields = mapping.get("fields")
    if isinstance(fields, list):
        return tuple(field for field in fields if isinstance(field, str))
    return ()


def _compile_field(
    unified_key: str,
    mapping: Any,
    schema: Mapping[str, str],
) -> ParseInstruction | None:
    if not isinstance(mapping, Mapping):
        return None
    category = mapping.get("category")
    if category not in GENERATABLE_CATEGORIES:
        return None
    type_str = schema.get(unified_key)
    if type_str is None:
        return None
    keys = _source_keys(category, mapping)
    if not keys:
        return None
    return ParseInstruction(underscore(unified_key), type_to_coercion(type_str).value, keys)


def compile_mapping(
    exchange_id: str,
    parse_method: str,
    analysis: Mapping[str, Any],
) -> list[ParseInstruction] | None:
    """Compile the instructions for one exchange and parse method.

    Args:
        exchange_id: Exchange identifier (e.g. "binance")
        parse_method: Parse method name (e.g. "parseTicker")
        analysis: Loaded mapping analysis

    Returns:
        Instruction list, or None when there is no usable mapping
    """
    schema = METHOD_SCHEMAS.get(parse_method)
    if schema is None:
        return None

    methods = analysis.get("methods") if isinstance(analysis, Mapping) else None
    method = methods.get(parse_method) if isinstance(methods, Mapping) else None
    mappings = method.get("exchange_mappings") if isinstance(method, Mapping) else None
    fields = mappings.get(exchange_id) if isinstance(mappings, Mapping) else None
    if not isinstance(fields, Mapping):
        return None

    instructions = [
        instruction
        for unified_key, mapping in fields.items()
        if (instruction := _compile_field(unified_key, mapping, schema)) is not None
    ]
    return instructions or None


def load_analysis(path: str | Path) -> dict[str, Any]:
    """Load mapping analysis JSON from disk.

    A missing file yields an empty analysis.

    Raises:
        ConfigurationError: If the file exists but is not valid JSON
    """
    path = Path(path)
    if not path.exists():
        logger.debug("mapping_analysis_missing", extra={"path": str(path)})
        return {}
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Failed to decode mapping analysis {path}: {e}", field="path", value=str(path)) from e
