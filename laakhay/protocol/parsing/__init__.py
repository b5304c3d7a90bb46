"""Response parsing: safe accessors, coercion and unified-field instructions."""

from .coercion import (
    COERCIONS,
    SECONDS_THRESHOLD,
    coerce,
    get_coercion,
    prop,
    safe,
    safe_bool,
    safe_integer,
    safe_integer_product,
    safe_number,
    safe_string,
    safe_timestamp,
)
from .compiler import GENERATABLE_CATEGORIES, compile_mapping, load_analysis, type_to_coercion
from .fields import FIELD_TO_SOURCE, METHOD_SCHEMAS, to_unified_key, underscore
from .parser import parse, parse_many, unified_fields

__all__ = [
    # Coercion
    "COERCIONS",
    "SECONDS_THRESHOLD",
    "coerce",
    "get_coercion",
    "prop",
    "safe",
    "safe_bool",
    "safe_integer",
    "safe_integer_product",
    "safe_number",
    "safe_string",
    "safe_timestamp",
    # Instruction compiler
    "GENERATABLE_CATEGORIES",
    "compile_mapping",
    "load_analysis",
    "type_to_coercion",
    # Field tables
    "FIELD_TO_SOURCE",
    "METHOD_SCHEMAS",
    "to_unified_key",
    "underscore",
    # Parser
    "parse",
    "parse_many",
    "unified_fields",
]
