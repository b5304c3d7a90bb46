"""Unit tests for compiling mapping analysis into parse instructions."""

import json

import pytest

from laakhay.protocol.core import ConfigurationError, ParseInstruction
from laakhay.protocol.parsing import compile_mapping, load_analysis, parse, type_to_coercion

ANALYSIS = {
    "methods": {
        "parseTicker": {
            "exchange_mappings": {
                "binance": {
                    "ask": {"category": "safe_accessor", "fields": ["askPrice"]},
                    "baseVolume": {"category": "resolved_safe_accessor", "fields": ["volume", "v"]},
                    "symbol": {"category": "variable_ref", "raw": "s"},
                    "datetime": {"category": "iso8601"},
                    "vwap": {"category": "literal", "value": None},
                    "notInSchema": {"category": "safe_accessor", "fields": ["x"]},
                    "bid": {"category": "safe_accessor", "fields": []},
                },
                "nothing": {"datetime": {"category": "iso8601"}},
            }
        }
    }
}


@pytest.mark.parametrize(
    ("type_str", "kind"),
    [
        ("integer", "integer"),
        ("number | undefined", "number"),
        ("String", "string"),
        ("boolean", "bool"),
        ("Dict", "value"),
        ("List", "value"),
    ],
)
def test_type_to_coercion(type_str, kind):
    """Test schema type mapping."""
    assert type_to_coercion(type_str).value == kind


def test_compiles_generatable_fields():
    """Test that only direct accessors become instructions."""
    instructions = compile_mapping("binance", "parseTicker", ANALYSIS)

    assert instructions == [
        ParseInstruction("ask", "number", ("askPrice",)),
        ParseInstruction("base_volume", "number", ("volume", "v")),
        ParseInstruction("symbol", "string", ("s",)),
    ]


def test_compiled_instructions_parse():
    """Test compiled instructions against a raw payload."""
    instructions = compile_mapping("binance", "parseTicker", ANALYSIS)

    result = parse({"askPrice": "1.5", "v": "10", "s": "BTCUSDT"}, instructions)

    assert result["ask"] == 1.5
    assert result["baseVolume"] == 10.0
    assert result["symbol"] == "BTCUSDT"


@pytest.mark.parametrize(
    ("exchange_id", "parse_method"),
    [("nothing", "parseTicker"), ("kraken", "parseTicker"), ("binance", "parseOrderBook"), ("binance", "parseOrder")],
)
def test_no_usable_mapping(exchange_id, parse_method):
    """Test absent results."""
    assert compile_mapping(exchange_id, parse_method, ANALYSIS) is None


def test_malformed_analysis():
    """Test non-mapping analysis data."""
    assert compile_mapping("binance", "parseTicker", {"methods": []}) is None


class TestLoadAnalysis:
    """Test reading analysis files."""

    def test_load(self, tmp_path):
        """Test a valid file."""
        path = tmp_path / "analysis.json"
        path.write_text(json.dumps(ANALYSIS), encoding="utf-8")

        assert load_analysis(path) == ANALYSIS

    def test_missing_file(self, tmp_path):
        """Test that a missing file is empty."""
        assert load_analysis(tmp_path / "absent.json") == {}

    def test_invalid_json(self, tmp_path):
        """Test that corrupt files are configuration errors."""
        path = tmp_path / "analysis.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            load_analysis(str(path))
