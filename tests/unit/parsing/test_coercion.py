"""Unit tests for safe accessors and coercion."""

from datetime import UTC, datetime

import pytest

from laakhay.protocol.parsing import (
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


class TestProp:
    """Test multi-key lookup."""

    def test_first_present_wins(self):
        """Test priority order."""
        assert prop({"a": 1, "b": 2}, ["a", "b"]) == 1
        assert prop({"b": 2}, ["a", "b"]) == 2

    @pytest.mark.parametrize("missing", [None, ""])
    def test_empty_values_are_missing(self, missing):
        """Test that None and empty string fall through."""
        assert prop({"a": missing, "b": "x"}, ["a", "b"]) == "x"

    def test_single_key(self):
        """Test a plain string key."""
        assert prop({"a": 0}, "a") == 0

    def test_non_mapping(self):
        """Test that non-mapping data yields None."""
        assert prop([1, 2], "a") is None


class TestNumber:
    """Test number coercion."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("42000.5", 42000.5),
            ("42000.5abc", 42000.5),
            (7, 7),
            (1.25, 1.25),
            ("1e3", 1000.0),
            ("-0.5", -0.5),
        ],
    )
    def test_converts(self, raw, expected):
        """Test accepted inputs."""
        assert safe_number({"v": raw}, "v") == expected

    @pytest.mark.parametrize("raw", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_floats_absent(self, raw):
        """Test that NaN and infinities decoded from JSON are omitted."""
        assert safe_number({"v": raw}, "v") is None

    @pytest.mark.parametrize("raw", ["abc", True, False, [1], {"a": 1}])
    def test_rejects(self, raw):
        """Test that unparseable values are absent."""
        assert safe_number({"v": raw}, "v") is None

    def test_default(self):
        """Test the fallback value."""
        assert safe_number({}, "v", 0) == 0


class TestInteger:
    """Test integer coercion."""

    @pytest.mark.parametrize(("raw", "expected"), [("12", 12), (" 12 ", 12), ("12.9", 12), (12.9, 12), (3, 3)])
    def test_converts(self, raw, expected):
        """Test truncation toward zero."""
        assert safe_integer({"v": raw}, "v") == expected

    def test_bool_rejected(self):
        """Test that booleans are not integers."""
        assert safe_integer({"v": True}, "v") is None

    def test_product(self):
        """Test scaled integers."""
        assert safe_integer_product({"v": "1.5"}, "v", 100) == 150
        assert safe_integer_product({}, "v", 100, -1) == -1


class TestStringAndBool:
    """Test string and boolean coercion."""

    def test_strings(self):
        """Test string conversions and case variants."""
        assert safe_string({"v": 5}, "v") == "5"
        assert safe_string({"v": True}, "v") == "true"
        assert coerce("string_lower", "BTC") == "btc"
        assert coerce("string_upper", "btc") == "BTC"
        assert safe_string({"v": {"a": 1}}, "v") is None

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [(True, True), ("true", True), ("1", True), (1, True), ("yes", True), ("FALSE", False), (0, False), ("off", False)],
    )
    def test_bool_encodings(self, raw, expected):
        """Test accepted boolean encodings."""
        assert safe_bool({"v": raw}, "v") is expected

    @pytest.mark.parametrize("raw", [2, "maybe", 1.0])
    def test_bool_rejects(self, raw):
        """Test that other values are absent."""
        assert safe_bool({"v": raw}, "v") is None


class TestTimestamp:
    """Test timestamp normalization."""

    def test_seconds_scaled(self):
        """Test that values below 1e12 are seconds."""
        assert safe_timestamp({"t": 1704067200}, "t") == 1_704_067_200_000

    def test_milliseconds_kept(self):
        """Test millisecond inputs."""
        assert safe_timestamp({"t": "1704067200123"}, "t") == 1_704_067_200_123

    def test_iso_string(self):
        """Test ISO-8601 parsing."""
        assert safe_timestamp({"t": "2024-01-01T00:00:00Z"}, "t") == 1_704_067_200_000

    def test_datetime(self):
        """Test aware and naive datetimes."""
        aware = datetime(2024, 1, 1, tzinfo=UTC)
        assert coerce("timestamp", aware) == 1_704_067_200_000
        assert coerce("timestamp", datetime(2024, 1, 1)) == 1_704_067_200_000

    def test_garbage(self):
        """Test unparseable input."""
        assert safe_timestamp({"t": "yesterday"}, "t") is None


class TestKinds:
    """Test kind lookup."""

    def test_containers(self):
        """Test list and dict coercions."""
        assert coerce("list", (1, 2)) == [1, 2]
        assert coerce("dict", {"a": 1}) == {"a": 1}
        assert coerce("list", "x") is None

    def test_value_passthrough(self):
        """Test the identity coercion."""
        payload = {"nested": [1]}
        assert coerce("value", payload) is payload

    def test_unknown_kind(self):
        """Test that unknown kinds yield nothing."""
        assert get_coercion("decimal128") is None
        assert coerce("decimal128", "1") is None
        assert safe({"v": "1"}, "v", "decimal128", "fallback") == "fallback"

    def test_colon_tag(self):
        """Test colon-prefixed kind tags."""
        assert coerce(":number", "2") == 2.0
