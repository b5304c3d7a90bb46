"""Unit tests for inbound message routing."""

import pytest

from laakhay.protocol.core import ConfigurationError, RouteKind
from laakhay.protocol.routing import Envelope, get_nested, resolve_family, route, unwrap_single

FAMILIES = {
    "tickers": "watch_ticker",
    "orderbook": "watch_order_book",
    "orderbook.500": "watch_deep_book",
    "pong": None,
}
ENVELOPE = Envelope(discriminator_field="topic", data_field="data")


class TestRoute:
    """Test message classification."""

    def test_exact_match(self):
        """Test an exact channel."""
        routed = route({"topic": "tickers", "data": {"a": 1}}, ENVELOPE, FAMILIES)

        assert routed.routed
        assert routed.family == "watch_ticker"
        assert routed.payload == {"a": 1}

    def test_longest_prefix(self):
        """Test that the most specific prefix wins."""
        routed = route({"topic": "orderbook.500.BTCUSDT", "data": {}}, ENVELOPE, FAMILIES)

        assert routed.family == "watch_deep_book"

    def test_system_channel(self):
        """Test control channels carry the raw message."""
        raw = {"topic": "pong", "data": None}

        routed = route(raw, ENVELOPE, FAMILIES)

        assert routed.kind is RouteKind.SYSTEM
        assert routed.family is None
        assert routed.payload is raw

    def test_request_ack(self):
        """Test that id/result replies without a channel are system traffic."""
        assert route({"id": 7, "result": None}, ENVELOPE, FAMILIES).kind is RouteKind.SYSTEM

    @pytest.mark.parametrize(
        "raw",
        [
            {"topic": "liquidation.BTCUSDT", "data": {}},
            {"topic": "", "data": {}},
            {"topic": 5, "data": {}},
            {"data": {}},
            ["tickers"],
            "tickers",
        ],
    )
    def test_unknown(self, raw):
        """Test unresolvable messages."""
        routed = route(raw, ENVELOPE, FAMILIES)

        assert routed.kind is RouteKind.UNKNOWN
        assert routed.payload is raw

    def test_no_envelope(self):
        """Test profiles without an envelope."""
        assert route({"topic": "tickers"}, None, FAMILIES).kind is RouteKind.UNKNOWN

    def test_no_families(self):
        """Test an empty channel table."""
        assert route({"topic": "tickers"}, ENVELOPE, None).kind is RouteKind.UNKNOWN

    def test_nested_discriminator(self):
        """Test dot paths and envelope mappings."""
        envelope = {"discriminator_field": "params.channel", "data_field": "params.data"}
        raw = {"method": "subscription", "params": {"channel": "tickers", "data": {"x": 1}}}

        assert route(raw, envelope, FAMILIES).payload == {"x": 1}

    def test_self_payload_with_unwrap(self):
        """Test unwrap only touches single-element lists."""
        envelope = Envelope(discriminator_field="topic", data_field="data", unwrap_list=True)

        assert route({"topic": "tickers", "data": [1]}, envelope, FAMILIES).payload == 1
        assert route({"topic": "tickers", "data": [1, 2]}, envelope, FAMILIES).payload == [1, 2]


class TestEnvelope:
    """Test envelope validation."""

    def test_defaults(self):
        """Test the whole-message payload default."""
        envelope = Envelope.from_mapping({"discriminator_field": "e"})

        assert envelope.data_field == "self"
        assert envelope.unwrap_list is False

    @pytest.mark.parametrize(
        "data",
        [{"discriminator_field": ""}, {"discriminator_field": "e", "data_field": None}, {"data": "x"}, {}],
    )
    def test_invalid(self, data):
        """Test rejected envelope configurations."""
        with pytest.raises(ConfigurationError):
            Envelope.from_mapping(data)


def test_helpers():
    """Test path lookup, unwrap and family resolution."""
    assert get_nested({"a": {"b": 1}}, "a.b") == 1
    assert get_nested({"a": 1}, "a.b") is None
    assert get_nested({"a": 1}, None) is None
    assert unwrap_single(["x"]) == "x"
    assert unwrap_single("x") == "x"
    assert resolve_family("tickers.BTC", FAMILIES) == "watch_ticker"
    assert resolve_family("pong", FAMILIES) is None
