"""Unit tests for subscription dispatch, channel formatting and restore."""

import pytest

from laakhay.protocol.core import ChannelRequest, ChannelTemplate, ConfigurationError, TemplateParam
from laakhay.protocol.subscription import (
    apply_template_params,
    build_channel,
    build_restore_message,
    build_subscribe,
    collect_channels,
    format_channel,
    get_strategy,
)


def test_unknown_pattern_raises():
    """Test that an unknown pattern tag fails instead of falling back."""
    with pytest.raises(ConfigurationError) as exc_info:
        get_strategy("carrier_pigeon")

    assert exc_info.value.field == "subscription_pattern"
    assert exc_info.value.value == "carrier_pigeon"


def test_pattern_tag_with_colon():
    """Test that a leading colon on a tag is tolerated."""
    assert get_strategy(":op_subscribe") is get_strategy("op_subscribe")


def test_config_from_mapping():
    """Test passing the pattern config as a plain mapping."""
    assert build_subscribe(["x"], "op_subscribe", {"op_field": "cmd"}) == {"cmd": "subscribe", "args": ["x"]}


def test_config_mapping_with_unknown_key_raises():
    """Test that bad config mappings fail at build time."""
    with pytest.raises(ConfigurationError):
        build_subscribe(["x"], "op_subscribe", {"opfield": "cmd"})


class TestBuildChannel:
    """Test token helpers."""

    def test_drops_absent_parts(self):
        """Test that None and empty parts are skipped."""
        assert build_channel(["ticker", None, "", "BTCUSDT"], ".") == "ticker.BTCUSDT"

    def test_template_params_defaults_and_overrides(self):
        """Test that runtime values override defaults and positional names are skipped."""
        params = (
            TemplateParam("interval", "100ms"),
            TemplateParam("depth", None),
            TemplateParam("symbol", "ignored"),
        )

        assert apply_template_params(["ticker"], params) == ["ticker", "100ms"]
        assert apply_template_params(["ticker"], params, {"interval": "raw"}) == ["ticker", "raw"]

    def test_no_template_params(self):
        """Test that parts pass through without params."""
        assert apply_template_params(["a"], ()) == ["a"]


class TestFormatChannel:
    """Test format_channel dispatch."""

    def test_template_params_appended(self):
        """Test Deribit-style interval suffix."""
        template = ChannelTemplate("ticker", params=(TemplateParam("interval", "100ms"),))
        request = ChannelRequest("ticker", symbol="BTC/USD", params={})

        assert format_channel(template, request, "jsonrpc", {"market_id_format": "dashed"}) == "ticker.BTC-USD.100ms"

    def test_template_separator_override(self):
        """Test that a template separator wins over the config."""
        template = ChannelTemplate("trade", separator="_")
        request = ChannelRequest("trade", symbol="BTC/USDT")

        assert format_channel(template, request, "op_subscribe", {"separator": "."}) == "trade_BTCUSDT"

    def test_object_channels_ignore_params(self):
        """Test that structured channels are returned as built."""
        template = ChannelTemplate("tickers", params=(TemplateParam("interval", "1s"),))
        request = ChannelRequest("tickers", symbol="BTC/USDT")

        assert format_channel(template, request, "op_subscribe_objects") == {"channel": "tickers", "instId": "BTCUSDT"}


class TestRestore:
    """Test restore message building."""

    def test_collect_channels_unique_in_order(self):
        """Test that tokens are de-duplicated in first-seen order."""
        subscriptions = [
            {"channel": "a"},
            {"channel": ["b", "a"]},
            {"channel": None},
            {"other": 1},
            {"channel": "c"},
        ]

        assert collect_channels(subscriptions) == ["a", "b", "c"]

    def test_restore_builds_one_message(self):
        """Test a bulk subscribe for previous subscriptions."""
        message = build_restore_message([{"channel": "tickers.BTCUSDT"}, {"channel": "orderbook.50.BTCUSDT"}], "op_subscribe")

        assert message == {"op": "subscribe", "args": ["tickers.BTCUSDT", "orderbook.50.BTCUSDT"]}

    def test_restore_nothing(self):
        """Test that no subscriptions means no message."""
        assert build_restore_message([], "op_subscribe") is None
        assert build_restore_message([{"channel": None}], "op_subscribe") is None
