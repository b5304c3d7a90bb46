"""Unit tests for the subscription message shapes."""

import json

import pytest

from laakhay.protocol.core import ChannelRequest, ChannelTemplate, PatternConfig, SubscriptionPattern
from laakhay.protocol.subscription import build_subscribe, build_unsubscribe, get_strategy, patterns


def render(pattern, channel_name, symbol=None, config=None, **kwargs):
    strategy = get_strategy(pattern)
    request = ChannelRequest(channel_name=channel_name, symbol=symbol, **kwargs)
    return strategy.format_channel(ChannelTemplate(channel_name), request, config or PatternConfig())


def test_all_fourteen_patterns_registered():
    """Test that every pattern tag has a strategy."""
    assert set(patterns()) == set(SubscriptionPattern)
    assert len(patterns()) == 14


@pytest.mark.parametrize("pattern", list(SubscriptionPattern))
def test_messages_are_json_serializable(pattern):
    """Test that every shape can go straight to the wire."""
    message = build_subscribe(["ticker.BTCUSDT"], pattern)

    json.dumps(message)


@pytest.mark.parametrize("pattern", list(SubscriptionPattern))
def test_empty_channel_list_does_not_raise(pattern):
    """Test that empty channel lists degrade to empty or default fields."""
    build_subscribe([], pattern)
    build_unsubscribe([], pattern)


class TestOpSubscribe:
    """Test the op/args shape."""

    def test_subscribe(self):
        """Test the canonical Bybit-style subscribe message."""
        assert build_subscribe(["tickers.BTCUSDT"], "op_subscribe") == {
            "op": "subscribe",
            "args": ["tickers.BTCUSDT"],
        }

    def test_unsubscribe(self):
        """Test the unsubscribe verb."""
        assert build_unsubscribe(["tickers.BTCUSDT"], "op_subscribe") == {
            "op": "unsubscribe",
            "args": ["tickers.BTCUSDT"],
        }

    def test_format_channel_positional_order(self):
        """Test that timeframe, limit then symbol follow the channel name."""
        assert render("op_subscribe", "kline", "BTC/USDT", timeframe="1") == "kline.1.BTCUSDT"
        assert render("op_subscribe", "orderbook", "BTC/USDT", limit=50) == "orderbook.50.BTCUSDT"

    def test_format_channel_without_symbol(self):
        """Test that no separator is emitted without a symbol."""
        assert render("op_subscribe", "tickers") == "tickers"

    def test_config_overrides_fields(self):
        """Test op/args field and separator overrides."""
        config = PatternConfig(op_field="cmd", args_field="topics", separator=":")

        assert build_subscribe(["x"], "op_subscribe", config) == {"cmd": "subscribe", "topics": ["x"]}
        assert render("op_subscribe", "trade", "ETH/USDT", config) == "trade:ETHUSDT"

    def test_purity(self):
        """Test that repeated builds are identical."""
        first = build_subscribe(["a", "b"], "op_subscribe")
        second = build_subscribe(["a", "b"], "op_subscribe")

        assert json.dumps(first) == json.dumps(second)


class TestJsonRpc:
    """Test the JSON-RPC shape."""

    def test_subscribe_shape(self):
        """Test the Deribit-style subscribe request."""
        message = build_subscribe(["ticker.BTC-PERPETUAL"], "jsonrpc")

        assert message["jsonrpc"] == "2.0"
        assert message["method"] == "public/subscribe"
        assert message["params"] == {"channels": ["ticker.BTC-PERPETUAL"]}
        assert isinstance(message["id"], int)
        assert message["id"] > 0

    def test_unsubscribe_method(self):
        """Test the unsubscribe method name."""
        assert build_unsubscribe(["ticker.BTC-PERPETUAL"], "jsonrpc")["method"] == "public/unsubscribe"

    def test_ids_strictly_increase(self):
        """Test that repeated builds differ only by an increasing id."""
        first = build_subscribe(["trades.BTC-PERPETUAL.raw"], "jsonrpc")
        second = build_subscribe(["trades.BTC-PERPETUAL.raw"], "jsonrpc")

        assert second["id"] > first["id"]
        assert {**first, "id": 0} == {**second, "id": 0}


class TestOpSubscribeObjects:
    """Test the OKX object-channel shape."""

    def test_format_channel_object(self):
        """Test that channels are objects with channel and instId."""
        assert render("op_subscribe_objects", "tickers", "BTC/USDT") == {"channel": "tickers", "instId": "BTCUSDT"}

    def test_format_channel_uses_context(self):
        """Test that the exchange's instrument id is looked up."""
        config = PatternConfig(symbol_context={"BTC/USDT": "BTC-USDT"})

        assert render("op_subscribe_objects", "tickers", "BTC/USDT", config) == {
            "channel": "tickers",
            "instId": "BTC-USDT",
        }

    def test_format_channel_without_symbol(self):
        """Test account-level channels without instId."""
        assert render("op_subscribe_objects", "account") == {"channel": "account"}

    def test_subscribe(self):
        """Test objects are passed through as args."""
        channel = {"channel": "tickers", "instId": "BTC-USDT"}

        assert build_subscribe([channel], "op_subscribe_objects") == {"op": "subscribe", "args": [channel]}


class TestMethodAsTopic:
    """Test the method-is-the-channel shape."""

    def test_subscribe(self):
        """Test the method carries the channel."""
        message = build_subscribe(["ticker.subscribe"], "method_as_topic")

        assert message["method"] == "ticker.subscribe"
        assert message["params"] == []
        assert message["id"] > 0

    def test_unsubscribe_rewrites_suffix(self):
        """Test that the subscribe suffix becomes unsubscribe."""
        assert build_unsubscribe(["ticker.subscribe"], "method_as_topic")["method"] == "ticker.unsubscribe"

    def test_empty_channels(self):
        """Test the defaults for empty channel lists."""
        assert build_subscribe([], "method_as_topic")["method"] == "subscribe"
        assert build_unsubscribe([], "method_as_topic")["method"] == ""

    def test_format_channel(self):
        """Test rendered method names."""
        assert render("method_as_topic", "ticker") == "ticker.subscribe"
        assert render("method_as_topic", "ticker", "BTC/USDT") == "ticker.subscribe.BTCUSDT"


class TestSingleChannelShapes:
    """Test shapes that carry one channel per message."""

    def test_method_subscription(self):
        """Test Hyperliquid's typed subscription."""
        assert build_subscribe(["trades", "l2Book"], "method_subscription") == {
            "method": "subscribe",
            "subscription": {"type": "trades"},
        }

    def test_reqtype_sub(self):
        """Test BingX's request-type message."""
        assert build_subscribe(["BTC-USDT@trade"], "reqtype_sub") == {"reqType": "sub", "dataType": "BTC-USDT@trade"}
        assert build_unsubscribe(["BTC-USDT@trade"], "reqtype_sub") == {
            "reqType": "unsub",
            "dataType": "BTC-USDT@trade",
        }

    def test_reqtype_sub_symbol_first(self):
        """Test that the market id precedes the channel name."""
        config = PatternConfig(market_id_format="dashed")

        assert render("reqtype_sub", "trade", "BTC/USDT", config) == "BTC-USDT@trade"

    def test_sub_based(self):
        """Test HTX's sub message with a string id."""
        message = build_subscribe(["market.btcusdt.trade.detail"], "sub_based")

        assert message["sub"] == "market.btcusdt.trade.detail"
        assert isinstance(message["id"], str)
        assert message["id"].startswith("id")

    def test_sub_based_unsubscribe(self):
        """Test HTX's unsub key."""
        message = build_unsubscribe(["market.btcusdt.detail"], "sub_based")

        assert message["unsub"] == "market.btcusdt.detail"
        assert "sub" not in message

    def test_sub_based_format_channel(self):
        """Test the market prefix and lowercase market id."""
        assert render("sub_based", "trade.detail", "BTC/USDT") == "market.btcusdt.trade.detail"


class TestListShapes:
    """Test shapes that carry a channel list."""

    def test_action_subscribe(self):
        """Test the action/params envelope."""
        assert build_subscribe(["trades"], "action_subscribe") == {
            "action": "subscribe",
            "params": {"channels": ["trades"]},
        }

    def test_method_params(self):
        """Test the nested channel list."""
        assert build_subscribe(["ticker"], "method_params") == {
            "method": "subscribe",
            "params": {"channel": ["ticker"]},
        }

    def test_method_topics(self):
        """Test the flat topics array."""
        assert build_subscribe(["spot/ticker:BTC_USD"], "method_topics") == {
            "method": "subscribe",
            "topics": ["spot/ticker:BTC_USD"],
        }

    def test_method_subscribe(self):
        """Test Binance's uppercase verbs."""
        assert build_subscribe(["btcusdt@trade"], "method_subscribe") == {
            "method": "SUBSCRIBE",
            "params": ["btcusdt@trade"],
        }
        assert build_unsubscribe(["btcusdt@trade"], "method_subscribe")["method"] == "UNSUBSCRIBE"

    def test_method_subscribe_format_channel(self):
        """Test lowercase symbol-first stream names."""
        assert render("method_subscribe", "trade", "BTC/USDT") == "btcusdt@trade"


class TestTypeSubscribe:
    """Test the dual type/topic shape."""

    def test_string_topic_default(self):
        """Test that the topic is a single string by default."""
        assert build_subscribe(["ticker:BTC-USDT", "x"], "type_subscribe") == {
            "type": "subscribe",
            "topic": "ticker:BTC-USDT",
        }

    def test_list_topic(self):
        """Test the list layout."""
        config = PatternConfig(args_format="string_list")

        assert build_subscribe(["a", "b"], "type_subscribe", config) == {"type": "subscribe", "topic": ["a", "b"]}

    def test_channels_field_mode(self):
        """Test Coinbase-style product ids with a separate channel list."""
        config = PatternConfig(args_field="product_ids", channels_field="channels", channel_name="ticker")

        assert build_subscribe(["BTC-USD"], "type_subscribe", config) == {
            "type": "subscribe",
            "product_ids": ["BTC-USD"],
            "channels": ["ticker"],
        }

    def test_channels_field_mode_renders_market_id(self):
        """Test that the token is the bare market id."""
        config = PatternConfig(channels_field="channels", market_id_format="dashed")

        assert render("type_subscribe", "ticker", "BTC/USD", config) == "BTC-USD"

    def test_format_channel(self):
        """Test the colon separator."""
        config = PatternConfig(market_id_format="dashed")

        assert render("type_subscribe", "ticker", "BTC/USDT", config) == "ticker:BTC-USDT"


class TestEventSubscribe:
    """Test the event/payload shape."""

    def test_default_list(self):
        """Test that the payload is the channel list by default."""
        assert build_subscribe(["a", "b"], "event_subscribe") == {"event": "subscribe", "payload": ["a", "b"]}

    def test_string_format(self):
        """Test that the string layout sends the first channel."""
        config = PatternConfig(args_format=":string")

        assert build_subscribe(["a", "b"], "event_subscribe", config) == {"event": "subscribe", "payload": "a"}

    def test_format_channel(self):
        """Test positional token rendering."""
        config = PatternConfig(market_id_format="underscored")

        assert render("event_subscribe", "spot.tickers", "BTC/USDT", config) == "spot.tickers.BTC_USDT"


class TestCustom:
    """Test the custom escape hatch."""

    def test_array_format(self):
        """Test one object per channel."""
        config = PatternConfig(custom_type="array_format")

        assert build_subscribe(["KRW-BTC", "KRW-ETH"], "custom", config) == [
            {"type": "ticker", "codes": ["KRW-BTC"]},
            {"type": "ticker", "codes": ["KRW-ETH"]},
        ]

    def test_array_format_unsubscribe(self):
        """Test the realtime-only marker on unsubscribe."""
        config = PatternConfig(custom_type="array_format")

        assert build_unsubscribe(["KRW-BTC"], "custom", config) == [
            {"type": "ticker", "codes": ["KRW-BTC"], "isOnlyRealtime": True}
        ]

    def test_send_topic_action(self):
        """Test the nested action object."""
        config = PatternConfig(custom_type="sendTopicAction")

        assert build_subscribe(["t1"], "custom", config) == {
            "sendTopicAction": {"action": "subscribe", "topics": ["t1"]}
        }

    def test_fallback(self):
        """Test the generic fallback shape."""
        assert build_subscribe(["c"], "custom") == {"subscribe": True, "channels": ["c"]}
        assert build_unsubscribe(["c"], "custom") == {"unsubscribe": True, "channels": ["c"]}
