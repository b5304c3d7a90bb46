"""Built-in exchange profiles.

One profile per exchange, covering each subscription and auth pattern at
least once. Values mirror each venue's public stream API; channel
families use the ``watch_*`` names of the unified streaming methods.
"""

from __future__ import annotations

from ..core.enums import ArgsFormat, AuthPattern, MarketIdFormat, SubscriptionPattern
from ..core.types import (
    AuthConfig,
    ChannelTemplate,
    ParseInstruction,
    PatternConfig,
    PreAuthConfig,
    PreAuthEndpoint,
    TemplateParam,
)
from ..routing import Envelope
from .profile import ExchangeProfile

# Unified timeframe -> Bybit interval token
BYBIT_TIMEFRAMES = {
    "1m": "1",
    "3m": "3",
    "5m": "5",
    "15m": "15",
    "30m": "30",
    "1h": "60",
    "2h": "120",
    "4h": "240",
    "6h": "360",
    "12h": "720",
    "1d": "D",
    "1w": "W",
    "1M": "M",
}

BYBIT = ExchangeProfile(
    exchange_id="bybit",
    subscription_pattern=SubscriptionPattern.OP_SUBSCRIBE,
    channel_templates={
        "ticker": ChannelTemplate("tickers"),
        "trades": ChannelTemplate("publicTrade"),
        "order_book": ChannelTemplate("orderbook"),
        "ohlcv": ChannelTemplate("kline"),
        "orders": ChannelTemplate("order"),
        "positions": ChannelTemplate("position"),
        "my_trades": ChannelTemplate("execution"),
        "balance": ChannelTemplate("wallet"),
    },
    timeframes=BYBIT_TIMEFRAMES,
    auth=AuthConfig(pattern=AuthPattern.DIRECT_HMAC_EXPIRY, op_value="auth"),
    urls={
        "public": {
            "spot": "wss://stream.{hostname}/v5/public/spot",
            "linear": "wss://stream.{hostname}/v5/public/linear",
            "inverse": "wss://stream.{hostname}/v5/public/inverse",
        },
        "private": "wss://stream.{hostname}/v5/private",
    },
    test_urls={
        "public": {
            "spot": "wss://stream-testnet.{hostname}/v5/public/spot",
            "linear": "wss://stream-testnet.{hostname}/v5/public/linear",
            "inverse": "wss://stream-testnet.{hostname}/v5/public/inverse",
        },
        "private": "wss://stream-testnet.{hostname}/v5/private",
    },
    hostname="bybit.com",
    envelope=Envelope(discriminator_field="topic", data_field="data"),
    channel_families={
        "tickers": "watch_ticker",
        "publicTrade": "watch_trades",
        "orderbook": "watch_order_book",
        "kline": "watch_ohlcv",
        "order": "watch_orders",
        "position": "watch_positions",
        "execution": "watch_my_trades",
        "wallet": "watch_balance",
        "pong": None,
    },
    parse_instructions={
        "parseTicker": (
            ParseInstruction("symbol", "string", ("symbol",)),
            ParseInstruction("last", "number", ("lastPrice",)),
            ParseInstruction("bid", "number", ("bid1Price",)),
            ParseInstruction("bid_volume", "number", ("bid1Size",)),
            ParseInstruction("ask", "number", ("ask1Price",)),
            ParseInstruction("ask_volume", "number", ("ask1Size",)),
            ParseInstruction("high", "number", ("highPrice24h",)),
            ParseInstruction("low", "number", ("lowPrice24h",)),
            ParseInstruction("previous_close", "number", ("prevPrice24h",)),
            ParseInstruction("base_volume", "number", ("volume24h",)),
            ParseInstruction("quote_volume", "number", ("turnover24h",)),
            ParseInstruction("mark_price", "number", ("markPrice",)),
            ParseInstruction("index_price", "number", ("indexPrice",)),
        ),
        "parseTrade": (
            ParseInstruction("id", "string", ("i", "execId")),
            ParseInstruction("timestamp", "timestamp", ("T", "execTime")),
            ParseInstruction("symbol", "string", ("s", "symbol")),
            ParseInstruction("side", "string_lower", ("S", "side")),
            ParseInstruction("price", "number", ("p", "execPrice")),
            ParseInstruction("amount", "number", ("v", "execQty")),
        ),
        "parseFundingRate": (
            ParseInstruction("symbol", "string", ("symbol",)),
            ParseInstruction("funding_rate", "number", ("fundingRate",)),
            ParseInstruction("next_funding_timestamp", "timestamp", ("nextFundingTime",)),
            ParseInstruction("mark_price", "number", ("markPrice",)),
            ParseInstruction("index_price", "number", ("indexPrice",)),
        ),
    },
)

OKX = ExchangeProfile(
    exchange_id="okx",
    subscription_pattern=SubscriptionPattern.OP_SUBSCRIBE_OBJECTS,
    channel_templates={
        "ticker": ChannelTemplate("tickers"),
        "trades": ChannelTemplate("trades"),
        "order_book": ChannelTemplate("books5"),
        "orders": ChannelTemplate("orders"),
        "positions": ChannelTemplate("positions"),
        "balance": ChannelTemplate("account"),
    },
    auth=AuthConfig(pattern=AuthPattern.ISO_PASSPHRASE, op_value="login"),
    urls={
        "public": "wss://ws.{hostname}:8443/ws/v5/public",
        "private": "wss://ws.{hostname}:8443/ws/v5/private",
        "business": "wss://ws.{hostname}:8443/ws/v5/business",
    },
    test_urls={
        "public": "wss://wspap.{hostname}:8443/ws/v5/public",
        "private": "wss://wspap.{hostname}:8443/ws/v5/private",
        "business": "wss://wspap.{hostname}:8443/ws/v5/business",
    },
    hostname="okx.com",
    envelope=Envelope(discriminator_field="arg.channel", data_field="data", unwrap_list=True),
    channel_families={
        "tickers": "watch_ticker",
        "trades": "watch_trades",
        "books": "watch_order_book",
        "candle": "watch_ohlcv",
        "orders": "watch_orders",
        "positions": "watch_positions",
        "account": "watch_balance",
    },
    parse_instructions={
        "parseTicker": (
            ParseInstruction("symbol", "string", ("instId",)),
            ParseInstruction("timestamp", "timestamp", ("ts",)),
            ParseInstruction("last", "number", ("last",)),
            ParseInstruction("bid", "number", ("bidPx",)),
            ParseInstruction("bid_volume", "number", ("bidSz",)),
            ParseInstruction("ask", "number", ("askPx",)),
            ParseInstruction("ask_volume", "number", ("askSz",)),
            ParseInstruction("open", "number", ("open24h",)),
            ParseInstruction("high", "number", ("high24h",)),
            ParseInstruction("low", "number", ("low24h",)),
            ParseInstruction("base_volume", "number", ("vol24h",)),
            ParseInstruction("quote_volume", "number", ("volCcy24h",)),
        ),
    },
)

_DERIBIT_INTERVAL = (TemplateParam("interval", "100ms"),)

DERIBIT = ExchangeProfile(
    exchange_id="deribit",
    subscription_pattern=SubscriptionPattern.JSONRPC,
    pattern_config=PatternConfig(market_id_format=MarketIdFormat.DASHED),
    channel_templates={
        "ticker": ChannelTemplate("ticker", params=_DERIBIT_INTERVAL),
        "trades": ChannelTemplate("trades", params=_DERIBIT_INTERVAL),
        "order_book": ChannelTemplate("book", params=_DERIBIT_INTERVAL),
        "ohlcv": ChannelTemplate("chart.trades", params=(TemplateParam("resolution", "1"),)),
        "orders": ChannelTemplate("user.orders", params=(TemplateParam("interval", "raw"),)),
        "my_trades": ChannelTemplate("user.trades", params=(TemplateParam("interval", "raw"),)),
    },
    auth=AuthConfig(pattern=AuthPattern.JSONRPC_LINEBREAK, method_value="public/auth"),
    urls={"public": "wss://www.{hostname}/ws/api/v2", "private": "wss://www.{hostname}/ws/api/v2"},
    test_urls={"public": "wss://test.{hostname}/ws/api/v2", "private": "wss://test.{hostname}/ws/api/v2"},
    hostname="deribit.com",
    envelope=Envelope(discriminator_field="params.channel", data_field="params.data"),
    channel_families={
        "ticker": "watch_ticker",
        "trades": "watch_trades",
        "book": "watch_order_book",
        "chart.trades": "watch_ohlcv",
        "user.orders": "watch_orders",
        "user.trades": "watch_my_trades",
        "heartbeat": None,
    },
    parse_instructions={
        "parseTicker": (
            ParseInstruction("symbol", "string", ("instrument_name",)),
            ParseInstruction("timestamp", "timestamp", ("timestamp",)),
            ParseInstruction("last", "number", ("last_price",)),
            ParseInstruction("bid", "number", ("best_bid_price",)),
            ParseInstruction("bid_volume", "number", ("best_bid_amount",)),
            ParseInstruction("ask", "number", ("best_ask_price",)),
            ParseInstruction("ask_volume", "number", ("best_ask_amount",)),
            ParseInstruction("mark_price", "number", ("mark_price",)),
            ParseInstruction("index_price", "number", ("index_price",)),
        ),
    },
)

BINANCE = ExchangeProfile(
    exchange_id="binance",
    subscription_pattern=SubscriptionPattern.METHOD_SUBSCRIBE,
    channel_templates={
        "ticker": ChannelTemplate("ticker"),
        "trades": ChannelTemplate("trade"),
        "agg_trades": ChannelTemplate("aggTrade"),
        "order_book": ChannelTemplate("depth"),
        "mark_price": ChannelTemplate("markPrice"),
    },
    auth=AuthConfig(
        pattern=AuthPattern.LISTEN_KEY,
        pre_auth=PreAuthConfig(
            endpoints=(
                PreAuthEndpoint("spot", "https://api.binance.com/api/v3/userDataStream"),
                PreAuthEndpoint("linear", "https://fapi.binance.com/fapi/v1/listenKey"),
                PreAuthEndpoint("inverse", "https://dapi.binance.com/dapi/v1/listenKey"),
            ),
        ),
        auth_ttl_ms=3_600_000,
    ),
    urls={
        "spot": "wss://stream.binance.com:9443/ws",
        "linear": "wss://fstream.binance.com/ws",
        "inverse": "wss://dstream.binance.com/ws",
    },
    test_urls={
        "spot": "wss://stream.testnet.binance.vision/ws",
        "linear": "wss://stream.binancefuture.com/ws",
        "inverse": "wss://dstream.binancefuture.com/ws",
    },
    envelope=Envelope(discriminator_field="e", data_field="self"),
    channel_families={
        "24hrTicker": "watch_ticker",
        "trade": "watch_trades",
        "aggTrade": "watch_trades",
        "depthUpdate": "watch_order_book",
        "kline": "watch_ohlcv",
        "markPriceUpdate": "watch_funding_rate",
        "forceOrder": "watch_liquidations",
        "executionReport": "watch_orders",
        "ORDER_TRADE_UPDATE": "watch_orders",
        "outboundAccountPosition": "watch_balance",
        "ACCOUNT_UPDATE": "watch_balance",
        "listenKeyExpired": None,
    },
    parse_instructions={
        "parseTicker": (
            ParseInstruction("symbol", "string", ("s", "symbol")),
            ParseInstruction("timestamp", "timestamp", ("E", "closeTime")),
            ParseInstruction("last", "number", ("c", "lastPrice")),
            ParseInstruction("open", "number", ("o", "openPrice")),
            ParseInstruction("high", "number", ("h", "highPrice")),
            ParseInstruction("low", "number", ("l", "lowPrice")),
            ParseInstruction("bid", "number", ("b", "bidPrice")),
            ParseInstruction("ask", "number", ("a", "askPrice")),
            ParseInstruction("change", "number", ("p", "priceChange")),
            ParseInstruction("percentage", "number", ("P", "priceChangePercent")),
            ParseInstruction("vwap", "number", ("w", "weightedAvgPrice")),
            ParseInstruction("base_volume", "number", ("v", "volume")),
            ParseInstruction("quote_volume", "number", ("q", "quoteVolume")),
        ),
        "parseTrade": (
            ParseInstruction("id", "string", ("t", "a", "id")),
            ParseInstruction("timestamp", "timestamp", ("T", "time")),
            ParseInstruction("symbol", "string", ("s",)),
            ParseInstruction("price", "number", ("p", "price")),
            ParseInstruction("amount", "number", ("q", "qty")),
        ),
        "parseLiquidation": (
            ParseInstruction("symbol", "string", ("s",)),
            ParseInstruction("timestamp", "timestamp", ("T",)),
            ParseInstruction("side", "string_lower", ("S",)),
            ParseInstruction("price", "number", ("ap", "p")),
            ParseInstruction("contracts", "number", ("z", "q")),
        ),
    },
)

KRAKEN = ExchangeProfile(
    exchange_id="kraken",
    subscription_pattern=SubscriptionPattern.METHOD_PARAMS,
    channel_templates={
        "ticker": ChannelTemplate("ticker"),
        "trades": ChannelTemplate("trade"),
        "order_book": ChannelTemplate("book"),
        "ohlcv": ChannelTemplate("ohlc"),
        "orders": ChannelTemplate("executions"),
        "balance": ChannelTemplate("balances"),
    },
    auth=AuthConfig(
        pattern=AuthPattern.REST_TOKEN,
        pre_auth=PreAuthConfig(endpoint="https://api.kraken.com/0/private/GetWebSocketsToken"),
        auth_ttl_ms=900_000,
    ),
    urls={"public": "wss://ws.kraken.com/v2", "private": "wss://ws-auth.kraken.com/v2"},
    envelope=Envelope(discriminator_field="channel", data_field="data", unwrap_list=True),
    channel_families={
        "ticker": "watch_ticker",
        "trade": "watch_trades",
        "book": "watch_order_book",
        "ohlc": "watch_ohlcv",
        "executions": "watch_orders",
        "balances": "watch_balance",
        "heartbeat": None,
        "status": None,
    },
)

GATE = ExchangeProfile(
    exchange_id="gate",
    subscription_pattern=SubscriptionPattern.EVENT_SUBSCRIBE,
    pattern_config=PatternConfig(args_format=ArgsFormat.OBJECT_LIST, market_id_format=MarketIdFormat.UNDERSCORED),
    channel_templates={
        "ticker": ChannelTemplate("spot.tickers"),
        "trades": ChannelTemplate("spot.trades"),
        "order_book": ChannelTemplate("spot.order_book"),
        "orders": ChannelTemplate("spot.orders"),
        "balance": ChannelTemplate("spot.balances"),
    },
    auth=AuthConfig(pattern=AuthPattern.SHA512_NEWLINE, channel="spot.login"),
    urls={
        "spot": "wss://api.{hostname}/ws/v4/",
        "futures": {"usdt": "wss://fx-ws.{hostname}/v4/ws/usdt", "btc": "wss://fx-ws.{hostname}/v4/ws/btc"},
    },
    test_urls={"futures": {"usdt": "wss://fx-ws-testnet.{hostname}/v4/ws/usdt"}},
    hostname="gateio.ws",
    envelope=Envelope(discriminator_field="channel", data_field="result"),
    channel_families={
        "spot.tickers": "watch_ticker",
        "spot.trades": "watch_trades",
        "spot.order_book": "watch_order_book",
        "spot.candlesticks": "watch_ohlcv",
        "spot.orders": "watch_orders",
        "spot.balances": "watch_balance",
        "spot.pong": None,
        "spot.login": None,
    },
)

BITFINEX = ExchangeProfile(
    exchange_id="bitfinex",
    subscription_pattern=SubscriptionPattern.EVENT_SUBSCRIBE,
    pattern_config=PatternConfig(args_format=ArgsFormat.STRING),
    channel_templates={
        "ticker": ChannelTemplate("ticker"),
        "trades": ChannelTemplate("trades"),
        "order_book": ChannelTemplate("book"),
    },
    auth=AuthConfig(pattern=AuthPattern.SHA384_NONCE, event_field="event", event_value="auth"),
    urls={"public": "wss://api-pub.{hostname}/ws/2", "private": "wss://api.{hostname}/ws/2"},
    hostname="bitfinex.com",
)

COINBASE = ExchangeProfile(
    exchange_id="coinbase",
    subscription_pattern=SubscriptionPattern.TYPE_SUBSCRIBE,
    pattern_config=PatternConfig(
        args_field="product_ids",
        channels_field="channels",
        channel_name="ticker",
        market_id_format=MarketIdFormat.DASHED,
    ),
    channel_templates={"ticker": ChannelTemplate("ticker")},
    auth=AuthConfig(pattern=AuthPattern.INLINE_SUBSCRIBE),
    urls={"public": "wss://ws-feed.exchange.coinbase.com", "direct": "wss://ws-direct.exchange.coinbase.com"},
    test_urls={"public": "wss://ws-feed-public.sandbox.exchange.coinbase.com"},
    envelope=Envelope(discriminator_field="type", data_field="self"),
    channel_families={
        "ticker": "watch_ticker",
        "match": "watch_trades",
        "l2update": "watch_order_book",
        "snapshot": "watch_order_book",
        "subscriptions": None,
        "heartbeat": None,
    },
    parse_instructions={
        "parseTicker": (
            ParseInstruction("symbol", "string", ("product_id",)),
            ParseInstruction("timestamp", "timestamp", ("time",)),
            ParseInstruction("last", "number", ("price",)),
            ParseInstruction("bid", "number", ("best_bid",)),
            ParseInstruction("ask", "number", ("best_ask",)),
            ParseInstruction("open", "number", ("open_24h",)),
            ParseInstruction("high", "number", ("high_24h",)),
            ParseInstruction("low", "number", ("low_24h",)),
            ParseInstruction("base_volume", "number", ("volume_24h",)),
        ),
    },
)

HTX = ExchangeProfile(
    exchange_id="htx",
    subscription_pattern=SubscriptionPattern.SUB_BASED,
    channel_templates={
        "ticker": ChannelTemplate("detail"),
        "trades": ChannelTemplate("trade.detail"),
        "order_book": ChannelTemplate("depth.step0"),
    },
    urls={"public": "wss://api.{hostname}/ws"},
    hostname="huobi.pro",
)

BINGX = ExchangeProfile(
    exchange_id="bingx",
    subscription_pattern=SubscriptionPattern.REQTYPE_SUB,
    pattern_config=PatternConfig(market_id_format=MarketIdFormat.DASHED),
    channel_templates={
        "ticker": ChannelTemplate("ticker"),
        "trades": ChannelTemplate("trade"),
        "order_book": ChannelTemplate("depth20"),
    },
    urls={"spot": "wss://open-api-ws.{hostname}/market", "swap": "wss://open-api-swap.{hostname}/swap-market"},
    hostname="bingx.com",
)

COINEX = ExchangeProfile(
    exchange_id="coinex",
    subscription_pattern=SubscriptionPattern.METHOD_AS_TOPIC,
    channel_templates={"ticker": ChannelTemplate("state"), "trades": ChannelTemplate("deals")},
    urls={"spot": "wss://socket.{hostname}/v2/spot", "futures": "wss://socket.{hostname}/v2/futures"},
    hostname="coinex.com",
    envelope=Envelope(discriminator_field="method", data_field="data"),
    channel_families={"state.update": "watch_ticker", "deals.update": "watch_trades"},
)

HYPERLIQUID = ExchangeProfile(
    exchange_id="hyperliquid",
    subscription_pattern=SubscriptionPattern.METHOD_SUBSCRIPTION,
    channel_templates={"trades": ChannelTemplate("trades"), "order_book": ChannelTemplate("l2Book")},
    urls={"public": "wss://api.{hostname}/ws"},
    test_urls={"public": "wss://api.hyperliquid-testnet.xyz/ws"},
    hostname="hyperliquid.xyz",
    envelope=Envelope(discriminator_field="channel", data_field="data"),
    channel_families={
        "trades": "watch_trades",
        "l2Book": "watch_order_book",
        "subscriptionResponse": None,
        "pong": None,
    },
)

EXMO = ExchangeProfile(
    exchange_id="exmo",
    subscription_pattern=SubscriptionPattern.METHOD_TOPICS,
    pattern_config=PatternConfig(market_id_format=MarketIdFormat.UNDERSCORED),
    channel_templates={"ticker": ChannelTemplate("spot/ticker"), "trades": ChannelTemplate("spot/trades")},
    urls={"public": "wss://ws-api.{hostname}:443/v1/public", "private": "wss://ws-api.{hostname}:443/v1/private"},
    hostname="exmo.com",
    envelope=Envelope(discriminator_field="topic", data_field="data"),
    channel_families={"spot/ticker": "watch_ticker", "spot/trades": "watch_trades"},
)

ALPACA = ExchangeProfile(
    exchange_id="alpaca",
    subscription_pattern=SubscriptionPattern.ACTION_SUBSCRIBE,
    channel_templates={"trades": ChannelTemplate("trades"), "ticker": ChannelTemplate("quotes")},
    urls={"crypto": "wss://stream.data.alpaca.markets/v1beta3/crypto/us"},
    test_urls={"crypto": "wss://stream.data.sandbox.alpaca.markets/v1beta3/crypto/us"},
    envelope=Envelope(discriminator_field="T", data_field="self"),
    channel_families={"t": "watch_trades", "q": "watch_ticker", "success": None, "subscription": None},
)

UPBIT = ExchangeProfile(
    exchange_id="upbit",
    subscription_pattern=SubscriptionPattern.CUSTOM,
    pattern_config=PatternConfig(custom_type="array_format", market_id_format=MarketIdFormat.DASHED),
    urls={"public": "wss://api.{hostname}/websocket/v1"},
    hostname="upbit.com",
    envelope=Envelope(discriminator_field="type", data_field="self"),
    channel_families={"ticker": "watch_ticker", "trade": "watch_trades", "orderbook": "watch_order_book"},
)

DEEPCOIN = ExchangeProfile(
    exchange_id="deepcoin",
    subscription_pattern=SubscriptionPattern.CUSTOM,
    pattern_config=PatternConfig(custom_type="sendTopicAction"),
    urls={"public": {"spot": "wss://stream.{hostname}/streamlet/trade/public/spot", "swap": "wss://stream.{hostname}/streamlet/trade/public/swap"}},
    hostname="deepcoin.com",
)

BUILTIN_PROFILES: tuple[ExchangeProfile, ...] = (
    BYBIT,
    OKX,
    DERIBIT,
    BINANCE,
    KRAKEN,
    GATE,
    BITFINEX,
    COINBASE,
    HTX,
    BINGX,
    COINEX,
    HYPERLIQUID,
    EXMO,
    ALPACA,
    UPBIT,
    DEEPCOIN,
)
