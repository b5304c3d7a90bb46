"""Unified field tables.

Static schemas for the unified structures the parser targets. Keys are the
unified (camelCase) field names, values are schema type strings. Parse
instructions name fields in snake_case (``base_volume``); ``FIELD_TO_SOURCE``
maps them back to the unified key written into the response
(``baseVolume``).
"""

from __future__ import annotations

import re
from typing import Final

TICKER: Final = {
    "symbol": "String",
    "timestamp": "integer",
    "datetime": "String",
    "high": "number",
    "low": "number",
    "bid": "number",
    "bidVolume": "number",
    "ask": "number",
    "askVolume": "number",
    "vwap": "number",
    "open": "number",
    "close": "number",
    "last": "number",
    "previousClose": "number",
    "change": "number",
    "percentage": "number",
    "average": "number",
    "baseVolume": "number",
    "quoteVolume": "number",
    "markPrice": "number",
    "indexPrice": "number",
    "info": "Dict",
}

TRADE: Final = {
    "id": "String",
    "order": "String",
    "timestamp": "integer",
    "datetime": "String",
    "symbol": "String",
    "type": "String",
    "side": "String",
    "takerOrMaker": "String",
    "price": "number",
    "amount": "number",
    "cost": "number",
    "fee": "Dict",
    "info": "Dict",
}

ORDER: Final = {
    "id": "String",
    "clientOrderId": "String",
    "timestamp": "integer",
    "datetime": "String",
    "lastTradeTimestamp": "integer",
    "lastUpdateTimestamp": "integer",
    "symbol": "String",
    "type": "String",
    "timeInForce": "String",
    "side": "String",
    "price": "number",
    "average": "number",
    "amount": "number",
    "filled": "number",
    "remaining": "number",
    "triggerPrice": "number",
    "stopPrice": "number",
    "takeProfitPrice": "number",
    "stopLossPrice": "number",
    "cost": "number",
    "status": "String",
    "reduceOnly": "boolean",
    "postOnly": "boolean",
    "fee": "Dict",
    "trades": "List",
    "info": "Dict",
}

FUNDING_RATE: Final = {
    "symbol": "String",
    "markPrice": "number",
    "indexPrice": "number",
    "interestRate": "number",
    "estimatedSettlePrice": "number",
    "timestamp": "integer",
    "datetime": "String",
    "fundingRate": "number",
    "fundingTimestamp": "integer",
    "fundingDatetime": "String",
    "nextFundingRate": "number",
    "nextFundingTimestamp": "integer",
    "previousFundingRate": "number",
    "previousFundingTimestamp": "integer",
    "interval": "String",
    "info": "Dict",
}

OPEN_INTEREST: Final = {
    "symbol": "String",
    "openInterestAmount": "number",
    "openInterestValue": "number",
    "baseVolume": "number",
    "quoteVolume": "number",
    "timestamp": "integer",
    "datetime": "String",
    "info": "Dict",
}

POSITION: Final = {
    "id": "String",
    "symbol": "String",
    "timestamp": "integer",
    "datetime": "String",
    "contracts": "number",
    "contractSize": "number",
    "side": "String",
    "notional": "number",
    "leverage": "number",
    "unrealizedPnl": "number",
    "realizedPnl": "number",
    "collateral": "number",
    "entryPrice": "number",
    "markPrice": "number",
    "lastPrice": "number",
    "liquidationPrice": "number",
    "marginMode": "String",
    "hedged": "boolean",
    "maintenanceMargin": "number",
    "maintenanceMarginPercentage": "number",
    "initialMargin": "number",
    "initialMarginPercentage": "number",
    "marginRatio": "number",
    "lastUpdateTimestamp": "integer",
    "stopLossPrice": "number",
    "takeProfitPrice": "number",
    "percentage": "number",
    "info": "Dict",
}

LIQUIDATION: Final = {
    "symbol": "String",
    "timestamp": "integer",
    "datetime": "String",
    "price": "number",
    "baseValue": "number",
    "quoteValue": "number",
    "contracts": "number",
    "contractSize": "number",
    "side": "String",
    "info": "Dict",
}

# Parse method -> unified schema
METHOD_SCHEMAS: Final[dict[str, dict[str, str]]] = {
    "parseTicker": TICKER,
    "parseTrade": TRADE,
    "parseOrder": ORDER,
    "parseFundingRate": FUNDING_RATE,
    "parseOpenInterest": OPEN_INTEREST,
    "parsePosition": POSITION,
    "parseLiquidation": LIQUIDATION,
}

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def underscore(key: str) -> str:
    """``baseVolume`` -> ``base_volume``."""
    return _CAMEL_BOUNDARY.sub("_", key).lower()


# snake_case field -> unified key, only where the two differ
FIELD_TO_SOURCE: Final[dict[str, str]] = {
    underscore(key): key
    for schema in METHOD_SCHEMAS.values()
    for key in schema
    if underscore(key) != key
}


def to_unified_key(field: str) -> str:
    """Unified response key for an instruction field name.

    Examples:
        >>> to_unified_key("base_volume")
        'baseVolume'
        >>> to_unified_key("ask")
        'ask'
    """
    return FIELD_TO_SOURCE.get(field, field)
