"""Market-id encoding for channel tokens.

Converts unified symbols (``BTC/USDT``, ``BTC/USDT:USDT``) into the market
ids an exchange expects inside a channel token.

Architecture:
    Encoding is delegated through the ``MarketIdEncoder`` protocol so a
    session driver can plug in a full symbol table (e.g. one built from the
    exchange's market listing). ``DefaultMarketIdEncoder`` covers the common
    case: consult an optional ``SymbolContext`` first, then derive the id
    from the unified symbol text.

Design Decisions:
    - Protocol over inheritance: Any object with ``encode`` can be used
    - Context lookup first: Exchange-native ids (``tBTCUSD``, ``XBT/USD``)
      cannot be derived from the unified symbol
    - Absent symbol encodes to ``""`` so callers can drop the part

See Also:
    - subscription.base: Channel formatting that calls the encoder
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol

from .enums import MarketIdFormat


@dataclass(frozen=True)
class SymbolContext:
    """Symbol table mapping unified symbols to exchange market ids.

    Attributes:
        markets: Unified symbol -> exchange market id (e.g. "BTC/USD" -> "tBTCUSD")
    """

    markets: Mapping[str, str] = field(default_factory=dict)

    def lookup(self, symbol: str) -> str | None:
        """Return the exchange market id for a symbol, if known."""
        market_id = self.markets.get(symbol)
        if market_id is None:
            # Case-insensitive fallback, symbols are stored as listed by the exchange
            upper = symbol.upper()
            for key, value in self.markets.items():
                if key.upper() == upper:
                    return value
        return market_id


class MarketIdEncoder(Protocol):
    """Protocol for symbol-to-market-id encoders."""

    def encode(
        self,
        symbol: str | None,
        market_id_format: MarketIdFormat | str | None = None,
        context: SymbolContext | None = None,
    ) -> str:
        """Encode a unified symbol as an exchange market id.

        Args:
            symbol: Unified symbol (e.g. "BTC/USDT")
            market_id_format: Format tag (native, lowercase, ...)
            context: Optional symbol table consulted before derivation

        Returns:
            Market id, or "" when symbol is None
        """
        ...


def _strip_settle(symbol: str) -> str:
    # "BTC/USDT:USDT" -> "BTC/USDT"
    return symbol.split(":", 1)[0]


class DefaultMarketIdEncoder:
    """Encoder deriving market ids from the unified symbol text.

    Examples for ``BTC/USDT``:
        native -> "BTCUSDT", lowercase -> "btcusdt", uppercase -> "BTCUSDT",
        dashed -> "BTC-USDT", underscored -> "BTC_USDT"
    """

    def encode(
        self,
        symbol: str | None,
        market_id_format: MarketIdFormat | str | None = None,
        context: SymbolContext | None = None,
    ) -> str:
        if symbol is None:
            return ""

        fmt = MarketIdFormat.parse(market_id_format) if market_id_format is not None else MarketIdFormat.NATIVE

        if context is not None:
            market_id = context.lookup(symbol)
            if market_id is not None:
                # Exchange ids are already separator-correct, only case applies
                if fmt == MarketIdFormat.LOWERCASE:
                    return market_id.lower()
                if fmt == MarketIdFormat.UPPERCASE:
                    return market_id.upper()
                return market_id

        base = _strip_settle(symbol)
        if fmt == MarketIdFormat.DASHED:
            return base.replace("/", "-")
        if fmt == MarketIdFormat.UNDERSCORED:
            return base.replace("/", "_")

        joined = base.replace("/", "")
        if fmt == MarketIdFormat.LOWERCASE:
            return joined.lower()
        if fmt == MarketIdFormat.UPPERCASE:
            return joined.upper()
        return joined


_default_encoder = DefaultMarketIdEncoder()


def format_market_id(
    symbol: str | None,
    market_id_format: MarketIdFormat | str | None = None,
    context: SymbolContext | None = None,
    *,
    encoder: MarketIdEncoder | None = None,
) -> str:
    """Encode a symbol with the given encoder (default encoder if None).

    Examples:
        >>> format_market_id("BTC/USDT", "native")
        'BTCUSDT'
        >>> format_market_id("BTC/USDT", "lowercase")
        'btcusdt'
        >>> format_market_id(None, "native")
        ''
    """
    return (encoder or _default_encoder).encode(symbol, market_id_format, context)
