"""Listen-key auth (Binance).

Authentication is a REST call returning a listen key that is embedded in
the stream URL; no auth message travels on the socket.
"""

from __future__ import annotations

from ...core.credentials import Credentials
from ...core.enums import AuthPattern
from ...core.types import AuthConfig
from ..base import NoMessageStrategy
from ..results import PreAuthResult

# Unified market type -> listen-key endpoint type
MARKET_TYPE_ALIASES = {
    "future": "linear",
    "delivery": "inverse",
    "contract": "linear",
}


def normalize_market_type(market_type: str) -> str:
    key = market_type.lower()
    return MARKET_TYPE_ALIASES.get(key, key)


class ListenKey(NoMessageStrategy):
    pattern = AuthPattern.LISTEN_KEY
    requires_pre_auth = True

    def pre_auth(
        self,
        credentials: Credentials,
        config: AuthConfig,
        market_type: str | None = None,
    ) -> PreAuthResult:
        requested = market_type or "spot"
        normalized = normalize_market_type(requested)
        endpoints = config.pre_auth.endpoints if config.pre_auth is not None else ()

        for endpoint in endpoints:
            if endpoint.market_type == normalized:
                return PreAuthResult(
                    ok=True,
                    data={
                        "endpoint": endpoint.endpoint,
                        "market_type": normalized,
                        "api_section": endpoint.api_section,
                        "method": endpoint.method,
                        "path": endpoint.path,
                    },
                )

        return PreAuthResult(
            ok=False,
            reason="no_endpoint_for_market_type",
            detail={
                "requested": requested,
                "normalized": normalized,
                "available": [endpoint.market_type for endpoint in endpoints],
            },
        )
