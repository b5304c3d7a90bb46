"""REST-issued token auth (Kraken).

A token fetched over REST is carried in each subscribe message as
``{"token": ...}``.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ...core.credentials import Credentials
from ...core.enums import AuthPattern
from ...core.types import AuthConfig
from ..base import NoMessageStrategy
from ..results import PreAuthResult


class RestToken(NoMessageStrategy):
    pattern = AuthPattern.REST_TOKEN
    requires_pre_auth = True

    def build_subscribe_auth(
        self,
        credentials: Credentials,
        config: AuthConfig,
        channel: str,
        symbols: Sequence[str],
    ) -> dict[str, Any] | None:
        if config.token:
            return {"token": config.token}
        return None

    def pre_auth(
        self,
        credentials: Credentials,
        config: AuthConfig,
        market_type: str | None = None,
    ) -> PreAuthResult:
        endpoint = config.pre_auth.endpoint if config.pre_auth is not None else None
        if endpoint:
            return PreAuthResult(ok=True, data={"endpoint": endpoint})
        return PreAuthResult(ok=False, reason="no_token_endpoint")
