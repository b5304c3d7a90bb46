"""JSON-RPC client-signature auth (Deribit).

Signature is HMAC-SHA256 hex over ``f"{timestamp}\\n{nonce}\\n"`` (empty data
part). A successful response carries ``result.access_token`` and usually
``result.expires_in`` seconds, reported back as a TTL hint.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ...core.credentials import Credentials
from ...core.enums import AuthPattern
from ...core.ids import next_request_id
from ...core.types import AuthConfig, AuthResponseMeta
from ...signing import hmac_hex, timestamp_ms
from ..base import AuthStrategy, Options
from ..results import AuthBuildResult, AuthMessage, AuthResult

MS_PER_SECOND = 1_000


def parse_expires_in(seconds: Any) -> int | None:
    """Convert ``expires_in`` seconds (int or integer string) to milliseconds."""
    if isinstance(seconds, bool):
        return None
    if isinstance(seconds, int):
        return seconds * MS_PER_SECOND
    if isinstance(seconds, str):
        try:
            return int(seconds.strip()) * MS_PER_SECOND
        except ValueError:
            return None
    return None


class JsonRpcLinebreak(AuthStrategy):
    pattern = AuthPattern.JSONRPC_LINEBREAK

    def build_auth_message(
        self,
        credentials: Credentials,
        config: AuthConfig,
        options: Options,
    ) -> AuthBuildResult:
        timestamp = timestamp_ms()
        nonce = options.get("nonce")
        nonce = str(timestamp if nonce is None else nonce)
        signature = hmac_hex(credentials.secret, f"{timestamp}\n{nonce}\n")
        request_id = options.get("request_id")
        return AuthMessage(
            {
                "jsonrpc": "2.0",
                "id": next_request_id() if request_id is None else request_id,
                "method": config.method_value or "public/auth",
                "params": {
                    "grant_type": "client_signature",
                    "client_id": credentials.api_key,
                    "timestamp": timestamp,
                    "signature": signature,
                    "nonce": nonce,
                    "data": "",
                },
            }
        )

    def handle_auth_response(self, response: Any, config: AuthConfig) -> AuthResult:
        if not isinstance(response, Mapping):
            return AuthResult.indeterminate(response)

        result = response.get("result")
        if isinstance(result, Mapping) and result.get("access_token"):
            ttl_ms = parse_expires_in(result.get("expires_in"))
            if ttl_ms is not None and ttl_ms > 0:
                return AuthResult.success(AuthResponseMeta(ttl_ms=ttl_ms, pattern=self.pattern))
            return AuthResult.success()

        if response.get("error"):
            return AuthResult.failure(response["error"])
        return AuthResult.indeterminate(dict(response))
