"""Passphrase login (OKX, Bitget).

Message: ``{"op": "login", "args": [{apiKey, passphrase, timestamp, sign}]}``
where ``sign`` is base64 HMAC-SHA256 over ``timestamp + "GET" + path``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ...core.credentials import Credentials
from ...core.enums import AuthPattern, TimestampUnit
from ...core.types import AuthConfig
from ...signing import hmac_base64, timestamp_ms, timestamp_seconds
from ..base import AuthStrategy, Options
from ..results import AuthBuildFailure, AuthBuildResult, AuthMessage, AuthResult

VERIFY_METHOD = "GET"
VERIFY_PATH = "/users/self/verify"


class IsoPassphrase(AuthStrategy):
    pattern = AuthPattern.ISO_PASSPHRASE

    def build_auth_message(
        self,
        credentials: Credentials,
        config: AuthConfig,
        options: Options,
    ) -> AuthBuildResult:
        if credentials.password is None:
            return AuthBuildFailure("passphrase_required")

        if config.timestamp_unit == TimestampUnit.MILLISECONDS:
            timestamp = str(timestamp_ms())
        else:
            timestamp = str(timestamp_seconds())

        signature = hmac_base64(credentials.secret, timestamp + VERIFY_METHOD + VERIFY_PATH)
        return AuthMessage(
            {
                config.op_field or "op": config.op_value or "login",
                "args": [
                    {
                        "apiKey": credentials.api_key,
                        "passphrase": credentials.password,
                        "timestamp": timestamp,
                        "sign": signature,
                    }
                ],
            }
        )

    def handle_auth_response(self, response: Any, config: AuthConfig) -> AuthResult:
        if not isinstance(response, Mapping):
            return AuthResult.indeterminate(response)
        if response.get("event") == "login" and response.get("code") == "0":
            return AuthResult.success()
        if response.get("event") == "error":
            return AuthResult.failure(response.get("msg") or dict(response))
        if response.get("event") == "login" and response.get("code") not in (None, "0"):
            return AuthResult.failure(response.get("msg") or dict(response))
        return AuthResult.indeterminate(dict(response))
