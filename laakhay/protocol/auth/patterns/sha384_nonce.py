"""Nonce-payload auth (Bitfinex).

The nonce-tagged payload ``"AUTH" + nonce`` is both signed (HMAC-SHA384 hex)
and sent verbatim as ``authPayload``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ...core.credentials import Credentials
from ...core.enums import AuthPattern, HashAlgorithm
from ...core.types import AuthConfig
from ...signing import hmac_hex, timestamp_ms
from ..base import AuthStrategy, Options
from ..results import AuthBuildResult, AuthMessage, AuthResult


class Sha384Nonce(AuthStrategy):
    pattern = AuthPattern.SHA384_NONCE

    def build_auth_message(
        self,
        credentials: Credentials,
        config: AuthConfig,
        options: Options,
    ) -> AuthBuildResult:
        nonce = timestamp_ms()
        payload = f"AUTH{nonce}"
        return AuthMessage(
            {
                config.event_field or "event": config.event_value or "auth",
                "apiKey": credentials.api_key,
                "authSig": hmac_hex(credentials.secret, payload, HashAlgorithm.SHA384),
                "authNonce": nonce,
                "authPayload": payload,
            }
        )

    def handle_auth_response(self, response: Any, config: AuthConfig) -> AuthResult:
        if not isinstance(response, Mapping):
            return AuthResult.indeterminate(response)
        if response.get("event") == "auth":
            if response.get("status") == "OK":
                return AuthResult.success()
            if response.get("status") == "FAILED":
                return AuthResult.failure(response.get("msg") or dict(response))
        return AuthResult.indeterminate(dict(response))
