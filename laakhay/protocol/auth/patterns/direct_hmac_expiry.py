"""Signature/expiry pair auth (Bybit, Bitmex).

Message: ``{"op": "auth", "args": [api_key, expires_ms, signature]}`` where
the signature is HMAC-SHA256 over ``"GET/realtime" + expires_ms``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ...core.credentials import Credentials
from ...core.enums import AuthPattern, AuthStatus, HashAlgorithm
from ...core.types import AuthConfig
from ...signing import sign, timestamp_ms
from ..base import AuthStrategy, Options, classify_response
from ..results import AuthBuildResult, AuthMessage, AuthResult

SIGNATURE_PREFIX = "GET/realtime"


class DirectHmacExpiry(AuthStrategy):
    pattern = AuthPattern.DIRECT_HMAC_EXPIRY

    def build_auth_message(
        self,
        credentials: Credentials,
        config: AuthConfig,
        options: Options,
    ) -> AuthBuildResult:
        expires = timestamp_ms() + config.expires_offset_ms
        signature = sign(
            credentials.secret,
            f"{SIGNATURE_PREFIX}{expires}",
            HashAlgorithm.SHA256,
            config.encoding,
        )
        return AuthMessage(
            {
                config.op_field or "op": config.op_value or "auth",
                "args": [credentials.api_key, expires, signature],
            }
        )

    def handle_auth_response(self, response: Any, config: AuthConfig) -> AuthResult:
        result = classify_response(response)
        if result.status != AuthStatus.INDETERMINATE:
            return result
        # Bybit reports some rejections without a success flag
        ret_msg = response.get("ret_msg") if isinstance(response, Mapping) else None
        if isinstance(ret_msg, str) and "error" in ret_msg.lower():
            return AuthResult.failure(ret_msg)
        return result
