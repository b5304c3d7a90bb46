"""Signed API login (Gate).

Signature is HMAC-SHA512 hex over ``"api\\n{channel}\\n{req_param_json}\\n{time}"``.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from ...core.credentials import Credentials
from ...core.enums import AuthPattern, HashAlgorithm
from ...core.ids import next_request_id
from ...core.types import AuthConfig
from ...signing import hmac_hex, timestamp_seconds
from ..base import AuthStrategy, Options
from ..results import AuthBuildResult, AuthMessage, AuthResult

LOGIN_EVENT = "api"
DEFAULT_CHANNEL = "spot.login"


class Sha512Newline(AuthStrategy):
    pattern = AuthPattern.SHA512_NEWLINE

    def build_auth_message(
        self,
        credentials: Credentials,
        config: AuthConfig,
        options: Options,
    ) -> AuthBuildResult:
        time = timestamp_seconds()
        request_id = options.get("request_id")
        request_id = str(next_request_id() if request_id is None else request_id)
        channel = config.channel or DEFAULT_CHANNEL
        req_param: dict[str, Any] = {}
        payload = f"{LOGIN_EVENT}\n{channel}\n{json.dumps(req_param)}\n{time}"
        return AuthMessage(
            {
                "id": request_id,
                "time": time,
                "channel": channel,
                "event": LOGIN_EVENT,
                "payload": {
                    "req_id": request_id,
                    "timestamp": str(time),
                    "api_key": credentials.api_key,
                    "signature": hmac_hex(credentials.secret, payload, HashAlgorithm.SHA512),
                    "req_param": req_param,
                },
            }
        )

    def handle_auth_response(self, response: Any, config: AuthConfig) -> AuthResult:
        if not isinstance(response, Mapping):
            return AuthResult.indeterminate(response)
        result = response.get("result")
        if (
            response.get("event") == LOGIN_EVENT
            and isinstance(result, Mapping)
            and result.get("status") == "success"
        ):
            return AuthResult.success()
        if response.get("error"):
            return AuthResult.failure(response["error"])
        return AuthResult.indeterminate(dict(response))
