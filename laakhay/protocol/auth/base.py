"""Base auth strategy and shared response classification.

Architecture:
    Each auth pattern subclasses ``AuthStrategy`` and implements
    ``build_auth_message``. Patterns with an in-band handshake also override
    ``handle_auth_response`` with their own success/failure markers; the
    default classifier recognizes the common ``success``/``status`` markers
    only.

Design Decisions:
    - Conservative classification: A response matching no known marker is
      ``indeterminate``, never ``ok``
    - No retained secrets: Strategies read credentials per call and keep
      nothing on the instance
    - Explicit results: Build and classify return values, not exceptions
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any, ClassVar

from ..core.credentials import Credentials
from ..core.enums import AuthPattern
from ..core.types import AuthConfig
from .results import NO_MESSAGE, AuthBuildResult, AuthResult, PreAuthResult

Options = Mapping[str, Any]

FAILURE_DETAIL_KEYS = ("ret_msg", "msg", "message")


def failure_detail(response: Mapping[str, Any]) -> Any:
    """First non-empty error message field, or the raw response."""
    for key in FAILURE_DETAIL_KEYS:
        value = response.get(key)
        if value:
            return value
    return dict(response)


def classify_response(response: Any) -> AuthResult:
    """Classify an acknowledgement by the common markers.

    - ``{"success": true}`` -> ok
    - ``{"event": "auth", "status": "OK"}`` -> ok
    - ``{"success": false, "ret_msg"|"msg"|"message": ...}`` -> failed
    - anything else -> indeterminate
    """
    if not isinstance(response, Mapping):
        return AuthResult.indeterminate(response)
    if response.get("success") is True:
        return AuthResult.success()
    if response.get("event") == "auth" and response.get("status") == "OK":
        return AuthResult.success()
    if response.get("success") is False:
        return AuthResult.failure(failure_detail(response))
    return AuthResult.indeterminate(dict(response))


class AuthStrategy(ABC):
    """Base class for auth handshake strategies."""

    pattern: ClassVar[AuthPattern]
    requires_pre_auth: ClassVar[bool] = False
    inline_auth: ClassVar[bool] = False

    @abstractmethod
    def build_auth_message(
        self,
        credentials: Credentials,
        config: AuthConfig,
        options: Options,
    ) -> AuthBuildResult:
        """Build the auth message sent after the connection opens."""
        ...

    def build_subscribe_auth(
        self,
        credentials: Credentials,
        config: AuthConfig,
        channel: str,
        symbols: Sequence[str],
    ) -> dict[str, Any] | None:
        """Auth fields merged into a subscribe message (None when not applicable)."""
        return None

    def handle_auth_response(self, response: Any, config: AuthConfig) -> AuthResult:
        return classify_response(response)

    def pre_auth(
        self,
        credentials: Credentials,
        config: AuthConfig,
        market_type: str | None = None,
    ) -> PreAuthResult:
        """Select the out-of-band auth step; most patterns need none."""
        return PreAuthResult(ok=True)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(pattern={self.pattern.value!r})"


class NoMessageStrategy(AuthStrategy):
    """Pattern without an in-band auth exchange.

    Authentication happened out of band or travels inside the subscribe
    message; acknowledgements still go through the common classifier.
    """

    def build_auth_message(
        self,
        credentials: Credentials,
        config: AuthConfig,
        options: Options,
    ) -> AuthBuildResult:
        return NO_MESSAGE
