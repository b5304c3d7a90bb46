"""Explicit result values returned by auth operations.

Auth operations never raise for per-message outcomes. Building a message
yields ``AuthMessage``, ``NO_MESSAGE`` or ``AuthBuildFailure``; classifying
an acknowledgement yields ``AuthResult``; pre-auth endpoint selection
yields ``PreAuthResult``. The session driver branches on these values.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Final

from ..core.enums import AuthStatus
from ..core.types import AuthResponseMeta

AUTH_FAILED: Final = "auth_failed"
AUTH_INDETERMINATE: Final = "auth_indeterminate"


@dataclass(frozen=True)
class AuthMessage:
    """Auth message ready for the transport."""

    message: dict[str, Any]


class _NoMessage:
    """Marker: the pattern sends no separate auth message."""

    _instance: _NoMessage | None = None

    def __new__(cls) -> _NoMessage:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_MESSAGE"

    def __bool__(self) -> bool:
        return False


NO_MESSAGE: Final = _NoMessage()


@dataclass(frozen=True)
class AuthBuildFailure:
    """An auth message could not be built (e.g. ``passphrase_required``)."""

    reason: str
    detail: Any = None


AuthBuildResult = AuthMessage | _NoMessage | AuthBuildFailure


@dataclass(frozen=True)
class AuthResult:
    """Classification of an auth acknowledgement.

    Attributes:
        status: ok, failed or indeterminate
        detail: Rejection message or raw response for diagnostics
        meta: Hints from the acknowledgement (e.g. session TTL)
    """

    status: AuthStatus
    detail: Any = None
    meta: AuthResponseMeta | None = None

    @classmethod
    def success(cls, meta: AuthResponseMeta | None = None) -> AuthResult:
        return cls(AuthStatus.OK, meta=meta)

    @classmethod
    def failure(cls, detail: Any) -> AuthResult:
        return cls(AuthStatus.FAILED, detail=detail)

    @classmethod
    def indeterminate(cls, response: Any) -> AuthResult:
        return cls(AuthStatus.INDETERMINATE, detail=response)

    @property
    def ok(self) -> bool:
        return self.status == AuthStatus.OK

    @property
    def error(self) -> tuple[str, Any] | None:
        """Tagged error, e.g. ``("auth_failed", "invalid signature")``; None on success."""
        if self.status == AuthStatus.FAILED:
            return (AUTH_FAILED, self.detail)
        if self.status == AuthStatus.INDETERMINATE:
            return (AUTH_INDETERMINATE, self.detail)
        return None


@dataclass(frozen=True)
class PreAuthResult:
    """Outcome of pre-auth endpoint selection.

    Attributes:
        ok: Whether the driver can proceed
        data: Endpoint description for the REST call (empty when none needed)
        reason: Failure tag (e.g. ``no_token_endpoint``)
        detail: Failure context
    """

    ok: bool
    data: Mapping[str, Any] = field(default_factory=dict)
    reason: str | None = None
    detail: Any = None
