"""Custom exception hierarchy."""

from __future__ import annotations

from typing import Any


class ProtocolError(Exception):
    """Base exception for all library errors."""

    pass


class ConfigurationError(ProtocolError):
    """Exchange configuration is malformed.

    Raised while configuration records are built (unknown pattern tag,
    missing required field, wrong type). Never raised per message.
    """

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        value: Any = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


class ValidationError(ProtocolError):
    """Payload passed by the caller has the wrong shape."""

    pass
