"""Process-wide exchange profile registry.

Profiles are keyed by lowercase exchange id. The default registry is
created lazily on first access and pre-loaded with the built-in profiles;
tests and embedders can build their own ``ProfileRegistry`` instead.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from ..core.exceptions import ConfigurationError
from .profile import ExchangeProfile

logger = logging.getLogger(__name__)


class ProfileRegistry:
    """Registry of exchange profiles by exchange id."""

    def __init__(self, profiles: Iterable[ExchangeProfile] = ()) -> None:
        self._profiles: dict[str, ExchangeProfile] = {}
        for profile in profiles:
            self.register(profile)

    def register(self, profile: ExchangeProfile | Mapping[str, Any]) -> ExchangeProfile:
        """Register a profile.

        Args:
            profile: Profile record or configuration mapping

        Returns:
            The registered profile

        Raises:
            ConfigurationError: If the exchange id is already registered
        """
        if not isinstance(profile, ExchangeProfile):
            profile = ExchangeProfile.from_mapping(profile)
        if profile.exchange_id in self._profiles:
            raise ConfigurationError(
                f"Exchange '{profile.exchange_id}' is already registered",
                field="exchange_id",
                value=profile.exchange_id,
            )
        self._profiles[profile.exchange_id] = profile
        logger.debug(
            "profile_registered",
            extra={"exchange_id": profile.exchange_id, "pattern": str(profile.subscription_pattern)},
        )
        return profile

    def unregister(self, exchange_id: str) -> None:
        """Remove a profile.

        Raises:
            ConfigurationError: If the exchange id is not registered
        """
        key = exchange_id.lower()
        if key not in self._profiles:
            raise ConfigurationError(f"Exchange '{exchange_id}' is not registered", field="exchange_id", value=exchange_id)
        del self._profiles[key]

    def get(self, exchange_id: str) -> ExchangeProfile | None:
        return self._profiles.get(exchange_id.lower())

    def require(self, exchange_id: str) -> ExchangeProfile:
        """Look up a profile, raising when it is missing.

        Raises:
            ConfigurationError: If the exchange id is not registered
        """
        profile = self.get(exchange_id)
        if profile is None:
            raise ConfigurationError(
                f"Unknown exchange '{exchange_id}'. Registered: {self.exchange_ids()}",
                field="exchange_id",
                value=exchange_id,
            )
        return profile

    def exchange_ids(self) -> list[str]:
        return sorted(self._profiles)

    def __contains__(self, exchange_id: object) -> bool:
        return isinstance(exchange_id, str) and exchange_id.lower() in self._profiles

    def __iter__(self) -> Iterator[ExchangeProfile]:
        return iter(self._profiles.values())

    def __len__(self) -> int:
        return len(self._profiles)


_default_registry: ProfileRegistry | None = None


def get_profile_registry() -> ProfileRegistry:
    """Get the global profile registry, creating it on first access."""
    global _default_registry
    if _default_registry is None:
        from .profiles import BUILTIN_PROFILES

        _default_registry = ProfileRegistry(BUILTIN_PROFILES)
    return _default_registry


def get_profile(exchange_id: str) -> ExchangeProfile:
    """Look up a profile in the global registry.

    Raises:
        ConfigurationError: If the exchange id is not registered
    """
    return get_profile_registry().require(exchange_id)
