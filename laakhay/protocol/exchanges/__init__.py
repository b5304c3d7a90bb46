"""Exchange profiles: per-exchange protocol configuration and lookup."""

from .profile import ExchangeProfile
from .registry import ProfileRegistry, get_profile, get_profile_registry
from .urls import interpolate_hostname, resolve_url

__all__ = [
    "ExchangeProfile",
    "ProfileRegistry",
    "get_profile",
    "get_profile_registry",
    "interpolate_hostname",
    "resolve_url",
]
