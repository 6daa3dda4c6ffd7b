"""Benchmark profiles: presets and registry."""

from .profiles import (
    DEFAULT_PROFILE,
    FAST,
    HEAVY,
    INSTANT,
    NORMAL,
    Profile,
    get_profile,
    list_profiles,
    register_profile,
    unregister_profile,
    validate_profile,
)

__all__ = [
    "Profile",
    "INSTANT",
    "FAST",
    "NORMAL",
    "HEAVY",
    "DEFAULT_PROFILE",
    "get_profile",
    "list_profiles",
    "register_profile",
    "unregister_profile",
    "validate_profile",
]
