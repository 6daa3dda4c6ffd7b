"""Profile definitions for microbench.

A profile is a named (warmup, interactions, rounds) triple. Four presets are
registered at import time; applications may register their own via
register_profile().

Available Profiles:
    - instant: 1 warmup, 1 interaction, 1 round (smoke checks)
    - fast: 10 warmup, 100 interactions, 1 round
    - normal: 100 warmup, 1000 interactions, 3 rounds (default)
    - heavy: 1000 warmup, 10000 interactions, 10 rounds

Example usage:
    from microbench.configs.profiles import get_profile, list_profiles

    profile = get_profile("fast")
    print(profile)

    for name in list_profiles():
        print(f"  - {name}")
"""

from dataclasses import asdict, dataclass
from typing import Any

from microbench.utils.errors import ProfileValidationError


@dataclass(frozen=True)
class Profile:
    """Benchmark profile configuration.

    Attributes:
        name: Identifier shown in reports
        warmup: Untimed job invocations before the first round
        interactions: Job invocations per timed round
        rounds: Number of timed rounds
    """

    name: str
    warmup: int
    interactions: int
    rounds: int

    def to_dict(self) -> dict[str, Any]:
        """Convert profile to dictionary format."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Profile":
        """Build a profile from a mapping with name/warmup/interactions/rounds keys."""
        return cls(
            name=str(data.get("name", "custom")),
            warmup=int(data["warmup"]),
            interactions=int(data["interactions"]),
            rounds=int(data["rounds"]),
        )

    def __str__(self) -> str:
        return (
            f"Profile[{self.name}]{{warmup: {self.warmup}, "
            f"interactions: {self.interactions}, rounds: {self.rounds}}}"
        )


INSTANT = Profile("instant", warmup=1, interactions=1, rounds=1)
FAST = Profile("fast", warmup=10, interactions=100, rounds=1)
NORMAL = Profile("normal", warmup=100, interactions=1000, rounds=3)
HEAVY = Profile("heavy", warmup=1000, interactions=10000, rounds=10)

DEFAULT_PROFILE = NORMAL

_PROFILE_REGISTRY: dict[str, Profile] = {p.name: p for p in (INSTANT, FAST, NORMAL, HEAVY)}


def get_profile(name: str) -> Profile:
    """Get a profile by name."""
    if name not in _PROFILE_REGISTRY:
        available = ", ".join(_PROFILE_REGISTRY.keys())
        raise ValueError(f"Unknown profile '{name}'. Available profiles: {available}")
    return _PROFILE_REGISTRY[name]


def list_profiles() -> list[str]:
    """Get list of all available profile names."""
    return list(_PROFILE_REGISTRY.keys())


def register_profile(profile: Profile) -> None:
    """Register a custom profile."""
    if profile.name in _PROFILE_REGISTRY:
        raise ValueError(f"Profile '{profile.name}' already exists")
    _PROFILE_REGISTRY[profile.name] = profile


def unregister_profile(name: str) -> None:
    """Remove a custom profile; the built-in presets cannot be removed."""
    if name in (INSTANT.name, FAST.name, NORMAL.name, HEAVY.name):
        raise ValueError(f"Profile '{name}' is built in and cannot be removed")
    _PROFILE_REGISTRY.pop(name, None)


def validate_profile(profile: Profile) -> None:
    """Check that a profile's counts produce meaningful measurements.

    The engine never calls this: zero rounds or interactions are accepted
    there and simply yield degenerate results.
    """
    problems = []
    if profile.rounds < 1:
        problems.append(f"rounds must be >= 1 (got {profile.rounds})")
    if profile.interactions < 1:
        problems.append(f"interactions must be >= 1 (got {profile.interactions})")
    if profile.warmup < 0:
        problems.append(f"warmup must be >= 0 (got {profile.warmup})")
    if problems:
        raise ProfileValidationError(f"Invalid profile '{profile.name}': " + "; ".join(problems))
