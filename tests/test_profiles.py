"""Tests for benchmark profiles and the profile registry."""

import pytest

from microbench.configs.profiles import (
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
from microbench.utils.errors import ProfileValidationError


class TestPresets:
    """Built-in presets."""

    @pytest.mark.parametrize(
        "profile,counts",
        [
            (INSTANT, (1, 1, 1)),
            (FAST, (10, 100, 1)),
            (NORMAL, (100, 1000, 3)),
            (HEAVY, (1000, 10000, 10)),
        ],
    )
    def test_preset_counts(self, profile, counts):
        assert (profile.warmup, profile.interactions, profile.rounds) == counts

    def test_default_is_normal(self):
        assert DEFAULT_PROFILE is NORMAL

    def test_presets_are_immutable(self):
        with pytest.raises(AttributeError):
            FAST.rounds = 5

    def test_str(self):
        profile = Profile("custom", warmup=10, interactions=100, rounds=3)
        assert str(profile) == "Profile[custom]{warmup: 10, interactions: 100, rounds: 3}"

    def test_construction_never_validates(self):
        profile = Profile("broken", warmup=-1, interactions=0, rounds=0)
        assert profile.rounds == 0


class TestRegistry:
    """get/list/register profiles."""

    def test_presets_registered(self):
        assert {"instant", "fast", "normal", "heavy"} <= set(list_profiles())
        assert get_profile("heavy") is HEAVY

    def test_unknown_profile_lists_available(self):
        with pytest.raises(ValueError, match="Available profiles"):
            get_profile("does-not-exist")

    def test_register_and_unregister(self):
        custom = Profile("ci", warmup=0, interactions=5, rounds=2)
        register_profile(custom)
        try:
            assert get_profile("ci") is custom
            with pytest.raises(ValueError, match="already exists"):
                register_profile(custom)
        finally:
            unregister_profile("ci")
        assert "ci" not in list_profiles()

    def test_cannot_unregister_preset(self):
        with pytest.raises(ValueError):
            unregister_profile("normal")


class TestValidation:
    def test_valid_profile_passes(self):
        validate_profile(NORMAL)

    def test_zero_warmup_allowed(self):
        validate_profile(Profile("w0", warmup=0, interactions=1, rounds=1))

    def test_reports_every_problem(self):
        with pytest.raises(ProfileValidationError) as excinfo:
            validate_profile(Profile("bad", warmup=-1, interactions=0, rounds=0))
        message = str(excinfo.value)
        assert "rounds" in message
        assert "interactions" in message
        assert "warmup" in message


def test_dict_roundtrip():
    profile = Profile("x", warmup=3, interactions=4, rounds=5)
    assert Profile.from_dict(profile.to_dict()) == profile
