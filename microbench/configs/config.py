"""Run options and their file-based configuration."""

import os
from dataclasses import dataclass, fields
from typing import Any

from microbench.configs.config_io import (
    load_json_file,
    load_options_file,
    load_yaml_file,
    save_json_file,
    save_yaml_file,
)
from microbench.configs.profiles import Profile, get_profile
from microbench.utils.errors import ConfigError


@dataclass
class RunOptions:
    """Every option recognized by run_benchmark() and run_all().

    Attributes:
        profile: Supplies warmup/interactions/rounds defaults
        warmup: Explicit override of the profile's warmup count
        interactions: Explicit override of the profile's interaction count
        rounds: Explicit override of the profile's round count
        setup_on_isolate: Run setup/shutdown on an isolated worker process
        shutdown_isolate_delay: Seconds to pause after the worker terminates
        shuffle: Shuffle the benchmark order of a batch
        shuffle_seed: Seed for a deterministic shuffle
        interaction_delay: Seconds to pause between benchmarks of a batch
        verbose: Emit the textual report
    """

    profile: Profile | None = None
    warmup: int | None = None
    interactions: int | None = None
    rounds: int | None = None
    setup_on_isolate: bool = False
    shutdown_isolate_delay: float | None = None
    shuffle: bool = False
    shuffle_seed: int | None = None
    interaction_delay: float | None = None
    verbose: bool = False

    _BATCH_ONLY = ("shuffle", "shuffle_seed", "interaction_delay")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RunOptions":
        """Build options from a plain mapping (as loaded from YAML/JSON).

        ``profile`` may be the name of a registered profile or an inline
        mapping with name/warmup/interactions/rounds.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown run option(s): {', '.join(unknown)}")

        values = dict(data)
        raw_profile = values.get("profile")
        if isinstance(raw_profile, str):
            try:
                values["profile"] = get_profile(raw_profile)
            except ValueError as e:
                raise ConfigError(str(e)) from e
        elif isinstance(raw_profile, dict):
            try:
                values["profile"] = Profile.from_dict(raw_profile)
            except (KeyError, TypeError, ValueError) as e:
                raise ConfigError(f"Invalid inline profile {raw_profile!r}: {e}") from e
        elif raw_profile is not None and not isinstance(raw_profile, Profile):
            raise ConfigError(f"profile must be a name or a mapping, got {type(raw_profile).__name__}")
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """Convert options to a YAML/JSON friendly dictionary."""
        result = {f.name: getattr(self, f.name) for f in fields(self)}
        if self.profile is not None:
            result["profile"] = self.profile.to_dict()
        return result

    def run_kwargs(self) -> dict[str, Any]:
        """Keyword arguments accepted by run_benchmark()."""
        return {f.name: getattr(self, f.name) for f in fields(self) if f.name not in self._BATCH_ONLY}

    def batch_kwargs(self) -> dict[str, Any]:
        """Keyword arguments accepted by run_all()."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


class ConfigManager:
    """Loads and saves RunOptions files."""

    @staticmethod
    def load_yaml(filepath: str) -> RunOptions:
        """Load run options from a YAML file."""
        return RunOptions.from_dict(load_yaml_file(filepath))

    @staticmethod
    def load_json(filepath: str) -> RunOptions:
        """Load run options from a JSON file."""
        return RunOptions.from_dict(load_json_file(filepath))

    @staticmethod
    def load(filepath: str) -> RunOptions:
        """Load run options, picking the parser from the file extension."""
        return RunOptions.from_dict(load_options_file(filepath))

    @staticmethod
    def save_yaml(options: RunOptions, filepath: str) -> None:
        """Save run options to a YAML file."""
        save_yaml_file(filepath, options.to_dict())

    @staticmethod
    def save_json(options: RunOptions, filepath: str) -> None:
        """Save run options to a JSON file."""
        save_json_file(filepath, options.to_dict())

    @staticmethod
    def load_or_default(filepath: str | None = None) -> RunOptions:
        """Load run options from file, or return defaults when it does not exist."""
        if filepath and os.path.exists(filepath):
            return ConfigManager.load(filepath)
        return RunOptions()
