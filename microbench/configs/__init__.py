"""Configuration load/save, run options and profiles."""

from .config import ConfigManager, RunOptions
from .config_io import (
    ensure_parent_dir,
    load_json_file,
    load_options_file,
    load_yaml_file,
    save_json_file,
    save_yaml_file,
)
from .profiles import DEFAULT_PROFILE, FAST, HEAVY, INSTANT, NORMAL, Profile

__all__ = [
    "load_yaml_file",
    "load_json_file",
    "load_options_file",
    "save_yaml_file",
    "save_json_file",
    "ensure_parent_dir",
    "RunOptions",
    "ConfigManager",
    "Profile",
    "INSTANT",
    "FAST",
    "NORMAL",
    "HEAVY",
    "DEFAULT_PROFILE",
]
