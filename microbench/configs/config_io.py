"""Run-options file I/O.

Option files are YAML or JSON documents whose top level is a mapping. Parse
errors and non-mapping documents surface as ConfigError naming the file.
"""

import json
import os
from typing import Any

import yaml

from microbench.utils.errors import ConfigError

YAML_SUFFIXES = (".yaml", ".yml")
JSON_SUFFIXES = (".json",)


def ensure_parent_dir(filepath: str) -> None:
    """Create parent directory of filepath if needed."""
    os.makedirs(os.path.dirname(filepath) or ".", exist_ok=True)


def _as_mapping(filepath: str, data: Any) -> dict[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{filepath}: expected a mapping of run options, got {type(data).__name__}")
    return data


def load_yaml_file(filepath: str) -> dict[str, Any]:
    """Read a YAML options file.

    Args:
        filepath: Path to YAML file

    Returns:
        Top-level mapping; empty dict for an empty document
    """
    with open(filepath, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"{filepath}: invalid YAML: {e}") from e
    return _as_mapping(filepath, data)


def load_json_file(filepath: str) -> dict[str, Any]:
    with open(filepath, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"{filepath}: invalid JSON: {e}") from e
    return _as_mapping(filepath, data)


def load_options_file(filepath: str) -> dict[str, Any]:
    """Read an options file, choosing the parser from its extension."""
    if filepath.endswith(YAML_SUFFIXES):
        return load_yaml_file(filepath)
    if filepath.endswith(JSON_SUFFIXES):
        return load_json_file(filepath)
    raise ConfigError(f"Unsupported config file type: {filepath}")


def save_yaml_file(filepath: str, data: dict[str, Any]) -> None:
    """Write a mapping as block-style YAML, keeping key order."""
    ensure_parent_dir(filepath)
    with open(filepath, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)


def save_json_file(filepath: str, data: Any, indent: int = 2) -> None:
    """Write any JSON-serializable payload (options or exported results)."""
    ensure_parent_dir(filepath)
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent)
