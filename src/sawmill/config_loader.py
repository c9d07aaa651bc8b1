"""Load SawmillConfig from sawmill.yaml or sawmill.toml if present.

Merges file config with keyword overrides. Overrides take precedence.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

import yaml

from sawmill._errors import ConfigError
from sawmill.config import SawmillConfig
from sawmill.event.levels import Level

_KNOWN_KEYS = (
    "repo_path",
    "stack_max_depth",
    "flatten_max_depth",
    "level_min",
    "level_max",
    "dedup",
    "stack_min_level",
)
_LEVEL_KEYS = ("level_min", "level_max", "stack_min_level")


def load_config(root: Path, **overrides: object) -> SawmillConfig:
    """Load SawmillConfig from root, optionally merging sawmill.yaml.

    Looks for sawmill.yaml, sawmill.yml, or sawmill.toml in root. If found,
    loads and merges with overrides. Overrides take precedence.

    Raises:
        ConfigError: The file cannot be parsed or holds an invalid value.

    """
    file_config = _read_sawmill_config(root)
    merged = {**file_config, **overrides}
    for key in _LEVEL_KEYS:
        if merged.get(key) is not None and not isinstance(merged[key], Level):
            try:
                merged[key] = Level.parse(merged[key])  # type: ignore[arg-type]
            except ValueError as exc:
                raise ConfigError(f"{key}: {exc}") from exc
    if "repo_path" in merged and not isinstance(merged["repo_path"], Path):
        # Relative paths in a config file are relative to the file.
        merged["repo_path"] = (root / str(merged["repo_path"])).resolve()
    try:
        return SawmillConfig(**merged)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise ConfigError(str(exc)) from exc


def _read_sawmill_config(root: Path) -> dict[str, Any]:
    """Read sawmill config from yaml/toml if present. Returns empty dict otherwise."""
    for name in ("sawmill.yaml", "sawmill.yml"):
        path = root / name
        if path.is_file():
            return _parse_yaml(path)
    toml_path = root / "sawmill.toml"
    if toml_path.is_file():
        return _parse_toml(toml_path)
    return {}


def _parse_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"{path.name}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{path.name}: expected a mapping at top level")
    return _flatten_sawmill_section(data)


def _parse_toml(path: Path) -> dict[str, Any]:
    try:
        data = tomllib.loads(path.read_text())
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{path.name}: {exc}") from exc
    return _flatten_sawmill_section(data)


def _flatten_sawmill_section(data: dict[str, Any]) -> dict[str, Any]:
    """Extract sawmill.* keys into top-level config."""
    result: dict[str, Any] = {}
    for k, v in data.items():
        if k != "sawmill" and k in _KNOWN_KEYS:
            result[k] = v
    section = data.get("sawmill")
    if isinstance(section, dict):
        for k, v in section.items():
            if k in _KNOWN_KEYS:
                result[k] = v
    return result
