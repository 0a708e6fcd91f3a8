"""
reqdoc.config.loader - Configuration file discovery and loading.

Configuration comes from three layers, later layers winning:
1. DEFAULT_CONFIG
2. the nearest .reqdoc.toml (searched upwards from the working directory)
3. REQDOC_<SECTION>_<KEY> environment variables
"""

import copy
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import tomlkit
from tomlkit.exceptions import TOMLKitError

from reqdoc.config.defaults import CONFIG_FILE_NAME, DEFAULT_CONFIG

ENV_PREFIX = "REQDOC_"


def parse_toml(content: str) -> Dict[str, Any]:
    """Parse TOML text into plain Python data."""
    return tomlkit.parse(content).unwrap()


def find_config_file(start_path: Path) -> Optional[Path]:
    """
    Find the configuration file by walking up from start_path.

    Args:
        start_path: Directory to start searching from

    Returns:
        Path to .reqdoc.toml, or None if no file is found
    """
    current = start_path.resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
    return None


def merge_configs(defaults: Dict[str, Any], user: Dict[str, Any]) -> Dict[str, Any]:
    """
    Deep-merge user configuration over defaults.

    Nested dictionaries are merged key by key; any other value in
    ``user`` replaces the default.
    """
    merged = copy.deepcopy(defaults)
    for key, value in user.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def load_config(config_path: Path) -> Dict[str, Any]:
    """
    Load a configuration file and merge it over the defaults.

    Raises:
        ValueError: If the file is not valid TOML
    """
    content = config_path.read_text(encoding="utf-8")
    try:
        user_config = parse_toml(content)
    except TOMLKitError as e:
        raise ValueError(f"invalid configuration file {config_path}: {e}") from e
    return merge_configs(DEFAULT_CONFIG, user_config)


def get_config(
    config_path: Optional[Path] = None,
    start_path: Optional[Path] = None,
) -> Dict[str, Any]:
    """
    Resolve the effective configuration.

    Args:
        config_path: Explicit configuration file (skips discovery)
        start_path: Directory to start discovery from (default: cwd)

    Returns:
        Configuration dict with defaults and environment overrides applied
    """
    if config_path is None:
        config_path = find_config_file(start_path or Path.cwd())
    if config_path is not None:
        config = load_config(config_path)
    else:
        config = copy.deepcopy(DEFAULT_CONFIG)
    return _apply_env_overrides(config)


def _try_parse_env_value(value: str) -> Any:
    """Parse an environment value: JSON list/object, boolean, or plain string."""
    if value.lower() in ("true", "false"):
        return value.lower() == "true"
    if value.startswith(("[", "{")):
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            return value
    return value


def _apply_env_overrides(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Apply REQDOC_<SECTION>_<KEY> environment variables.

    Only sections already present in the config are considered, so
    REQDOC_CHECK_CASE_SENSITIVE=false sets check.case_sensitive.
    """
    for name, raw in os.environ.items():
        if not name.startswith(ENV_PREFIX):
            continue
        rest = name[len(ENV_PREFIX) :].lower()
        for section in config:
            prefix = f"{section}_"
            if rest.startswith(prefix) and isinstance(config[section], dict):
                key = rest[len(prefix) :]
                if key:
                    config[section][key] = _try_parse_env_value(raw)
                break
    return config
