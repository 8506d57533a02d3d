from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from connectn.core import GameConfig, Player

CONFIG_KEYS = ("height", "width", "run_length", "first_player")


def load_yaml_config(path: Union[str, Path]) -> Dict[str, Any]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config {path} must contain a mapping, got {type(data).__name__}.")
    return data


def parse_player(value: Union[str, Player]) -> Player:
    if isinstance(value, Player):
        return value
    try:
        return Player[str(value).strip().upper()]
    except KeyError:
        raise ValueError(f"Unknown player {value!r}; expected 'X' or 'O'.") from None


def config_from_mapping(mapping: Mapping[str, Any]) -> GameConfig:
    unknown = sorted(set(mapping) - set(CONFIG_KEYS))
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
    kwargs: Dict[str, Any] = {}
    for key in ("height", "width", "run_length"):
        if key in mapping:
            kwargs[key] = int(mapping[key])
    if "first_player" in mapping:
        kwargs["first_player"] = parse_player(mapping["first_player"])
    return GameConfig(**kwargs)


def resolve_config(path: Optional[Union[str, Path]] = None, **overrides: Any) -> GameConfig:
    """Build a GameConfig from an optional YAML file; non-None overrides win."""
    cfg: Dict[str, Any] = load_yaml_config(path) if path else {}
    for key, value in overrides.items():
        if value is not None:
            cfg[key] = value
    return config_from_mapping(cfg)
