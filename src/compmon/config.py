"""YAML configuration and logging setup.

Config files may name a parent with ``_base_``; the chain is resolved
relative to each file and deep-merged child over parent, so a per-
environment file only states what differs from its base.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from compmon.core.errors import ConfigurationError

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def load_yaml(path: str | Path) -> dict:
    with Path(path).open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def deep_merge(base: dict, override: dict) -> dict:
    merged = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(merged.get(k), dict):
            merged[k] = deep_merge(merged[k], v)
        else:
            merged[k] = v
    return merged


def _load_config_recursive(cfg_path: Path, stack: set[Path] | None = None) -> dict[str, Any]:
    stack = stack or set()
    cfg_path = cfg_path.resolve()
    if cfg_path in stack:
        cycle = " -> ".join(str(p) for p in [*stack, cfg_path])
        raise ConfigurationError(f"Cycle detected in _base_ config chain: {cycle}")
    stack.add(cfg_path)

    cfg = load_yaml(cfg_path)
    if not isinstance(cfg, dict):
        raise ConfigurationError(f"Config must be a mapping at {cfg_path}")

    base_ref = cfg.get("_base_")
    if not base_ref:
        stack.remove(cfg_path)
        return cfg

    base_path = Path(str(base_ref)).expanduser()
    if not base_path.is_absolute():
        base_path = (cfg_path.parent / base_path).resolve()
    base_cfg = _load_config_recursive(base_path, stack=stack)
    merged = deep_merge(base_cfg, {k: v for k, v in cfg.items() if k != "_base_"})
    stack.remove(cfg_path)
    return merged


def load_config(path: str | Path) -> dict[str, Any]:
    return _load_config_recursive(Path(path))


def configure_logging(config: dict[str, Any]) -> None:
    log_cfg = config.get("logging") or {}
    raw_level = log_cfg.get("level", "INFO")
    if isinstance(raw_level, int) and not isinstance(raw_level, bool):
        level = raw_level
    else:
        level_name = str(raw_level).upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            raise ConfigurationError(f"Unknown logging level '{level_name}'")
    logging.basicConfig(
        level=level,
        format=log_cfg.get("format", DEFAULT_LOG_FORMAT),
    )
