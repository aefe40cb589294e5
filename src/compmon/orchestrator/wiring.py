from __future__ import annotations

import logging
import time
from typing import Any

from compmon.core.contracts import ComponentMonitor
from compmon.core.errors import ConfigurationError
from compmon.core.members import constructor_of, method_of
from compmon.registry.monitor import MONITORS

logger = logging.getLogger(__name__)


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


def build_monitor(config: dict[str, Any]) -> ComponentMonitor:
    section = config.get("monitor") or {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"'monitor' section must be a mapping, got {type(section).__name__}")
    mon_cfg = dict(section)
    key = mon_cfg.pop("kind", "null")
    if key not in MONITORS:
        known = ", ".join(sorted(MONITORS.keys()))
        raise ConfigurationError(f"Unknown monitor '{key}'. Known: [{known}]")
    cls = MONITORS[key]
    if key == "logging":
        logger_name = mon_cfg.pop("logger_name", None)
        if mon_cfg:
            raise ConfigurationError(f"Unexpected options for monitor 'logging': {sorted(mon_cfg)}")
        return cls(logger_name)
    try:
        return cls(**mon_cfg)
    except TypeError as exc:
        raise ConfigurationError(f"Invalid options for monitor '{key}': {exc}") from exc


def instantiate(cls: type, *args: Any, monitor: ComponentMonitor, **kwargs: Any) -> Any:
    """Construct ``cls(*args, **kwargs)``, reporting each step to ``monitor``."""
    ctor = constructor_of(cls)
    monitor.instantiating(ctor)
    start = time.perf_counter()
    try:
        instance = cls(*args, **kwargs)
    except Exception as exc:
        monitor.instantiation_failed(ctor, exc)
        raise
    monitor.instantiated(ctor, _elapsed_ms(start))
    return instance


def invoke(instance: Any, method_name: str, *args: Any, monitor: ComponentMonitor, **kwargs: Any) -> Any:
    """Call ``instance.<method_name>(*args, **kwargs)``, reporting each step to ``monitor``."""
    method = method_of(instance, method_name)
    bound = getattr(instance, method_name)
    monitor.invoking(method, instance)
    start = time.perf_counter()
    try:
        result = bound(*args, **kwargs)
    except Exception as exc:
        monitor.invocation_failed(method, instance, exc)
        raise
    monitor.invoked(method, instance, _elapsed_ms(start))
    return result


def build_component(
    registry: dict[str, type],
    key: str,
    cfg: dict[str, Any],
    monitor: ComponentMonitor,
) -> Any:
    if key not in registry:
        known = ", ".join(sorted(registry.keys()))
        raise ConfigurationError(f"Unknown component '{key}'. Known: [{known}]")
    logger.debug("Building component '%s' from %s", key, registry[key].__name__)
    return instantiate(registry[key], monitor=monitor, **dict(cfg))
