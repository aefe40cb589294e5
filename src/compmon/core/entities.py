from __future__ import annotations

from dataclasses import asdict, dataclass, field, is_dataclass
from datetime import UTC, datetime
from typing import Any


@dataclass(slots=True)
class EventRecord:
    ts_utc: str
    event: str
    member: str
    level: str
    message: str
    payload: dict[str, Any] = field(default_factory=dict)


def utc_now_iso() -> str:
    return datetime.now(tz=UTC).isoformat()


def to_primitive(value: Any) -> Any:
    if is_dataclass(value):
        return {k: to_primitive(v) for k, v in asdict(value).items()}
    if isinstance(value, dict):
        return {k: to_primitive(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_primitive(v) for v in value]
    if isinstance(value, (str, int, float, bool, type(None))):
        return value
    return str(value)
