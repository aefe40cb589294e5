from __future__ import annotations

from pathlib import Path
from typing import Any

import orjson

from compmon.core.entities import EventRecord, to_primitive, utc_now_iso
from compmon.core.members import describe_member
from compmon.core.templates import (
    INSTANTIATED,
    INSTANTIATING,
    INSTANTIATION_FAILED,
    INVOCATION_FAILED,
    INVOKED,
    INVOKING,
    format_message,
    safe_text,
)


class RecordingComponentMonitor:
    """Keeps every notification in memory as an ``EventRecord``."""

    def __init__(self) -> None:
        self.events: list[EventRecord] = []

    def instantiating(self, constructor: Any) -> None:
        self._record("instantiating", constructor, "debug", INSTANTIATING, ())

    def instantiated(self, constructor: Any, duration_ms: int) -> None:
        self._record(
            "instantiated", constructor, "debug", INSTANTIATED, (duration_ms,),
            {"duration_ms": duration_ms},
        )

    def instantiation_failed(self, constructor: Any, error: BaseException) -> None:
        self._record(
            "instantiation_failed", constructor, "warning", INSTANTIATION_FAILED, (safe_text(error),),
            {"error": safe_text(error), "error_type": type(error).__name__},
        )

    def invoking(self, method: Any, instance: Any) -> None:
        self._record(
            "invoking", method, "debug", INVOKING, (instance,),
            {"instance": safe_text(instance)},
        )

    def invoked(self, method: Any, instance: Any, duration_ms: int) -> None:
        self._record(
            "invoked", method, "debug", INVOKED, (instance, duration_ms),
            {"instance": safe_text(instance), "duration_ms": duration_ms},
        )

    def invocation_failed(self, method: Any, instance: Any, error: BaseException) -> None:
        self._record(
            "invocation_failed", method, "warning", INVOCATION_FAILED, (instance, safe_text(error)),
            {
                "instance": safe_text(instance),
                "error": safe_text(error),
                "error_type": type(error).__name__,
            },
        )

    def clear(self) -> None:
        self.events.clear()

    def save_to_file(self, path: str | Path) -> Path:
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        with p.open("wb") as f:
            for event in self.events:
                f.write(orjson.dumps(to_primitive(event)) + b"\n")
        return p

    def _record(
        self,
        event: str,
        member: Any,
        level: str,
        template: str,
        args: tuple[Any, ...],
        payload: dict[str, Any] | None = None,
    ) -> None:
        member = describe_member(member)
        self.events.append(
            EventRecord(
                ts_utc=utc_now_iso(),
                event=event,
                member=member.signature(),
                level=level,
                message=format_message(template, (member, *args)),
                payload=payload or {},
            )
        )
