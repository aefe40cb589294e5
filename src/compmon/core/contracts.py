from __future__ import annotations

from typing import Any, Protocol

from .members import MemberDescriptor


class ComponentMonitor(Protocol):
    def instantiating(self, constructor: MemberDescriptor) -> None: ...

    def instantiated(self, constructor: MemberDescriptor, duration_ms: int) -> None: ...

    def instantiation_failed(self, constructor: MemberDescriptor, error: BaseException) -> None: ...

    def invoking(self, method: MemberDescriptor, instance: Any) -> None: ...

    def invoked(self, method: MemberDescriptor, instance: Any, duration_ms: int) -> None: ...

    def invocation_failed(self, method: MemberDescriptor, instance: Any, error: BaseException) -> None: ...
