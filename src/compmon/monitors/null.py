from __future__ import annotations

from typing import Any

from compmon.core.members import MemberDescriptor


class NullComponentMonitor:
    """Monitor that ignores every notification."""

    def instantiating(self, constructor: MemberDescriptor) -> None:
        pass

    def instantiated(self, constructor: MemberDescriptor, duration_ms: int) -> None:
        pass

    def instantiation_failed(self, constructor: MemberDescriptor, error: BaseException) -> None:
        pass

    def invoking(self, method: MemberDescriptor, instance: Any) -> None:
        pass

    def invoked(self, method: MemberDescriptor, instance: Any, duration_ms: int) -> None:
        pass

    def invocation_failed(self, method: MemberDescriptor, instance: Any, error: BaseException) -> None:
        pass
