from compmon.core.contracts import ComponentMonitor
from compmon.core.errors import CompmonError, ConfigurationError
from compmon.core.members import MemberDescriptor, constructor_of, describe_member, method_of
from compmon.monitors.logging_monitor import EventLogger
from compmon.monitors.null import NullComponentMonitor
from compmon.monitors.recording import RecordingComponentMonitor
from compmon.orchestrator.wiring import build_component, build_monitor, instantiate, invoke

__all__ = [
    "ComponentMonitor",
    "CompmonError",
    "ConfigurationError",
    "MemberDescriptor",
    "constructor_of",
    "describe_member",
    "method_of",
    "EventLogger",
    "NullComponentMonitor",
    "RecordingComponentMonitor",
    "build_component",
    "build_monitor",
    "instantiate",
    "invoke",
]
