from compmon.monitors.logging_monitor import EventLogger
from compmon.monitors.null import NullComponentMonitor
from compmon.monitors.recording import RecordingComponentMonitor

MONITORS = {
    "logging": EventLogger,
    "null": NullComponentMonitor,
    "recording": RecordingComponentMonitor,
}
