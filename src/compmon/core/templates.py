"""Message templates shared by the text-emitting monitors.

Templates use ``str.format`` positional fields. Arguments are converted to
text before formatting, so a component with a broken ``__str__`` never
breaks a notification.
"""
from __future__ import annotations

from typing import Any, Sequence

INSTANTIATING = "compmon: instantiating {0}"
INSTANTIATED = "compmon: instantiated {0} [{1} ms]"
INSTANTIATION_FAILED = "compmon: instantiation failed: {0}, reason: '{1}'"
INVOKING = "compmon: invoking {0} on {1}"
INVOKED = "compmon: invoked {0} on {1} [{2} ms]"
INVOCATION_FAILED = "compmon: invocation failed: {0} on {1}, reason: '{2}'"


def safe_text(value: Any) -> str:
    try:
        return str(value)
    except Exception:
        return f"<unprintable {type(value).__name__} object>"


def format_message(template: str, args: Sequence[Any]) -> str:
    return template.format(*(safe_text(a) for a in args))
