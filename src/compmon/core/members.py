"""Describable tokens for the constructors and methods a container calls.

Monitors never call through a descriptor; they only render it. ``str()`` of a
descriptor is its signature, e.g. ``app.services.Mailer(host, port=25)`` or
``app.services.Mailer.send(self, to, body)``.
"""
from __future__ import annotations

import inspect
import sys
from dataclasses import dataclass
from typing import Any, Callable, Literal

from .errors import ConfigurationError

MemberKind = Literal["constructor", "method"]


def qualified_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


@dataclass(slots=True, frozen=True)
class MemberDescriptor:
    kind: MemberKind
    owner: type | None  # None for module-level functions
    name: str
    target: Callable[..., Any]

    def signature(self) -> str:
        try:
            params = str(inspect.signature(self.target))
        except (TypeError, ValueError):
            params = "(...)"
        if self.owner is None:
            module = getattr(self.target, "__module__", None) or "builtins"
            return f"{module}.{self.name}{params}"
        if self.kind == "constructor":
            return f"{qualified_name(self.owner)}{params}"
        return f"{qualified_name(self.owner)}.{self.name}{params}"

    def __str__(self) -> str:
        return self.signature()


def constructor_of(cls: type) -> MemberDescriptor:
    if not isinstance(cls, type):
        raise ConfigurationError(f"constructor_of expects a class, got {type(cls).__name__}")
    # inspect.signature(cls) renders __init__ without ``self``
    return MemberDescriptor(kind="constructor", owner=cls, name="__init__", target=cls)


def method_of(owner: Any, name: str) -> MemberDescriptor:
    cls = owner if isinstance(owner, type) else type(owner)
    attr = inspect.getattr_static(cls, name, None)
    if attr is None or not callable(getattr(cls, name, None)):
        raise ConfigurationError(f"{qualified_name(cls)} has no callable member '{name}'")
    if isinstance(attr, (staticmethod, classmethod)):
        target = attr.__func__
    else:
        target = getattr(cls, name)
    return MemberDescriptor(kind="method", owner=cls, name=name, target=target)


def _defining_class(func: Callable[..., Any]) -> type | None:
    path = getattr(func, "__qualname__", "").split(".")[:-1]
    if not path or "<locals>" in path:
        return None
    obj: Any = sys.modules.get(getattr(func, "__module__", None) or "")
    for part in path:
        obj = getattr(obj, part, None)
    return obj if isinstance(obj, type) else None


def describe_member(member: Any) -> MemberDescriptor:
    if isinstance(member, MemberDescriptor):
        return member
    if isinstance(member, type):
        return constructor_of(member)
    if inspect.ismethod(member):
        # __name__ need not be the class attribute (aliases, name mangling), so no method_of lookup
        bound_to = member.__self__
        owner = bound_to if isinstance(bound_to, type) else type(bound_to)
        return MemberDescriptor(kind="method", owner=owner, name=member.__name__, target=member.__func__)
    if callable(member):
        name = getattr(member, "__name__", type(member).__name__)
        return MemberDescriptor(kind="method", owner=_defining_class(member), name=name, target=member)
    raise ConfigurationError(f"Cannot describe {type(member).__name__} as a member")
