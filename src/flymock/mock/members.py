# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Member discovery over an instance and its whole class hierarchy."""

from __future__ import annotations

import functools
import inspect
import types
import typing
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from flymock.kernel.exceptions import ContractViolationException

# Interpreter and ``abc``/``typing`` bookkeeping that is not part of a class's shape.
_IGNORED_NAMES = frozenset({
    "_abc_impl",
    "_abc_registry",
    "_abc_cache",
    "_abc_negative_cache",
    "_abc_negative_cache_version",
    "_is_protocol",
    "_is_runtime_protocol",
})

# Errors raised while evaluating annotations that name unknown or local types.
_UNRESOLVABLE = (NameError, TypeError, AttributeError, SyntaxError)


class _Missing:
    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


class MemberKind(StrEnum):
    METHOD = "method"
    DATA = "data"
    DESCRIPTOR = "descriptor"


@dataclass(frozen=True)
class Member:
    """One member of a mocked shape.

    ``value`` is the original value observed on the materialized instance, or
    :data:`MISSING` when the member is only declared (an annotation, a slot or
    a ``cached_property`` that was never computed). ``annotation`` is the
    resolved type annotation, or :data:`MISSING`.
    """

    name: str
    kind: MemberKind
    value: Any = MISSING
    annotation: Any = MISSING

    @property
    def has_value(self) -> bool:
        return self.value is not MISSING


def discover_members(instance: object) -> dict[str, Member]:
    """Collect every member declared on *instance* or anywhere in its class chain.

    The walk covers ``type(instance).__mro__`` up to but excluding ``object``,
    class annotations (dataclass fields included) and the instance's own
    ``__dict__``. A name declared at several levels appears once, classified
    from the most derived declaration. Descriptor getters are never called.
    """
    cls = type(instance)
    hierarchy = [klass for klass in cls.__mro__ if klass is not object]

    annotations: dict[str, Any] = {}
    names: dict[str, None] = {}
    for klass in reversed(hierarchy):
        annotations.update(_class_annotations(klass))
        names.update(dict.fromkeys(vars(klass)))
    names.update(dict.fromkeys(annotations))
    own = getattr(instance, "__dict__", {})
    names.update(dict.fromkeys(own))

    members: dict[str, Member] = {}
    for name in names:
        if _is_ignored(name):
            continue
        annotation = annotations.get(name, MISSING)
        if typing.get_origin(annotation) is typing.ClassVar and name not in own:
            continue
        members[name] = _classify(instance, hierarchy, own, name, annotation)
    return members


def _is_ignored(name: str) -> bool:
    return (name.startswith("__") and name.endswith("__")) or name in _IGNORED_NAMES


def _class_annotations(klass: type) -> dict[str, Any]:
    try:
        return typing.get_type_hints(klass)
    except _UNRESOLVABLE:
        pass
    # Resolve entry by entry so only the failing annotations stay raw strings.
    localns = dict(vars(klass))
    return {
        name: _resolve_annotation(klass, name, annotation, localns)
        for name, annotation in inspect.get_annotations(klass).items()
    }


def _resolve_annotation(klass: type, name: str, annotation: Any, localns: dict[str, Any]) -> Any:
    if not isinstance(annotation, str):
        return annotation
    holder = type(
        f"{klass.__name__}Annotation",
        (),
        {"__annotations__": {name: annotation}, "__module__": klass.__module__},
    )
    try:
        return typing.get_type_hints(holder, localns=localns)[name]
    except _UNRESOLVABLE:
        # Unresolvable forward references keep their raw (string) form.
        return annotation


def _classify(
    instance: object,
    hierarchy: list[type],
    own: dict[str, Any],
    name: str,
    annotation: Any,
) -> Member:
    if name in own:
        value = own[name]
        return Member(name, MemberKind.METHOD if callable(value) else MemberKind.DATA, value, annotation)

    attr = _lookup(hierarchy, name)
    if attr is MISSING:
        return Member(name, MemberKind.DATA, annotation=annotation)
    if isinstance(attr, types.MemberDescriptorType):
        return Member(name, MemberKind.DATA, getattr(instance, name, MISSING), annotation)
    if isinstance(attr, functools.cached_property):
        return Member(name, MemberKind.DATA, annotation=annotation)
    if _is_data_descriptor(attr):
        return Member(name, MemberKind.DESCRIPTOR, annotation=annotation)

    value = getattr(instance, name)
    return Member(name, MemberKind.METHOD if callable(value) else MemberKind.DATA, value, annotation)


def _lookup(hierarchy: list[type], name: str) -> Any:
    for klass in hierarchy:
        namespace = vars(klass)
        if name in namespace:
            return namespace[name]
    return MISSING


def _is_data_descriptor(attr: Any) -> bool:
    kind = type(attr)
    return hasattr(kind, "__set__") or hasattr(kind, "__delete__")


def assign_member(instance: object, name: str, value: Any) -> None:
    """Set *name* on *instance*, bypassing any ``__setattr__`` override of its class.

    Properties with a setter still run it; read-only descriptors refuse.
    """
    try:
        object.__setattr__(instance, name, value)
    except AttributeError as exc:
        raise ContractViolationException(
            f"Cannot assign member '{name}' on {type(instance).__qualname__}: {exc}",
            context={"member": name, "type": type(instance).__qualname__},
        ) from exc
