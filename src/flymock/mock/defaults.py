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
"""Type-derived default values for mocked data members."""

from __future__ import annotations

import collections.abc
import functools
import numbers
import types
import typing
from typing import Any

# Builtins whose zero-argument call is their empty/zero value.
_EMPTY_FACTORIES: dict[Any, Any] = {
    bool: bool,
    int: int,
    float: float,
    complex: complex,
    str: str,
    bytes: bytes,
    bytearray: bytearray,
    list: list,
    tuple: tuple,
    set: set,
    frozenset: frozenset,
    dict: dict,
}

_ABSTRACT_FACTORIES: tuple[tuple[type, Any], ...] = (
    (collections.abc.Mapping, dict),
    (collections.abc.Set, set),
    (collections.abc.Sequence, list),
)


@functools.singledispatch
def default_for_value(value: Any) -> Any:
    """Return the reset value for a member whose original value is *value*.

    Anything not registered below (class instances, plain enum members, ...)
    is reset to an empty generic object, never to a fresh instance of its
    class. Enums mixed with a builtin value type (``IntEnum``, ``StrEnum``,
    ``IntFlag``) dispatch on that type first and reset like it: ``0`` or ``""``.
    """
    return types.SimpleNamespace()


@default_for_value.register(type(None))
def _(value: None) -> None:
    return None


@default_for_value.register
def _(value: bool) -> bool:
    return False


@default_for_value.register
def _(value: int) -> int:
    return 0


@default_for_value.register
def _(value: float) -> float:
    return 0.0


@default_for_value.register
def _(value: complex) -> complex:
    return 0j


@default_for_value.register
def _(value: numbers.Number) -> Any:
    return 0


@default_for_value.register
def _(value: str) -> str:
    return ""


@default_for_value.register
def _(value: bytes) -> bytes:
    return b""


@default_for_value.register
def _(value: bytearray) -> bytearray:
    return bytearray()


@default_for_value.register
def _(value: list) -> list:
    return []


@default_for_value.register
def _(value: tuple) -> tuple:
    return ()


@default_for_value.register
def _(value: set) -> set:
    return set()


@default_for_value.register
def _(value: frozenset) -> frozenset:
    return frozenset()


@default_for_value.register
def _(value: collections.abc.Mapping) -> dict:
    return {}


def default_for_annotation(annotation: Any) -> Any:
    """Return the reset value for a member known only by its type annotation.

    ``X | None``, unions, ``Any``, ``ClassVar`` and annotations that could not
    be resolved (plain strings) give ``None``; builtin scalars and containers,
    parametrised or not, give their empty value; other classes give an empty
    generic object.
    """
    origin = typing.get_origin(annotation)
    if origin is typing.Annotated:
        return default_for_annotation(typing.get_args(annotation)[0])
    if origin is not None:
        annotation = origin

    if annotation is typing.Any or annotation is types.UnionType or not isinstance(annotation, type):
        return None
    factory = _EMPTY_FACTORIES.get(annotation)
    if factory is not None:
        return factory()
    for builtin, builtin_factory in _EMPTY_FACTORIES.items():
        if issubclass(annotation, builtin):
            return builtin_factory()
    for abstract, abstract_factory in _ABSTRACT_FACTORIES:
        if issubclass(annotation, abstract):
            return abstract_factory()
    return types.SimpleNamespace()
