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
"""ConstructorArguments — name/value overrides applied to a freshly built mock."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any


class ConstructorArguments:
    """Accumulates member overrides that bypass the real constructor's wiring.

    Calls chain, and the last value mapped for a name wins::

        args = ConstructorArguments().map("name", "alice").map("active", True)
        MockBuilder().create_instance(User, args)
    """

    def __init__(self, **initial: Any) -> None:
        self._arguments: dict[str, Any] = dict(initial)

    def map(self, name: str, value: Any) -> ConstructorArguments:
        """Record *value* for member *name*."""
        self._arguments[name] = value
        return self

    @property
    def arguments(self) -> Mapping[str, Any]:
        """Read-only view of the current name to value mapping."""
        return MappingProxyType(self._arguments)

    def __contains__(self, name: object) -> bool:
        return name in self._arguments

    def __iter__(self) -> Iterator[str]:
        return iter(self._arguments)

    def __len__(self) -> int:
        return len(self._arguments)

    def __repr__(self) -> str:
        return f"ConstructorArguments({self._arguments!r})"
