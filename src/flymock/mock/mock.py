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
"""Mock and StubbedMethod — the fluent surface over a materialized instance."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, Generic, TypeVar

from flymock.kernel.exceptions import ContractViolationException
from flymock.mock import spy as spies
from flymock.mock.members import assign_member
from flymock.mock.spy import Spy

T = TypeVar("T")


class Mock(Generic[T]):
    """A materialized mock instance plus the operations that keep customizing it.

    ``instance`` is the same object for the mock's whole lifetime; every
    operation mutates it in place and returns the mock for chaining::

        mock = (
            MockBuilder[Repository]()
            .create_instance(SqlRepository)
            .map_property("table", "orders")
            .setup_method("count").and_return(3)
        )
        service = OrderService(mock.instance)
    """

    def __init__(self, instance: T, member_names: Iterable[str] = (), *, strict: bool = False) -> None:
        self.instance = instance
        self._member_names = frozenset(member_names)
        self._strict = strict

    @property
    def member_names(self) -> frozenset[str]:
        """Names of every member discovered when the mock was created."""
        return self._member_names

    @property
    def strict(self) -> bool:
        return self._strict

    def map_property(self, name: str, value: Any) -> Mock[T]:
        """Assign *value* to ``instance.<name>``."""
        if self._strict and name not in self._member_names:
            raise ContractViolationException(
                f"{type(self.instance).__qualname__} has no member '{name}'",
                context={"member": name, "type": type(self.instance).__qualname__},
            )
        assign_member(self.instance, name, value)
        return self

    def setup_method(self, name: str) -> StubbedMethod[T]:
        """Start configuring the spy installed for method *name*."""
        if not spies.is_spy(getattr(self.instance, name, None)):
            raise ContractViolationException(
                f"'{name}' is not a mocked method of {type(self.instance).__qualname__}",
                context={"member": name, "type": type(self.instance).__qualname__},
            )
        return StubbedMethod(self, name)

    def spy(self, name: str) -> Spy:
        """Shortcut for ``setup_method(name).get_spy()``."""
        return self.setup_method(name).get_spy()

    def __repr__(self) -> str:
        return f"Mock({type(self.instance).__qualname__})"


class StubbedMethod(Generic[T]):
    """Configures the spy of one method on one mock.

    Each ``and_*`` call replaces the previously configured behaviour and
    returns the owning mock.
    """

    __slots__ = ("_mock", "_name")

    def __init__(self, mock: Mock[T], name: str) -> None:
        self._mock = mock
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def and_return(self, value: Any) -> Mock[T]:
        """Make every call return *value* without running the original."""
        spies.return_value(self.get_spy(), value)
        return self._mock

    def and_call_fake(self, replacement: Callable[..., Any]) -> Mock[T]:
        """Delegate every call, arguments unchanged, to *replacement*."""
        if not callable(replacement):
            raise ContractViolationException(
                f"Fake for '{self._name}' must be callable, got {type(replacement).__name__}",
                context={"member": self._name},
            )
        spies.call_fake(self.get_spy(), replacement)
        return self._mock

    def and_call_through(self) -> Mock[T]:
        """Run the original method again on every call."""
        spies.call_through(self.get_spy())
        return self._mock

    def and_raise(self, error: BaseException | type[BaseException]) -> Mock[T]:
        """Raise *error* on every call."""
        spies.raise_error(self.get_spy(), error)
        return self._mock

    def get_spy(self) -> Spy:
        """The underlying spy, for call assertions."""
        return getattr(self._mock.instance, self._name)
