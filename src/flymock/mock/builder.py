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
"""MockBuilder — materializes mock instances of arbitrary classes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from flymock.core.config import Config, config_properties
from flymock.kernel.exceptions import ContractViolationException, InvalidArgumentException
from flymock.logging.structlog_adapter import configure_logging, get_logger
from flymock.mock.arguments import ConstructorArguments
from flymock.mock.defaults import default_for_annotation, default_for_value
from flymock.mock.members import Member, MemberKind, assign_member, discover_members
from flymock.mock.mock import Mock
from flymock.mock.spy import make_spy

logger = get_logger(__name__)

T = TypeVar("T")


@config_properties(prefix="flymock.builder")
@dataclass
class BuilderProperties:
    """Builder settings bound from the ``flymock.builder`` config section."""

    call_constructor: bool = False
    strict: bool = False


class MockBuilder(Generic[T]):
    """Builds :class:`Mock` objects from concrete classes.

    Every method becomes a spy and every data member is reset to a default
    derived from its original value's type. Constructor arguments are applied
    last and always win.

    Args:
        call_constructor: Run the class's real ``__init__`` (with no
            arguments) instead of only allocating the instance. Exceptions it
            raises propagate unchanged.
        strict: Reject constructor arguments and ``map_property`` names that
            are not members of the mocked class.
    """

    def __init__(self, call_constructor: bool = False, *, strict: bool = False) -> None:
        self._call_constructor = call_constructor
        self._strict = strict

    @classmethod
    def from_config(cls, config: Config) -> MockBuilder[Any]:
        """Create a builder from the ``flymock.builder`` section of *config*.

        The ``flymock.logging`` section of the same config is applied to the
        ``flymock`` logger namespace.
        """
        configure_logging(config)
        properties = config.bind(BuilderProperties)
        return cls(properties.call_constructor, strict=properties.strict)

    @property
    def call_constructor(self) -> bool:
        return self._call_constructor

    @property
    def strict(self) -> bool:
        return self._strict

    def with_call_constructor(self, flag: bool = True) -> MockBuilder[T]:
        self._call_constructor = flag
        return self

    def with_strict(self, flag: bool = True) -> MockBuilder[T]:
        self._strict = flag
        return self

    def create_instance(self, cls: type[T], args: ConstructorArguments | None = None) -> Mock[T]:
        """Materialize *cls* and turn the result into a :class:`Mock`.

        Raises:
            InvalidArgumentException: *cls* is not a class, cannot be
                allocated without its constructor, or its instances have no
                ``__dict__`` to hold spies.
            ContractViolationException: in strict mode, *args* names a member
                the class does not declare.
        """
        instance = self._materialize(cls)
        if not hasattr(instance, "__dict__"):
            raise InvalidArgumentException(
                f"Cannot mock {cls.__qualname__}: instances have no __dict__",
                context={"type": cls.__qualname__},
            )

        members = discover_members(instance)
        methods = 0
        for member in members.values():
            if member.kind is MemberKind.METHOD:
                spy = make_spy(f"{cls.__qualname__}.{member.name}", member.value, call_through=self._call_constructor)
                assign_member(instance, member.name, spy)
                methods += 1
            elif member.kind is MemberKind.DATA:
                assign_member(instance, member.name, _default_for(member))

        if args is not None:
            self._apply_arguments(instance, members, args)

        logger.debug(
            "mock_created",
            target=cls.__qualname__,
            methods=methods,
            members=len(members),
            call_constructor=self._call_constructor,
        )
        return Mock(instance, members, strict=self._strict)

    def _materialize(self, cls: type[T]) -> T:
        if not isinstance(cls, type):
            raise InvalidArgumentException(
                f"Cannot mock {cls!r}: not a class",
                context={"target": repr(cls)},
            )
        if self._call_constructor:
            return cls()
        try:
            # Allocation only, as copy and pickle do; __init__ never runs.
            return cls.__new__(cls)
        except TypeError as exc:
            raise InvalidArgumentException(
                f"Cannot allocate {cls.__qualname__} without its constructor: {exc}",
                context={"type": cls.__qualname__},
            ) from exc

    def _apply_arguments(self, instance: object, members: dict[str, Member], args: ConstructorArguments) -> None:
        for name, value in args.arguments.items():
            if self._strict and name not in members:
                raise ContractViolationException(
                    f"Constructor argument '{name}' is not a member of {type(instance).__qualname__}",
                    context={"member": name, "type": type(instance).__qualname__},
                )
            assign_member(instance, name, value)


def _default_for(member: Member) -> Any:
    if member.has_value:
        return default_for_value(member.value)
    return default_for_annotation(member.annotation)
