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
"""Tests for member discovery across class hierarchies."""

from __future__ import annotations

import abc
import functools
from dataclasses import dataclass
from typing import ClassVar, Protocol

import pytest

from flymock.kernel.exceptions import ContractViolationException
from flymock.mock.members import MISSING, MemberKind, assign_member, discover_members


class Base:
    base_field: int
    shared = "base"

    def base_method(self) -> str:
        return "base"

    def overridden(self) -> str:
        return "base"


class Child(Base):
    child_field: str
    shared = "child"
    registry: ClassVar[dict[str, int]] = {}

    def __init__(self) -> None:
        self.base_field = 1
        self.child_field = "child"
        self.runtime_only = 3.0

    def overridden(self) -> str:
        return "child"

    @property
    def computed(self) -> int:
        raise AssertionError("getter must not run")

    @functools.cached_property
    def cached(self) -> int:
        raise AssertionError("cached getter must not run")


class Readable(Protocol):
    def read(self) -> bytes: ...


class FileReader(Readable, abc.ABC):
    def read(self) -> bytes:
        return b""


class TestDiscoverMembers:
    def test_includes_inherited_and_own_names(self):
        members = discover_members(Child.__new__(Child))
        assert {"base_field", "child_field", "shared", "base_method", "overridden"} <= members.keys()

    def test_names_are_unique_across_levels(self):
        names = list(discover_members(Child.__new__(Child)))
        assert len(names) == len(set(names))

    def test_most_derived_declaration_wins(self):
        members = discover_members(Child.__new__(Child))
        assert members["shared"].value == "child"

    def test_methods_and_data_are_classified(self):
        members = discover_members(Child.__new__(Child))
        assert members["base_method"].kind is MemberKind.METHOD
        assert members["shared"].kind is MemberKind.DATA

    def test_annotation_only_members_have_no_value(self):
        member = discover_members(Child.__new__(Child))["child_field"]
        assert member.kind is MemberKind.DATA
        assert member.value is MISSING
        assert not member.has_value
        assert member.annotation is str

    def test_constructed_instance_contributes_runtime_attributes(self):
        members = discover_members(Child())
        assert members["runtime_only"].value == 3.0
        assert members["child_field"].value == "child"

    def test_properties_are_descriptors_and_not_evaluated(self):
        members = discover_members(Child())
        assert members["computed"].kind is MemberKind.DESCRIPTOR

    def test_cached_property_is_data_and_not_evaluated(self):
        member = discover_members(Child())["cached"]
        assert member.kind is MemberKind.DATA
        assert not member.has_value

    def test_dunders_and_class_vars_are_skipped(self):
        members = discover_members(Child())
        assert "__init__" not in members
        assert "registry" not in members

    def test_abc_and_protocol_bookkeeping_is_skipped(self):
        members = discover_members(FileReader())
        assert set(members) == {"read"}

    def test_dataclass_fields(self):
        @dataclass
        class Item:
            name: str
            quantity: int = 1

        members = discover_members(Item.__new__(Item))
        assert members["name"].annotation is str
        assert members["quantity"].value == 1

    def test_annotations_resolve_independently(self):
        class Helper:
            pass

        class Account:
            count: int
            helper: Helper

        members = discover_members(Account.__new__(Account))
        assert members["count"].annotation is int
        assert members["helper"].annotation == "Helper"


class TestAssignMember:
    def test_bypasses_setattr_override(self):
        class Frozen:
            def __setattr__(self, name, value):
                raise AttributeError("frozen")

        instance = Frozen()
        assign_member(instance, "value", 1)
        assert instance.value == 1

    def test_read_only_descriptor_is_a_contract_violation(self):
        with pytest.raises(ContractViolationException, match="computed") as exc_info:
            assign_member(Child.__new__(Child), "computed", 1)
        assert exc_info.value.context["member"] == "computed"
