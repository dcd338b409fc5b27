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
"""Tests for mock_instance() descriptor."""

from __future__ import annotations

import pytest

from flymock.kernel.exceptions import ContractViolationException
from flymock.mock.arguments import ConstructorArguments
from flymock.mock.mock import Mock
from flymock.mock.spy import is_spy
from flymock.testing.mock import MockInstanceDescriptor, mock_instance


class OrderRepository:
    table: str

    def __init__(self) -> None:
        self.table = "orders"

    def count(self) -> int:
        return 10


class TestMockInstanceDescriptor:
    def test_returns_mock(self):
        class MyTest:
            repo = mock_instance(OrderRepository)

        test = MyTest()
        assert isinstance(test.repo, Mock)
        assert isinstance(test.repo.instance, OrderRepository)
        assert is_spy(test.repo.instance.count)

    def test_each_instance_gets_own_mock(self):
        class MyTest:
            repo = mock_instance(OrderRepository)

        assert MyTest().repo is not MyTest().repo

    def test_same_instance_returns_same_mock(self):
        class MyTest:
            repo = mock_instance(OrderRepository)

        test = MyTest()
        assert test.repo is test.repo

    def test_class_access_returns_descriptor(self):
        class MyTest:
            repo = mock_instance(OrderRepository)

        assert isinstance(MyTest.repo, MockInstanceDescriptor)

    def test_target_property(self):
        desc = mock_instance(OrderRepository)
        assert isinstance(desc, MockInstanceDescriptor)
        assert desc.target is OrderRepository

    def test_call_constructor_and_arguments(self):
        class MyTest:
            repo = mock_instance(
                OrderRepository,
                call_constructor=True,
                arguments=ConstructorArguments().map("table", "archive"),
            )

        test = MyTest()
        assert test.repo.instance.table == "archive"
        assert test.repo.instance.count() == 10

    def test_stubbing_through_descriptor(self):
        class MyTest:
            repo = mock_instance(OrderRepository)

        test = MyTest()
        test.repo.setup_method("count").and_return(2)
        assert test.repo.instance.count() == 2

    def test_strict_rejects_unknown_member_names(self):
        class MyTest:
            repo = mock_instance(OrderRepository, strict=True)

        test = MyTest()
        assert test.repo.strict is True
        with pytest.raises(ContractViolationException, match="has no member 'unknown'"):
            test.repo.map_property("unknown", 1)

    def test_strict_rejects_unknown_argument_names(self):
        class MyTest:
            repo = mock_instance(
                OrderRepository,
                strict=True,
                arguments=ConstructorArguments().map("unknown", 1),
            )

        with pytest.raises(ContractViolationException):
            MyTest().repo

    def test_lenient_by_default(self):
        class MyTest:
            repo = mock_instance(OrderRepository)

        test = MyTest()
        assert test.repo.strict is False
        assert test.repo.map_property("unknown", 1).instance.unknown == 1
