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
"""FlyMock — a test-double factory.

Turns any concrete class into a mock whose methods are spies and whose data
members are reset to type-derived defaults::

    from flymock import ConstructorArguments, MockBuilder

    mock = MockBuilder().create_instance(Bar, ConstructorArguments().map("name", "bar"))
    mock.setup_method("bar").and_return("spied!")
"""

from flymock.core.config import Config
from flymock.kernel.exceptions import (
    ContractViolationException,
    FlyMockException,
    InvalidArgumentException,
)
from flymock.mock import (
    BuilderProperties,
    ConstructorArguments,
    Mock,
    MockBuilder,
    Spy,
    StubbedMethod,
    is_spy,
)
from flymock.testing import mock_instance

__version__ = "0.1.0"

__all__ = [
    "BuilderProperties",
    "Config",
    "ConstructorArguments",
    "ContractViolationException",
    "FlyMockException",
    "InvalidArgumentException",
    "Mock",
    "MockBuilder",
    "Spy",
    "StubbedMethod",
    "is_spy",
    "mock_instance",
]
