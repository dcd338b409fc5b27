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
"""FlyMock Mock — mock materialization, spies and the fluent builder surface."""

from flymock.mock.arguments import ConstructorArguments
from flymock.mock.builder import BuilderProperties, MockBuilder
from flymock.mock.mock import Mock, StubbedMethod
from flymock.mock.spy import Spy, is_spy

__all__ = [
    "BuilderProperties",
    "ConstructorArguments",
    "Mock",
    "MockBuilder",
    "Spy",
    "StubbedMethod",
    "is_spy",
]
