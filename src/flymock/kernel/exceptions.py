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
"""Unified exception hierarchy for FlyMock.

All library exceptions inherit from FlyMockException so callers can catch
every mock-construction error in one place, or a specific subclass for
targeted handling.

Categories:
- ContractViolationException: caller misuse of a mock (unknown member, not a method)
- InvalidArgumentException: a target that cannot be materialized as a mock

Exceptions raised by a real constructor are never wrapped.
"""

from __future__ import annotations


# =============================================================================
# Base Exception
# =============================================================================


class FlyMockException(Exception):
    """Base exception for all FlyMock errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "CONTRACT_VIOLATION").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Caller Errors
# =============================================================================


class ContractViolationException(FlyMockException):
    """A mock was used in a way its mocked shape does not allow."""

    def __init__(self, message: str, context: dict | None = None) -> None:
        super().__init__(message, code="CONTRACT_VIOLATION", context=context)


class InvalidArgumentException(FlyMockException):
    """The mock target is not a class that can be materialized."""

    def __init__(self, message: str, context: dict | None = None) -> None:
        super().__init__(message, code="INVALID_ARGUMENT", context=context)
