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
"""Spy primitive for mocked methods, backed by :mod:`unittest.mock`.

A spy is a ``unittest.mock.Mock`` (``AsyncMock`` for coroutine functions)
that always wraps the original bound method. Exactly one behaviour is active
at a time and the most recent configuration wins:

- pass-through: ``return_value`` is ``DEFAULT``, calls reach the wrapped method
- fixed return: ``return_value`` holds the value
- fake / raise: ``side_effect`` holds the replacement callable or exception
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any
from unittest.mock import DEFAULT, AsyncMock, Mock

Spy = Mock


def make_spy(name: str, original: Callable[..., Any] | None = None, *, call_through: bool = True) -> Spy:
    """Create a spy named *name* standing in for *original*.

    With ``call_through=False`` (or no original) the spy starts as a stub
    returning ``None``; :func:`call_through` switches it to the original later.
    """
    spy_cls = AsyncMock if original is not None and inspect.iscoroutinefunction(original) else Mock
    spy = spy_cls(name=name, wraps=original)
    if original is None or not call_through:
        spy.return_value = None
    return spy


def is_spy(value: Any) -> bool:
    """Whether *value* is a spy installed by :func:`make_spy`."""
    return isinstance(value, Mock)


def return_value(spy: Spy, value: Any) -> None:
    spy.side_effect = None
    spy.return_value = value


def call_fake(spy: Spy, replacement: Callable[..., Any]) -> None:
    spy.side_effect = replacement


def call_through(spy: Spy) -> None:
    spy.side_effect = None
    spy.return_value = DEFAULT


def raise_error(spy: Spy, error: BaseException | type[BaseException]) -> None:
    spy.side_effect = error
