from __future__ import annotations

from typing import Any, Callable, List

import pytest


class CallCounter:
    """Wraps a callable and records every invocation."""

    def __init__(self, fn: Callable[..., Any]) -> None:
        self.fn = fn
        self.calls: List[tuple] = []

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        return self.fn(*args)

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture
def counting() -> Callable[[Callable[..., Any]], CallCounter]:
    return CallCounter


class FailingError(Exception):
    """Exception type private to the tests."""


@pytest.fixture
def failing_error() -> type:
    return FailingError
