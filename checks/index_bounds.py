"""Index and position checks raising ``OutOfBoundsError``."""

from __future__ import annotations

from typing import TypeVar, overload

import numpy as np

from .errors import MessageSource, OutOfBoundsError, build_error
from .kinds import Index

T = TypeVar("T")


@overload
def check(result: int, condition: bool, message: MessageSource = ...) -> int: ...
@overload
def check(result: np.int32, condition: bool, message: MessageSource = ...) -> np.int32: ...
@overload
def check(result: np.int64, condition: bool, message: MessageSource = ...) -> np.int64: ...
@overload
def check(result: T, condition: bool, message: MessageSource = ...) -> T: ...


def check(result, condition, message=None):
    """Return ``result`` if ``condition`` holds, else raise ``OutOfBoundsError``."""
    if condition:
        return result

    raise build_error(OutOfBoundsError, message)


def check_range(index: Index, size: Index, message: MessageSource = None) -> Index:
    """Check ``0 <= index < size`` and return ``index``.

    Without an explicit message the failure reads ``index <i> out of [0,<size>)``.
    """
    if message is None:
        message = lambda: f"index {index} out of [0,{size})"  # noqa: E731
    return check(index, 0 <= index < size, message)


__all__ = ["check", "check_range"]
