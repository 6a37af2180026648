"""Generic constraint checks with caller-supplied exceptions.

Every check takes a zero-argument ``error_supplier`` that builds the exception
to raise; it is called exactly once, and only when the constraint fails.
The other modules are this shape with a fixed failure category.
"""

from __future__ import annotations

from typing import Callable, TypeVar, Union, overload

from .kinds import NumericT

T = TypeVar("T")

ErrorSupplier = Callable[[], BaseException]


def check(condition: bool, error_supplier: ErrorSupplier) -> None:
    """Raise ``error_supplier()`` unless ``condition`` holds."""
    assert error_supplier is not None, "Exception supplier must not be None."
    if condition:
        return

    raise error_supplier()


@overload
def check_value(result: NumericT, condition: bool, error_supplier: ErrorSupplier) -> NumericT: ...
@overload
def check_value(result: T, condition: Union[bool, Callable[[T], bool]], error_supplier: ErrorSupplier) -> T: ...


def check_value(result, condition, error_supplier):
    """Return ``result`` if the constraint holds, else raise ``error_supplier()``.

    ``condition`` is a ``bool`` or a predicate, called once with ``result``.
    """
    assert error_supplier is not None, "Exception supplier must not be None."
    if condition(result) if callable(condition) else condition:
        return result

    raise error_supplier()


__all__ = ["ErrorSupplier", "check", "check_value"]
