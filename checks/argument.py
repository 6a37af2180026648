"""Argument pre-condition checks.

Typical use keeps the check inline with the call it guards::

    def foo(i: int) -> None:
        bar(argument.check(i, i > 0, lambda: f"Requiring a positive number (given: {i})."))

A failed check raises :class:`~checks.errors.InvalidArgumentError`, a
``ValueError``; the message is attached verbatim and a message supplier is
only called when the check fails.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar, overload

from .errors import ClassCastError, InvalidArgumentError, MessageSource, build_error
from .kinds import NumericT

T = TypeVar("T")


@overload
def check(result: NumericT, condition: bool, message: MessageSource = ...) -> NumericT: ...
@overload
def check(result: T, condition: bool, message: MessageSource = ...) -> T: ...


def check(result, condition, message=None):
    """Return ``result`` if ``condition`` holds, else raise ``InvalidArgumentError``.

    ``message`` may be omitted, a string, or a zero-argument callable
    producing the string on failure.
    """
    if condition:
        return result

    raise build_error(InvalidArgumentError, message)


def cast(result: Any, castable: bool, error_supplier: Optional[Callable[[], BaseException]] = None) -> Any:
    """Return ``result`` for use as a narrower type when ``castable`` holds.

    The narrowing is unchecked: ``castable`` is trusted, typically the result
    of an ``isinstance`` test the caller already made. On failure raises
    ``ClassCastError`` or the exception produced by ``error_supplier``.
    """
    if castable:
        return result

    if error_supplier is None:
        raise ClassCastError()
    raise error_supplier()


__all__ = ["cast", "check"]
