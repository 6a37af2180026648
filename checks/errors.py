"""Failure categories raised by the check helpers."""

from __future__ import annotations

from typing import Callable, Optional, Union

MessageSource = Union[None, str, Callable[[], str]]


class CheckError(Exception):
    """Common base of every fixed-category check failure."""

    @property
    def message(self) -> Optional[str]:
        """Message attached to the failure, or None when raised without one."""
        return self.args[0] if self.args else None


class InvalidArgumentError(CheckError, ValueError):
    """An argument does not satisfy its pre-condition."""


class OutOfBoundsError(CheckError, IndexError):
    """An index or position lies outside the permitted range."""


class IllegalStateError(CheckError, RuntimeError):
    """An object or process is not in the state an operation requires."""


class ClassCastError(CheckError, TypeError):
    """A value cannot be narrowed to the requested type."""


def resolve_message(message: MessageSource) -> Optional[str]:
    """Materialize a message source; a supplier is invoked exactly once."""
    if message is None or isinstance(message, str):
        return message
    return message()


def build_error(category: Callable[..., CheckError], message: MessageSource) -> CheckError:
    # No message means no args at all, never an empty string.
    text = resolve_message(message)
    if text is None:
        return category()
    return category(text)


__all__ = [
    "CheckError",
    "ClassCastError",
    "IllegalStateError",
    "InvalidArgumentError",
    "MessageSource",
    "OutOfBoundsError",
    "build_error",
    "resolve_message",
]
