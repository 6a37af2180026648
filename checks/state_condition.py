"""State invariant checks."""

from __future__ import annotations

from .errors import IllegalStateError, MessageSource, build_error


def check(condition: bool, message: MessageSource = None) -> None:
    """Raise ``IllegalStateError`` unless ``condition`` holds."""
    if condition:
        return

    raise build_error(IllegalStateError, message)


__all__ = ["check"]
