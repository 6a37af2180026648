"""Type-narrowing checks.

``check`` trusts the caller's verdict (a precomputed ``bool`` or a predicate)
and hands the value back unchanged for use as the narrower type; it does not
verify the type itself, so a wrong verdict surfaces later, where the value is
used. ``check_type`` performs the verification at runtime with ``isinstance``.

Error suppliers and mappings must not be ``None``. This is asserted only, so
the guard disappears when Python runs with ``-O``.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Tuple, Type, TypeVar, Union

from .errors import ClassCastError

T = TypeVar("T")

Castable = Union[bool, Callable[[Any], bool]]


def check(
    result: Any,
    castable: Castable,
    error_supplier: Optional[Callable[[], BaseException]] = None,
) -> Any:
    """Return ``result`` if it may be narrowed, else raise.

    ``castable`` is either a ``bool`` or a predicate called once with
    ``result``. Without ``error_supplier`` a bare ``ClassCastError`` is raised;
    the predicate form requires a supplier.
    """
    if callable(castable):
        assert error_supplier is not None, "Exception supplier must not be None."
        if castable(result):
            return result
        raise error_supplier()

    if castable:
        return result

    if error_supplier is None:
        raise ClassCastError()
    raise error_supplier()


def check_type(
    result: Any,
    target_type: Union[Type[T], Tuple[type, ...]],
    error_mapping: Callable[[ClassCastError], BaseException],
) -> Optional[T]:
    """Narrow ``result`` to ``target_type``, verified with ``isinstance``.

    ``target_type`` is a class or a tuple of classes, as ``isinstance`` takes.
    Subscripted generics such as ``list[int]`` are rejected by ``isinstance``
    itself with a plain ``TypeError`` that does not pass through the mapping.

    ``None`` narrows to any type. A mismatch builds a ``ClassCastError`` and
    raises whatever ``error_mapping`` returns for it, chained to the mismatch.
    """
    assert error_mapping is not None, "Exception mapping must not be None."

    if result is None or isinstance(result, target_type):
        return result

    mismatch = ClassCastError(f"Cannot cast {type(result).__name__} to {_type_name(target_type)}")
    mapped = error_mapping(mismatch)
    if mapped is mismatch:
        raise mismatch
    raise mapped from mismatch


def _type_name(target_type: Union[type, Tuple[type, ...]]) -> str:
    if isinstance(target_type, tuple):
        return " | ".join(_type_name(t) for t in target_type)
    return getattr(target_type, "__name__", repr(target_type))


__all__ = ["Castable", "check", "check_type"]
