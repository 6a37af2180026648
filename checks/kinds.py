"""Value kinds understood by the checks.

Numeric values keep their own numpy scalar type through every check; the
type variable and aliases here drive the typed overloads of each module.
"""

from __future__ import annotations

from typing import Any, Tuple, Type, TypeVar, Union

import numpy as np

# Order follows the width of the kind: integers, then floating point.
NUMERIC_KINDS: Tuple[Type[np.generic], ...] = (
    np.int8,
    np.int16,
    np.int32,
    np.int64,
    np.float32,
    np.float64,
)

INDEX_KINDS: Tuple[type, ...] = (int, np.int32, np.int64)

# Constrained so an overload over it returns the exact numpy kind it was given.
NumericT = TypeVar("NumericT", np.int8, np.int16, np.int32, np.int64, np.float32, np.float64)
Index = Union[int, np.int32, np.int64]


def kind_of(value: Any) -> str:
    """Name the kind a value is checked as: a numpy kind, char, int, float or object."""
    for kind in NUMERIC_KINDS:
        if isinstance(value, kind):
            return np.dtype(kind).name
    if isinstance(value, str) and len(value) == 1:
        return "char"
    if isinstance(value, bool):
        return "object"
    if isinstance(value, int):
        return "int"
    if isinstance(value, float):
        return "float"
    return "object"


__all__ = ["INDEX_KINDS", "Index", "NUMERIC_KINDS", "NumericT", "kind_of"]
