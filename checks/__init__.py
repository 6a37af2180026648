# Runtime condition checks: each helper returns its value or raises a categorized error.
from . import argument, class_cast, constraint, index_bounds, state_condition
from .errors import (
    CheckError,
    ClassCastError,
    IllegalStateError,
    InvalidArgumentError,
    OutOfBoundsError,
)
from .kinds import INDEX_KINDS, NUMERIC_KINDS, kind_of

__all__ = [
    "CheckError",
    "ClassCastError",
    "INDEX_KINDS",
    "IllegalStateError",
    "InvalidArgumentError",
    "NUMERIC_KINDS",
    "OutOfBoundsError",
    "argument",
    "class_cast",
    "constraint",
    "index_bounds",
    "kind_of",
    "state_condition",
]
