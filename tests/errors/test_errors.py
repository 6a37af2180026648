import numpy as np
import pytest

from checks.errors import (
    CheckError,
    ClassCastError,
    IllegalStateError,
    InvalidArgumentError,
    OutOfBoundsError,
    build_error,
    resolve_message,
)
from checks.kinds import NUMERIC_KINDS, NumericT, kind_of


@pytest.mark.parametrize(
    "category, builtin",
    [
        (InvalidArgumentError, ValueError),
        (OutOfBoundsError, IndexError),
        (IllegalStateError, RuntimeError),
        (ClassCastError, TypeError),
    ],
)
def test_categories_extend_builtins(category, builtin):
    assert issubclass(category, builtin)
    assert issubclass(category, CheckError)


def test_message_absent_is_none_not_empty():
    error = build_error(InvalidArgumentError, None)
    assert error.args == ()
    assert error.message is None


def test_empty_message_is_kept():
    error = build_error(IllegalStateError, "")
    assert error.args == ("",)
    assert error.message == ""


def test_resolve_message(counting):
    supplier = counting(lambda: "lazy")
    assert resolve_message(None) is None
    assert resolve_message("fixed") == "fixed"
    assert resolve_message(supplier) == "lazy"
    assert supplier.count == 1


@pytest.mark.parametrize(
    "value, expected",
    [
        (np.int8(1), "int8"),
        (np.int16(1), "int16"),
        (np.int32(1), "int32"),
        (np.int64(1), "int64"),
        (np.float32(1), "float32"),
        (np.float64(1), "float64"),
        ("c", "char"),
        (1, "int"),
        (1.0, "float"),
        ("word", "object"),
        (True, "object"),
        (None, "object"),
    ],
)
def test_kind_of(value, expected):
    assert kind_of(value) == expected


def test_numeric_type_variable_matches_kinds():
    assert NumericT.__constraints__ == NUMERIC_KINDS
