"""Numeric-kind handling shared by every interpolation routine.

Every public routine accepts a family of scalar kinds:

- signed integers: Python ``int`` and any ``numpy.signedinteger``,
- unsigned integers: any ``numpy.unsignedinteger``,
- floating point: Python ``float`` and any ``numpy.floating``.

Booleans are rejected even though ``bool`` subclasses ``int``.

Routines that divide do so on widened Python floats and then narrow the
result back to the kind of their operands. Narrowing is an explicit step
(:func:`narrow`) so the precision lost at the API boundary stays visible:
integer kinds truncate toward zero, exactly like a C-style cast.
"""

from __future__ import annotations

import math
from typing import Any, Sequence

import numpy as np
import pandas as pd


def is_signed_int(value: Any) -> bool:
    """Return ``True`` for Python ``int`` and NumPy signed integer scalars."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, np.signedinteger))


def is_unsigned_int(value: Any) -> bool:
    """Return ``True`` for NumPy unsigned integer scalars."""
    return isinstance(value, np.unsignedinteger)


def is_int(value: Any) -> bool:
    return is_signed_int(value) or is_unsigned_int(value)


def is_float(value: Any) -> bool:
    """Return ``True`` for Python ``float`` and NumPy floating scalars."""
    return isinstance(value, (float, np.floating))


def is_number(value: Any) -> bool:
    return is_int(value) or is_float(value)


def check_number(value: Any, name: str = "value") -> None:
    """Raise ``TypeError`` unless ``value`` is a supported numeric scalar.

    Args:
        value: Candidate scalar.
        name (str, optional): Argument name used in the error message.

    Raises:
        TypeError: If ``value`` is not an integer or floating-point scalar.
    """
    if not is_number(value):
        raise TypeError(f"{name} must be numeric, got {type(value)}")


def check_float(value: Any, name: str = "value") -> None:
    if not is_float(value):
        raise TypeError(f"{name} must be a floating-point value, got {type(value)}")


def result_kind(*values: Any) -> type:
    """Return the scalar kind a computation over ``values`` narrows back to.

    When any operand is a NumPy scalar the kind follows NumPy's promotion
    rules (``numpy.result_type``). Pure-Python operands give ``int`` when
    every operand is an integer and ``float`` otherwise.

    Args:
        *values: Scalar operands of one call.

    Returns:
        type: ``int``, ``float`` or a NumPy scalar type such as
        ``numpy.int32`` or ``numpy.float32``.

    Raises:
        TypeError: If any operand is not a supported numeric scalar.
    """
    for value in values:
        check_number(value)
    if any(isinstance(value, np.generic) for value in values):
        return np.result_type(*values).type
    if all(is_int(value) for value in values):
        return int
    return float


def widen(value: Any) -> float:
    """Convert a scalar to a Python float (IEEE double) for computation."""
    return float(value)


def narrow(value: float, kind: type) -> Any:
    """Convert a widened result back to ``kind``.

    Integer kinds truncate toward zero. Fixed-width NumPy integers may raise
    ``OverflowError`` when the truncated value does not fit.

    Args:
        value (float): Result computed in the widened domain.
        kind (type): Target kind, usually from :func:`result_kind`.

    Returns:
        The value converted to ``kind``.
    """
    if issubclass(kind, (int, np.integer)):
        return kind(math.trunc(value))
    return kind(value)


def as_sequence(values: Any) -> Sequence:
    """Return a positionally indexable view of a 1-D sample container.

    ``pandas.Series`` and ``pandas.Index`` are converted with ``to_numpy()`` so
    label-based indexing never leaks into positional lookups. Lists, tuples
    and NumPy arrays are returned unchanged.
    """
    if isinstance(values, (pd.Series, pd.Index)):
        return values.to_numpy()
    return values


def as_grid(values: Any) -> Sequence:
    """Return a ``[row][column]`` indexable view of a 2-D value table."""
    if isinstance(values, pd.DataFrame):
        return values.to_numpy()
    return values
