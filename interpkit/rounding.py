"""Round floating-point values to a fixed number of decimal places.

Rounding scales by ``10**decimal_places`` in the value's own float kind, rounds
half away from zero and scales back. Note that this differs from Python's
built-in ``round``, which rounds half to even:

    >>> round_values(1, 0.25)
    (0.3,)
    >>> round(0.25, 1)
    0.2
"""

from __future__ import annotations

import math
import warnings
from collections.abc import MutableSequence
from typing import Any, Tuple

import numpy as np

from .numeric import check_float


def _check_decimal_places(decimal_places: int) -> None:
    if isinstance(decimal_places, bool) or not isinstance(
        decimal_places, (int, np.integer)
    ):
        raise TypeError(f"decimal_places must be an int, got {type(decimal_places)}")


def _scale_for(decimal_places: int) -> float:
    # Python ints so the power overflows here rather than inside NumPy.
    try:
        return 10.0 ** int(decimal_places)
    except OverflowError:
        return math.inf


def _warn_unrounded(value: Any, decimal_places: int) -> None:
    warnings.warn(
        f"Scaling {value!r} by 10**{decimal_places} leaves the float range; "
        f"value left unrounded.",
        UserWarning,
        stacklevel=4,
    )


def _half_away_from_zero(x: float) -> int:
    whole = math.trunc(x)
    # x - whole is exact for binary floats.
    if abs(x - whole) >= 0.5:
        whole += 1 if x > 0 else -1
    return whole


def _round_one(value: Any, decimal_places: int) -> Any:
    check_float(value)
    if not math.isfinite(value) or value == 0:
        return value

    kind = type(value)
    with np.errstate(over="ignore"):
        k = kind(_scale_for(decimal_places))
        scaled = value * k
    if not math.isfinite(scaled) or k == 0:
        _warn_unrounded(value, decimal_places)
        return value
    return kind(_half_away_from_zero(float(scaled))) / k


def _round_array(values: np.ndarray, decimal_places: int) -> None:
    with np.errstate(over="ignore", invalid="ignore", divide="ignore"):
        k = values.dtype.type(_scale_for(decimal_places))
        scaled = values * k
        whole = np.trunc(scaled)
        rounded = whole + np.where(np.abs(scaled - whole) >= 0.5, np.sign(scaled), 0)
        result = rounded / k

    finite = np.isfinite(values) & (values != 0)
    overflow = finite & (~np.isfinite(scaled) | (k == 0))
    if overflow.any():
        _warn_unrounded(values[overflow][0], decimal_places)
    update = finite & ~overflow
    values[update] = result[update]


def round_values(decimal_places: int, *values: Any) -> Tuple[Any, ...]:
    """Round each value independently to ``decimal_places`` decimals.

    Args:
        decimal_places (int): Number of decimal places. Negative values round
            to tens, hundreds and so on.
        *values: Floating-point scalars (Python ``float`` or NumPy floating).

    Returns:
        tuple: Rounded values in argument order, each in its input kind.

    Raises:
        TypeError: If ``decimal_places`` is not an int or a value is not a
            floating-point scalar.

    Note:
        Zero, NaN and infinities pass through unchanged. If scaling a finite
        value overflows, a ``UserWarning`` is emitted and the value is returned
        unrounded.
    """
    _check_decimal_places(decimal_places)
    return tuple(_round_one(value, decimal_places) for value in values)


def round_in_place(decimal_places: int, values: Any) -> None:
    """Overwrite every element of ``values`` with its rounded value.

    Args:
        decimal_places (int): Number of decimal places.
        values: A mutable sequence of floats (for example a list) or a NumPy
            array with a floating dtype, of any shape. Arrays are rounded in
            one vectorised pass.

    Raises:
        TypeError: If ``values`` cannot be mutated or holds non-float
            elements.
    """
    _check_decimal_places(decimal_places)
    if isinstance(values, np.ndarray):
        if not np.issubdtype(values.dtype, np.floating):
            raise TypeError(f"values must have a floating dtype, got {values.dtype}")
        _round_array(values, decimal_places)
        return
    if not isinstance(values, MutableSequence):
        raise TypeError(f"values must be a mutable sequence, got {type(values)}")
    for i, value in enumerate(values):
        values[i] = _round_one(value, decimal_places)
