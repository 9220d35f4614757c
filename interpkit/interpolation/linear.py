"""One-dimensional linear interpolation.

Two forms are provided:
- :func:`linear` evaluates the line through two anchor points, and
- :func:`linear2` looks the anchors up in a sample table first.

:func:`linear_frame` runs the table lookup over two columns of a
``pandas.DataFrame``, the usual container for calibration tables.
"""

from __future__ import annotations

from typing import Any, Sequence

import pandas as pd

from interpkit.errors import SizeMismatchError
from interpkit.numeric import as_sequence, check_number, narrow, result_kind, widen
from interpkit.search import search_nearest_id


def linear(target_x: Any, x1: Any, x2: Any, val1: Any, val2: Any) -> Any:
    """Interpolate linearly between ``(x1, val1)`` and ``(x2, val2)``.

    The line through both anchors is evaluated at ``target_x`` on widened
    floats and the result is narrowed to the common kind of the operands, so
    integer inputs give a truncated integer result.

    Args:
        target_x: Abscissa to evaluate.
        x1: First anchor abscissa.
        x2: Second anchor abscissa.
        val1: Value at ``x1``.
        val2: Value at ``x2``.

    Returns:
        Interpolated value. When ``x1 == x2`` the anchors are degenerate and
        ``val1`` is returned unchanged.

    Raises:
        TypeError: If any operand is not numeric.

    Note:
        Targets outside ``[x1, x2]`` are extrapolated along the same line.
    """
    kind = result_kind(target_x, x1, x2, val1, val2)
    if x1 == x2:
        return val1

    t = widen(target_x)
    x1_f = widen(x1)
    x2_f = widen(x2)
    v1 = widen(val1)
    v2 = widen(val2)

    # Weighted form keeps both anchors exact: each weight is 1 or 0 there.
    span = x2_f - x1_f
    result = v1 * ((x2_f - t) / span) + v2 * ((t - x1_f) / span)
    return narrow(result, kind)


def linear2(target_x: Any, samples: Sequence, values: Sequence) -> Any:
    """Interpolate ``target_x`` from a table of samples and parallel values.

    Args:
        target_x: Abscissa to evaluate.
        samples: Ascending sample abscissae.
        values: Values parallel to ``samples``.

    Returns:
        Interpolated value. An exact hit on a sample returns that sample's
        stored value unchanged.

    Raises:
        SizeMismatchError: If ``samples`` and ``values`` differ in length.
        OutOfRangeError: If ``target_x`` lies outside the sampled domain.
    """
    samples = as_sequence(samples)
    values = as_sequence(values)
    if len(samples) != len(values):
        raise SizeMismatchError(len(samples), len(values))

    lower, higher = search_nearest_id(target_x, samples)
    return linear(
        target_x, samples[lower], samples[higher], values[lower], values[higher]
    )


def linear_frame(
    target_x: Any, frame: pd.DataFrame, x_col: str, value_col: str
) -> Any:
    """Run :func:`linear2` over two columns of a DataFrame.

    Args:
        target_x: Abscissa to evaluate.
        frame (pandas.DataFrame): Table sorted ascending by ``x_col``.
        x_col (str): Column holding the sample abscissae.
        value_col (str): Column holding the values.

    Raises:
        KeyError: If either column is missing.
        OutOfRangeError: If ``target_x`` lies outside the sampled domain.
    """
    check_number(target_x, "target_x")
    missing = [col for col in (x_col, value_col) if col not in frame.columns]
    if missing:
        raise KeyError(f"Missing columns for interpolation: {missing}")
    return linear2(target_x, frame[x_col], frame[value_col])
