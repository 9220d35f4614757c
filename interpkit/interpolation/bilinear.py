"""Two-dimensional (bilinear) interpolation.

Bilinear interpolation is separable: interpolate along y at both x anchors,
then interpolate the two intermediate values along x. Degenerate axes
collapse the computation to one dimension (or to a single corner value) so a
zero-width cell never divides by zero.
"""

from __future__ import annotations

from typing import Any, Sequence

import pandas as pd

from interpkit.errors import SizeMismatchError
from interpkit.interpolation.linear import linear
from interpkit.numeric import as_grid, as_sequence, check_number
from interpkit.search import search_nearest_id


def bilinear(
    target_x: Any,
    x1: Any,
    x2: Any,
    target_y: Any,
    y1: Any,
    y2: Any,
    val_x1y1: Any,
    val_x1y2: Any,
    val_x2y1: Any,
    val_x2y2: Any,
) -> Any:
    """Interpolate over the rectangle spanned by ``(x1, x2)`` and ``(y1, y2)``.

    Degenerate anchors are handled in this order:

    1. ``x1 == x2`` and ``y1 == y2``: return ``val_x1y1``.
    2. ``x1 == x2``: interpolate along y between ``val_x1y1`` and ``val_x1y2``.
    3. ``y1 == y2``: interpolate along x between ``val_x1y1`` and ``val_x2y1``.

    Args:
        target_x: Abscissa to evaluate.
        x1: Lower x anchor.
        x2: Higher x anchor.
        target_y: Ordinate to evaluate.
        y1: Lower y anchor.
        y2: Higher y anchor.
        val_x1y1: Corner value at ``(x1, y1)``.
        val_x1y2: Corner value at ``(x1, y2)``.
        val_x2y1: Corner value at ``(x2, y1)``.
        val_x2y2: Corner value at ``(x2, y2)``.

    Returns:
        Interpolated value in the common kind of the operands.

    Raises:
        TypeError: If any operand is not numeric.

    References:
        Separable bilinear interpolation on a rectangular cell.
    """
    for name, value in (
        ("target_x", target_x),
        ("x1", x1),
        ("x2", x2),
        ("target_y", target_y),
        ("y1", y1),
        ("y2", y2),
        ("val_x1y1", val_x1y1),
        ("val_x1y2", val_x1y2),
        ("val_x2y1", val_x2y1),
        ("val_x2y2", val_x2y2),
    ):
        check_number(value, name)

    if x1 == x2:
        if y1 == y2:
            return val_x1y1
        return linear(target_y, y1, y2, val_x1y1, val_x1y2)
    if y1 == y2:
        return linear(target_x, x1, x2, val_x1y1, val_x2y1)

    at_x1 = linear(target_y, y1, y2, val_x1y1, val_x1y2)
    at_x2 = linear(target_y, y1, y2, val_x2y1, val_x2y2)
    return linear(target_x, x1, x2, at_x1, at_x2)


def bilinear2(
    target_x: Any,
    target_y: Any,
    x_samples: Sequence,
    y_samples: Sequence,
    grid: Sequence,
) -> Any:
    """Interpolate from a rectangular value table indexed ``grid[x][y]``.

    Args:
        target_x: Abscissa to evaluate.
        target_y: Ordinate to evaluate.
        x_samples: Ascending x samples; one grid row per sample.
        y_samples: Ascending y samples; one grid column per sample.
        grid: Value table (list of rows, 2-D NumPy array or DataFrame values).

    Returns:
        Interpolated value.

    Raises:
        SizeMismatchError: If the number of rows differs from ``x_samples`` or
            either bracketing row differs in length from ``y_samples``.
        OutOfRangeError: If either target lies outside its sample axis.

    Note:
        Only the two rows selected by the x bracket are checked for length.
        Axes are bracketed independently.
    """
    x_samples = as_sequence(x_samples)
    y_samples = as_sequence(y_samples)
    grid = as_grid(grid)
    if len(x_samples) != len(grid):
        raise SizeMismatchError(len(x_samples), len(grid))

    x_lower, x_higher = search_nearest_id(target_x, x_samples)
    for row in (grid[x_higher], grid[x_lower]):
        if len(y_samples) != len(row):
            raise SizeMismatchError(len(y_samples), len(row))

    y_lower, y_higher = search_nearest_id(target_y, y_samples)
    return bilinear(
        target_x,
        x_samples[x_lower],
        x_samples[x_higher],
        target_y,
        y_samples[y_lower],
        y_samples[y_higher],
        grid[x_lower][y_lower],
        grid[x_lower][y_higher],
        grid[x_higher][y_lower],
        grid[x_higher][y_higher],
    )


def bilinear_frame(target_x: Any, target_y: Any, frame: pd.DataFrame) -> Any:
    """Run :func:`bilinear2` over a DataFrame lookup table.

    The index holds the x samples and the column labels the y samples; both
    must be numeric and sorted ascending.
    """
    check_number(target_x, "target_x")
    check_number(target_y, "target_y")
    return bilinear2(target_x, target_y, frame.index, frame.columns, frame)
