"""Locate the pair of sample indices that bracket a target value."""

from __future__ import annotations

from typing import Any, Sequence, Tuple

from .errors import OutOfRangeError
from .numeric import as_sequence, check_number


def search_nearest_id(value: Any, samples: Sequence) -> Tuple[int, int]:
    """Return the indices of the nearest lower and higher samples.

    Adjacent pairs are scanned in order. A pair ``(i, i + 1)`` with
    ``samples[i] < value < samples[i + 1]`` gives ``(i, i + 1)``; an exact hit
    on ``samples[i]`` gives ``(i, i)`` so downstream interpolation collapses to
    that sample. An exact hit on the last sample gives ``(last, last)``.

    Args:
        value: Target scalar.
        samples: Sample sequence sorted ascending (list, tuple, NumPy array
            or pandas Series). Sort order is not checked.

    Returns:
        tuple[int, int]: ``(lower, higher)`` indices into ``samples``.

    Raises:
        OutOfRangeError: If ``value`` is outside ``[samples[0], samples[-1]]``
            or ``samples`` is empty.
        TypeError: If ``value`` is not numeric.

    Note:
        The scan is linear, which suits small calibration tables.
    """
    check_number(value, "value")
    samples = as_sequence(samples)
    n = len(samples)
    if n == 0:
        raise OutOfRangeError(value)

    bracket = None
    for i in range(n - 1):
        if samples[i] < value < samples[i + 1]:
            bracket = (i, i + 1)
            break
        if samples[i] == value:
            bracket = (i, i)
            break

    if samples[n - 1] == value:
        bracket = (n - 1, n - 1)

    if bracket is None:
        raise OutOfRangeError(value, (samples[0], samples[n - 1]))
    return bracket
