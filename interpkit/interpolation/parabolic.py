"""Quadratic approximation constrained to pass through the origin."""

from __future__ import annotations

from typing import Any

from interpkit.errors import SingularFitError
from interpkit.numeric import narrow, result_kind, widen


def zero_parabolic_approximation(
    x1: Any, x2: Any, val1: Any, val2: Any, target_x: Any
) -> Any:
    """Evaluate the zero-intercept parabola through two points.

    Solves ``f(x) = a * x**2 + b * x`` with ``f(x1) = val1`` and
    ``f(x2) = val2``:

        a = (x1 * val2 - x2 * val1) / (x1 * x2 * (x2 - x1))
        b = (x2**2 * val1 - x1**2 * val2) / (x1 * x2 * (x2 - x1))

    and evaluates it at ``target_x``.

    Args:
        x1: First anchor abscissa; must be nonzero.
        x2: Second anchor abscissa; must be nonzero and differ from ``x1``.
        val1: Value at ``x1``.
        val2: Value at ``x2``.
        target_x: Abscissa to evaluate.

    Returns:
        ``f(target_x)`` narrowed to the common kind of the operands.

    Raises:
        SingularFitError: If ``x1 == 0``, ``x2 == 0`` or ``x1 == x2``.
        TypeError: If any operand is not numeric.
    """
    kind = result_kind(x1, x2, val1, val2, target_x)
    if x1 == 0 or x2 == 0 or x1 == x2:
        raise SingularFitError(x1, x2)

    x1_f = widen(x1)
    x2_f = widen(x2)
    v1 = widen(val1)
    v2 = widen(val2)
    t = widen(target_x)

    denom = x1_f * x2_f * (x2_f - x1_f)
    a = (x1_f * v2 - x2_f * v1) / denom
    b = (x2_f * x2_f * v1 - x1_f * x1_f * v2) / denom
    return narrow(a * t * t + b * t, kind)
