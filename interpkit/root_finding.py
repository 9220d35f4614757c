"""Bisection search for the argument at which a monotonic function hits a target.

The search halves the bracket on every step, like classic bisection, but its
stopping rule looks at the function outputs: it ends once the outputs at the
two bracket ends agree to within ``accuracy``. The bracket may be given in
either order and the function may be increasing or decreasing; only the
outputs at the two ends have to straddle the target.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Callable

from .errors import ConvergenceError, OutOfRangeError
from .numeric import check_number, narrow, result_kind, widen

logger = logging.getLogger(__name__)

DEFAULT_MAX_ITERATIONS = 1000


def _midpoint(x_a: Any, x_b: Any, kind: type) -> Any:
    return narrow((widen(x_a) + widen(x_b)) / 2.0, kind)


def half_length_value_searcher(
    function: Callable[[Any], Any],
    x_min: Any,
    x_max: Any,
    target_y: Any,
    accuracy: Any,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> Any:
    """Find ``x`` in ``[x_min, x_max]`` where ``function(x)`` reaches ``target_y``.

    The bracket end whose output is larger is tracked as the "higher" side.
    Each step evaluates the midpoint; a midpoint output above ``target_y``
    replaces the higher side, anything else replaces the lower side. The loop
    stops when ``|y_higher - y_lower| <= accuracy`` and returns the midpoint
    of the final bracket.

    Args:
        function (Callable): One-argument function, assumed monotonic on the
            bracket. It is called with values of the bracket's kind.
        x_min: One end of the search bracket.
        x_max: The other end; ``x_min < x_max`` is not required.
        target_y: Output value to reach.
        accuracy: Convergence threshold on the output spread of the bracket.
        max_iterations (int, optional): Midpoint evaluations allowed before
            giving up. Defaults to ``DEFAULT_MAX_ITERATIONS``.

    Returns:
        The midpoint of the converged bracket, in the kind of ``x_min`` and
        ``x_max`` (integer brackets truncate toward zero).

    Raises:
        OutOfRangeError: If ``target_y`` is above both or below both bracket
            outputs, or if either bracket output is NaN.
        ConvergenceError: If the output spread is still above ``accuracy``
            after ``max_iterations`` steps.
        ValueError: If ``max_iterations`` is not a positive integer.
        TypeError: If the bounds, target, accuracy or bracket outputs are not
            numeric.

    Note:
        Non-monotonic functions give an undefined result. Integer brackets
        can stall once the bracket is one unit wide, in which case the
        iteration cap raises ``ConvergenceError``.
    """
    if isinstance(max_iterations, bool) or not isinstance(max_iterations, int):
        raise TypeError(f"max_iterations must be an int, got {type(max_iterations)}")
    if max_iterations < 1:
        raise ValueError("max_iterations must be >= 1")
    check_number(target_y, "target_y")
    check_number(accuracy, "accuracy")
    x_kind = result_kind(x_min, x_max)

    y_at_min = function(x_min)
    y_at_max = function(x_max)
    check_number(y_at_min, "function(x_min)")
    check_number(y_at_max, "function(x_max)")

    target = widen(target_y)
    tol = widen(accuracy)
    if math.isnan(widen(y_at_min)) or math.isnan(widen(y_at_max)):
        raise OutOfRangeError(target_y, (y_at_min, y_at_max))
    if not min(widen(y_at_min), widen(y_at_max)) <= target <= max(
        widen(y_at_min), widen(y_at_max)
    ):
        raise OutOfRangeError(target_y, (y_at_min, y_at_max))

    if widen(y_at_min) <= widen(y_at_max):
        x_lower, y_lower, x_higher, y_higher = x_min, y_at_min, x_max, y_at_max
    else:
        x_lower, y_lower, x_higher, y_higher = x_max, y_at_max, x_min, y_at_min

    logger.debug(
        "Searching for f(x) = %s on bracket (%s, %s), outputs (%s, %s)",
        target_y,
        x_min,
        x_max,
        y_at_min,
        y_at_max,
    )

    iterations = 0
    while abs(widen(y_higher) - widen(y_lower)) > tol:
        if iterations >= max_iterations:
            spread = abs(widen(y_higher) - widen(y_lower))
            logger.warning(
                "Bisection did not converge after %d iterations (spread %.6g > %s)",
                iterations,
                spread,
                accuracy,
            )
            raise ConvergenceError(iterations, (x_lower, x_higher), spread)

        x_mid = _midpoint(x_lower, x_higher, x_kind)
        y_mid = function(x_mid)
        iterations += 1
        if widen(y_mid) > target:
            x_higher, y_higher = x_mid, y_mid
        else:
            x_lower, y_lower = x_mid, y_mid

    logger.debug("Bisection converged after %d iterations", iterations)
    return _midpoint(x_lower, x_higher, x_kind)
