"""
A small toolkit for interpolation and bracketed root search over numeric samples.

Works on Python and NumPy integer and floating scalars, returning results in
the kind of the inputs.

Modules:
    - numeric: Scalar-kind predicates and the widen/narrow conversion step.
    - search: Locates the sample pair that brackets a target value.
    - interpolation: Linear, bilinear and zero-intercept parabolic estimates.
    - root_finding: Bisection search for the argument reaching a target output.
    - rounding: Decimal rounding, half away from zero.
    - errors: Exceptions for out-of-range targets, size mismatches, singular
      fits and non-convergence.
"""

__version__ = "1.0.0"

from .errors import (
    ConvergenceError,
    InterpolationError,
    OutOfRangeError,
    SingularFitError,
    SizeMismatchError,
)
from .interpolation import (
    bilinear,
    bilinear2,
    bilinear_frame,
    linear,
    linear2,
    linear_frame,
    zero_parabolic_approximation,
)
from .root_finding import DEFAULT_MAX_ITERATIONS, half_length_value_searcher
from .rounding import round_in_place, round_values
from .search import search_nearest_id

__all__ = [
    # Search
    "search_nearest_id",
    # Interpolation
    "linear",
    "linear2",
    "linear_frame",
    "bilinear",
    "bilinear2",
    "bilinear_frame",
    "zero_parabolic_approximation",
    # Root finding
    "half_length_value_searcher",
    "DEFAULT_MAX_ITERATIONS",
    # Rounding
    "round_values",
    "round_in_place",
    # Errors
    "InterpolationError",
    "OutOfRangeError",
    "SizeMismatchError",
    "SingularFitError",
    "ConvergenceError",
]
