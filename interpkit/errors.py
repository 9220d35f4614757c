"""Exceptions raised by interpkit routines."""

from __future__ import annotations

from typing import Any, Optional, Tuple


class InterpolationError(Exception):
    """Base class for every failure reported by interpkit."""


class OutOfRangeError(InterpolationError, ValueError):
    """Target lies outside the covered domain or the root-search bracket."""

    def __init__(self, value: Any, bounds: Optional[Tuple[Any, Any]] = None):
        self.value = value
        self.bounds = bounds
        super().__init__(value, bounds)

    def __str__(self):
        if self.bounds is None:
            return f"out of range: {self.value!r}"
        return f"out of range: {self.value!r} not within {self.bounds!r}"


class SizeMismatchError(InterpolationError, ValueError):
    """Parallel sequences or grid rows have inconsistent lengths."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(expected, actual)

    def __str__(self):
        return f"bad array sizes: expected {self.expected}, got {self.actual}"


class SingularFitError(InterpolationError, ZeroDivisionError):
    """Zero-intercept parabolic fit given degenerate anchors."""

    def __init__(self, x1: Any, x2: Any):
        self.x1 = x1
        self.x2 = x2
        super().__init__(x1, x2)

    def __str__(self):
        return f"divide by zero: anchors x1={self.x1!r}, x2={self.x2!r}"


class ConvergenceError(InterpolationError, RuntimeError):
    """Root search exhausted its iteration budget."""

    def __init__(self, iterations: int, bracket: Tuple[Any, Any], spread: float):
        self.iterations = iterations
        self.bracket = bracket
        self.spread = spread
        super().__init__(iterations, bracket, spread)

    def __str__(self):
        return (
            f"did not converge after {self.iterations} iterations: "
            f"bracket {self.bracket!r}, output spread {self.spread:.6g}"
        )
