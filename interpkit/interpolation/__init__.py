"""
Interpolation routines over anchor points and sample tables.

This subpackage estimates values between discrete samples. Every routine
validates operand kinds, computes on widened floats and narrows the result
back to the operands' kind.

Modules:
    linear:
        Closed-form interpolation between two anchors, table lookup over a
        sample sequence, and lookup over two DataFrame columns.

    bilinear:
        Separable interpolation over a rectangular cell, table lookup over a
        2-D value grid, and lookup over a DataFrame grid.

    parabolic:
        Zero-intercept quadratic through two points.

Design Principle:
    Table lookups depend only on ``interpkit.search``; nothing here performs
    I/O or keeps state between calls.
"""

from .bilinear import bilinear, bilinear2, bilinear_frame
from .linear import linear, linear2, linear_frame
from .parabolic import zero_parabolic_approximation

__all__ = [
    "linear",
    "linear2",
    "linear_frame",
    "bilinear",
    "bilinear2",
    "bilinear_frame",
    "zero_parabolic_approximation",
]
