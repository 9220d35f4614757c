"""Tests for the bisection value search."""

import logging
import math

import numpy as np
import pytest

from interpkit.errors import ConvergenceError, OutOfRangeError
from interpkit.root_finding import half_length_value_searcher


def test_identity_converges_to_target():
    x = half_length_value_searcher(lambda x: x, 0.0, 10.0, 5.0, 0.01)
    assert abs(x - 5.0) <= 0.01


def test_nonlinear_increasing_function():
    x = half_length_value_searcher(lambda x: x**3, 0.0, 3.0, 8.0, 1e-9)
    assert math.isclose(x, 2.0, abs_tol=1e-6)


def test_decreasing_function():
    x = half_length_value_searcher(lambda x: 10.0 - x, 0.0, 10.0, 3.0, 1e-6)
    assert math.isclose(x, 7.0, abs_tol=1e-6)


def test_reversed_bracket():
    x = half_length_value_searcher(math.exp, 2.0, 0.0, math.e, 1e-9)
    assert math.isclose(x, 1.0, abs_tol=1e-6)


def test_target_at_bracket_end():
    x = half_length_value_searcher(lambda x: 2.0 * x, 0.0, 4.0, 8.0, 1e-6)
    assert math.isclose(x, 4.0, abs_tol=1e-6)


@pytest.mark.parametrize("target", [-0.5, 10.5])
def test_target_outside_bracket_outputs(target):
    with pytest.raises(OutOfRangeError, match="out of range"):
        half_length_value_searcher(lambda x: x, 0.0, 10.0, target, 0.01)


def test_nan_bracket_output_is_out_of_range():
    with pytest.raises(OutOfRangeError):
        half_length_value_searcher(lambda x: math.nan, 0.0, 1.0, 0.5, 0.01)


def test_integer_bracket_returns_int():
    x = half_length_value_searcher(lambda x: x, 0, 10, 5, 1)
    assert x == 5
    assert type(x) is int


def test_integer_bracket_that_stalls_raises_convergence_error():
    with pytest.raises(ConvergenceError, match="did not converge") as excinfo:
        half_length_value_searcher(lambda x: x, 0, 10, 5, 0, max_iterations=50)
    assert excinfo.value.iterations == 50


def test_noisy_function_hits_iteration_cap(caplog):
    caplog.set_level(logging.WARNING, logger="interpkit.root_finding")

    def step(x):
        return 0.0 if x < 0.5 else 1.0

    with pytest.raises(ConvergenceError) as excinfo:
        half_length_value_searcher(step, 0.0, 1.0, 0.5, 0.1, max_iterations=20)

    lower, higher = excinfo.value.bracket
    assert lower < 0.5 <= higher
    assert math.isclose(excinfo.value.spread, 1.0)
    assert any("did not converge" in rec.message for rec in caplog.records)


def test_convergence_error_is_runtime_error():
    with pytest.raises(RuntimeError):
        half_length_value_searcher(lambda x: x, 0, 10, 5, 0, max_iterations=5)


def test_float32_bracket_keeps_kind():
    calls = []

    def f(x):
        calls.append(type(x))
        return x * np.float32(2.0)

    x = half_length_value_searcher(f, np.float32(0.0), np.float32(1.0), 1.0, 1e-3)
    assert isinstance(x, np.float32)
    assert np.isclose(x, 0.5, atol=1e-3)
    assert set(calls) == {np.float32}


@pytest.mark.parametrize("max_iterations", [0, -1])
def test_invalid_max_iterations(max_iterations):
    with pytest.raises(ValueError, match="max_iterations"):
        half_length_value_searcher(lambda x: x, 0.0, 1.0, 0.5, 0.1, max_iterations)


def test_non_numeric_function_output():
    with pytest.raises(TypeError, match="function"):
        half_length_value_searcher(lambda x: "high", 0.0, 1.0, 0.5, 0.1)


def test_one_sided_nan_bracket_output_is_out_of_range():
    def f(x):
        return math.nan if x > 0.2 else 0.0

    with pytest.raises(OutOfRangeError):
        half_length_value_searcher(f, 0.0, 1.0, 0.0, 0.01)
    with pytest.raises(OutOfRangeError):
        half_length_value_searcher(f, 1.0, 0.0, 0.0, 0.01)
