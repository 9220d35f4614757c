import math

import numpy as np
import pandas as pd
import pytest

from interpkit.errors import OutOfRangeError, SizeMismatchError
from interpkit.interpolation.linear import linear, linear2, linear_frame

SAMPLES = [1, 2, 3, 4, 5]
VALUES = [10, 20, 30, 40, 50]


class TestLinear:
    """Closed-form interpolation between two anchors."""

    @pytest.mark.parametrize(
        "x1, x2, v1, v2",
        [(0.1, 0.3, 1.7, 2.9), (-4.0, 7.5, 3.3, -1.1), (1e-3, 2e3, 0.7, 0.9)],
    )
    def test_endpoints_are_exact(self, x1, x2, v1, v2):
        assert linear(x1, x1, x2, v1, v2) == v1
        assert linear(x2, x1, x2, v1, v2) == v2

    def test_degenerate_anchors_return_first_value(self):
        for x in (-10.0, 0.0, 3.0, 99.0):
            assert linear(x, 2.0, 2.0, 7.0, 11.0) == 7.0

    def test_midpoint(self):
        assert math.isclose(linear(1.5, 1.0, 2.0, 10.0, 20.0), 15.0)

    def test_anchors_in_descending_order(self):
        assert math.isclose(linear(1.5, 2.0, 1.0, 20.0, 10.0), 15.0)

    def test_extrapolates_outside_anchors(self):
        assert math.isclose(linear(3.0, 1.0, 2.0, 10.0, 20.0), 30.0)

    def test_integer_operands_truncate(self):
        out = linear(2, 1, 4, 10, 20)
        assert out == 13
        assert type(out) is int

    def test_integer_truncation_is_toward_zero(self):
        assert linear(2, 1, 4, -10, -20) == -13

    def test_float_target_promotes_to_float(self):
        out = linear(2.5, 2, 3, 20, 30)
        assert out == 25.0
        assert type(out) is float

    def test_numpy_kind_is_preserved(self):
        out = linear(np.float32(0.5), np.float32(0.0), np.float32(1.0),
                     np.float32(2.0), np.float32(4.0))
        assert isinstance(out, np.float32)
        assert np.isclose(out, 3.0)

        out = linear(np.uint8(3), np.uint8(1), np.uint8(5), np.uint8(100), np.uint8(200))
        assert isinstance(out, np.uint8)
        assert out == 150

    def test_rejects_non_numeric(self):
        with pytest.raises(TypeError, match="must be numeric"):
            linear(1.0, 0.0, 2.0, "a", 1.0)
        with pytest.raises(TypeError):
            linear(True, 0, 2, 1, 3)


class TestLinear2:
    """Table-driven interpolation."""

    def test_interpolates_between_samples(self):
        assert linear2(2.5, SAMPLES, VALUES) == 25

    def test_exact_sample_returns_stored_value(self):
        values = [0.1, 0.7, 1.3, 2.9, 3.3]
        for x, v in zip(SAMPLES, values):
            assert linear2(x, SAMPLES, values) == v

    def test_size_mismatch(self):
        with pytest.raises(SizeMismatchError, match="bad array sizes"):
            linear2(2.5, SAMPLES, VALUES[:4])

    def test_size_is_checked_before_range(self):
        with pytest.raises(SizeMismatchError):
            linear2(100, SAMPLES, VALUES[:4])

    def test_out_of_range(self):
        with pytest.raises(OutOfRangeError):
            linear2(5.5, SAMPLES, VALUES)

    def test_numpy_arrays(self):
        x = np.linspace(0.0, 1.0, 11)
        y = x**2
        out = linear2(0.25, x, y)
        assert np.isclose(out, 0.5 * (0.2**2 + 0.3**2))

    def test_series_with_label_index(self):
        x = pd.Series([0.0, 1.0, 2.0], index=["a", "b", "c"])
        y = pd.Series([5.0, 7.0, 11.0], index=[10, 20, 30])
        assert math.isclose(linear2(1.5, x, y), 9.0)


class TestLinearFrame:
    def test_interpolates_from_columns(self):
        frame = pd.DataFrame(
            {"Temperature (°C)": [20.0, 25.0, 30.0], "Density": [0.9982, 0.9970, 0.9957]}
        )
        out = linear_frame(22.5, frame, "Temperature (°C)", "Density")
        assert math.isclose(out, 0.9976)

    def test_missing_column_raises(self):
        frame = pd.DataFrame({"x": [0.0, 1.0], "y": [0.0, 1.0]})
        with pytest.raises(KeyError, match="Missing columns"):
            linear_frame(0.5, frame, "x", "z")
