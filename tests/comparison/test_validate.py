"""Tests for input validation of the unpaired comparison."""

import numpy as np
import pytest

from pyroccomp import (
    InvalidLabelError,
    OnlyHealthyError,
    OnlyUnhealthyError,
    ShapeError,
    SignificanceLevelError,
    UROCCompError,
)
from pyroccomp.comparison import validate, DEFAULT_ALPHA


@pytest.fixture
def x():
    return np.array([[1, 0], [2, 0], [3, 1], [4, 1]])


@pytest.fixture
def y():
    return np.array([[1, 0], [2, 1], [3, 0], [4, 1]])


# ---------------------------------------------------------------------------
# Accepted input
# ---------------------------------------------------------------------------

class TestValidInput:

    def test_returns_float_arrays(self, x, y):
        x2, y2, alpha = validate(x, y)
        assert x2.dtype == np.float64
        assert y2.dtype == np.float64
        np.testing.assert_array_equal(x2, x)

    def test_default_alpha(self, x, y):
        _, _, alpha = validate(x, y)
        assert alpha == DEFAULT_ALPHA == 0.05

    def test_explicit_alpha(self, x, y):
        _, _, alpha = validate(x, y, 0.01)
        assert alpha == 0.01
        assert isinstance(alpha, float)

    def test_numpy_alpha(self, x, y):
        _, _, alpha = validate(x, y, np.float32(0.1))
        assert alpha == pytest.approx(0.1)

    def test_zero_dim_array_alpha(self, x, y):
        _, _, alpha = validate(x, y, np.array(0.05))
        assert alpha == 0.05
        assert isinstance(alpha, float)

    def test_nested_lists(self):
        validate([[1, 0], [2, 1]], [[0.5, 1], [0.1, 0]])

    def test_boolean_labels(self):
        x = np.array([[1.0, False], [2.0, True]])
        validate(x, x)

    def test_result_is_read_only(self, x, y):
        x2, _, _ = validate(x, y)
        with pytest.raises(ValueError):
            x2[0, 0] = 10.0

    def test_input_not_modified(self, x, y):
        before = x.copy()
        validate(x, y)
        np.testing.assert_array_equal(x, before)


# ---------------------------------------------------------------------------
# Shape
# ---------------------------------------------------------------------------

class TestShape:

    @pytest.mark.parametrize("bad", [
        [[1, 0], [2]],
        np.array([1.0, 0.0, 2.0, 1.0]),
        np.ones((2, 2, 2)),
        np.ones((4, 3)),
        np.ones((4, 1)),
        np.empty((0, 2)),
        np.array([[1.0, 0.0], [np.nan, 1.0]]),
        np.array([[1.0, 0.0], [np.inf, 1.0]]),
        np.array([["a", "0"], ["b", "1"]]),
        np.array([[1 + 2j, 0], [2, 1]]),
    ])
    def test_rejects_x(self, bad, y):
        with pytest.raises(ShapeError) as exc:
            validate(bad, y)
        assert exc.value.dataset == "X"

    def test_rejects_y(self, x):
        with pytest.raises(ShapeError, match="Y must have exactly 2 columns") as exc:
            validate(x, np.ones((3, 3)))
        assert exc.value.dataset == "Y"

    def test_ragged_y(self, x):
        with pytest.raises(ShapeError, match="Y must be a rectangular") as exc:
            validate(x, [[1, 0], [2, 1, 3]])
        assert exc.value.dataset == "Y"

    def test_is_value_error(self, y):
        with pytest.raises(ValueError):
            validate(np.ones(3), y)


# ---------------------------------------------------------------------------
# Labels
# ---------------------------------------------------------------------------

class TestLabels:

    def test_label_two_in_x(self, y):
        x = np.array([[1, 0], [2, 2], [3, 1]])
        with pytest.raises(InvalidLabelError, match=r"X\[:, 1\]") as exc:
            validate(x, y)
        assert exc.value.dataset == "X"

    def test_label_two_in_y(self, x):
        y = np.array([[1, 0], [2, 2], [3, 1]])
        with pytest.raises(InvalidLabelError, match=r"Y\[:, 1\]") as exc:
            validate(x, y)
        assert exc.value.dataset == "Y"

    def test_only_healthy_x(self, y):
        x = np.array([[1, 0], [2, 0], [3, 0]])
        with pytest.raises(OnlyHealthyError, match="only healthy subjects in X") as exc:
            validate(x, y)
        assert exc.value.dataset == "X"

    def test_only_unhealthy_x(self, y):
        x = np.array([[1, 1], [2, 1]])
        with pytest.raises(OnlyUnhealthyError, match="only unhealthy subjects in X"):
            validate(x, y)

    def test_only_healthy_y(self, x):
        y = np.array([[1, 0], [2, 0]])
        with pytest.raises(OnlyHealthyError, match="in Y") as exc:
            validate(x, y)
        assert exc.value.dataset == "Y"

    def test_only_unhealthy_y(self, x):
        y = np.array([[1, 1]])
        with pytest.raises(OnlyUnhealthyError, match="in Y"):
            validate(x, y)

    def test_x_checked_before_y(self):
        bad_x = np.array([[1, 0], [2, 0]])
        bad_y = np.array([[1, 1], [2, 1]])
        with pytest.raises(OnlyHealthyError):
            validate(bad_x, bad_y)

    def test_all_share_base(self, y):
        with pytest.raises(UROCCompError):
            validate(np.array([[1, 0], [2, 0]]), y)


# ---------------------------------------------------------------------------
# Significance level
# ---------------------------------------------------------------------------

class TestAlpha:

    @pytest.mark.parametrize("alpha", [0, 1, 0.0, 1.0, -0.1, 1.5, float("nan"), float("inf")])
    def test_out_of_range(self, x, y, alpha):
        with pytest.raises(SignificanceLevelError, match="alpha"):
            validate(x, y, alpha)

    @pytest.mark.parametrize("alpha", ["0.05", True, [0.05], np.array([0.05, 0.1])])
    def test_not_a_real_scalar(self, x, y, alpha):
        with pytest.raises(SignificanceLevelError, match="real scalar"):
            validate(x, y, alpha)

    def test_shape_checked_before_alpha(self, y):
        with pytest.raises(ShapeError):
            validate(np.ones(3), y, 1.5)

    def test_zero_dim_array_out_of_range(self, x, y):
        with pytest.raises(SignificanceLevelError, match="alpha must be in"):
            validate(x, y, np.array(1.5))

    def test_alpha_checked_before_labels(self, y):
        x = np.array([[1, 0], [2, 0]])
        with pytest.raises(SignificanceLevelError):
            validate(x, y, 2.0)
