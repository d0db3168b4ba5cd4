"""Tests for the one-call uroccomp() surface."""

import io

import matplotlib.pyplot as plt
import numpy as np
import pytest

from pyroccomp import (
    OnlyHealthyError,
    SignificanceLevelError,
    uroccomp,
)


@pytest.fixture
def x():
    return np.array([[1, 0], [2, 0], [3, 1], [4, 1]])


@pytest.fixture
def y():
    return np.array([[1, 0], [2, 1], [3, 0], [4, 1]])


class TestUROCComp:

    def test_returns_none(self, x, y):
        assert uroccomp(x, y, show=False, file=io.StringIO()) is None

    def test_prints_report(self, x, y):
        out = io.StringIO()
        uroccomp(x, y, 0.05, show=False, file=out)
        text = out.getvalue()
        assert text.startswith("UNPAIRED ROC CURVES COMPARISON")
        assert "Standard_error" in text
        assert "z_value" in text

    def test_prints_to_stdout_by_default(self, x, y, capsys):
        uroccomp(x, y, show=False)
        assert "UNPAIRED ROC CURVES COMPARISON" in capsys.readouterr().out

    def test_creates_one_figure(self, x, y):
        uroccomp(x, y, show=False, file=io.StringIO())
        assert len(plt.get_fignums()) == 1

    def test_estimator_forwarded(self, x, y):
        out = io.StringIO()
        uroccomp(x, y, estimator="delong", show=False, file=out)
        assert "0.3536" in out.getvalue()


class TestNoPartialOutput:

    def test_only_healthy(self, y):
        x = np.array([[1, 0], [2, 0], [3, 0]])
        out = io.StringIO()
        with pytest.raises(OnlyHealthyError, match="X"):
            uroccomp(x, y, show=False, file=out)
        assert out.getvalue() == ""
        assert plt.get_fignums() == []

    def test_bad_alpha(self, x, y):
        out = io.StringIO()
        with pytest.raises(SignificanceLevelError):
            uroccomp(x, y, 1.5, show=False, file=out)
        assert out.getvalue() == ""
        assert plt.get_fignums() == []
