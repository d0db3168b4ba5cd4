"""One-call comparison: print the tables and show the plot."""

from __future__ import annotations

import sys
from typing import TextIO

import matplotlib.pyplot as plt
from numpy.typing import ArrayLike

from pyroccomp.comparison._compare import compare
from pyroccomp.comparison._plot import plot_roc_comparison
from pyroccomp.comparison._report import format_report
from pyroccomp.diagnostic._registry import Estimator


def uroccomp(
    x: ArrayLike,
    y: ArrayLike,
    alpha: float | None = None,
    *,
    estimator: str | Estimator | None = None,
    show: bool = True,
    file: TextIO | None = None,
) -> None:
    """Compare two unpaired ROC curves, print the report and plot them.

    Nothing is printed or drawn unless the whole comparison succeeds.

    Parameters
    ----------
    x, y : array-like, shape (n, 2)
        ``[test value, class label]`` rows, label 1 = unhealthy.
    alpha : float or None
        Significance level in (0, 1); ``None`` means 0.05.
    estimator : str, callable or None
        See :func:`~pyroccomp.comparison.compare`.
    show : bool
        Call ``plt.show()`` after drawing.
    file : text stream or None
        Where to print the report; defaults to ``sys.stdout``.
    """
    result = compare(x, y, alpha, estimator=estimator)

    print(format_report(result), file=file if file is not None else sys.stdout)

    plot_roc_comparison(result)
    if show:
        plt.show()
