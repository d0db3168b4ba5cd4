"""Combined ROC plot for a comparison result.

:func:`roc_plot_spec` turns a result into plain data (curves, labels,
limits) and :func:`plot_roc_comparison` draws that data with matplotlib,
so other backends can render the same spec.
"""

from __future__ import annotations

from dataclasses import dataclass

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from numpy.typing import NDArray

from pyroccomp.comparison._common import UROCCompResult


@dataclass(frozen=True)
class CurveSpec:
    """One step curve over the false-positive-rate axis."""

    label: str
    fpr: NDArray[np.floating]
    tpr: NDArray[np.floating]
    color: str


@dataclass(frozen=True)
class ROCPlotSpec:
    """Everything needed to draw the comparison plot."""

    curves: tuple[CurveSpec, ...]
    chance_line: tuple[tuple[float, float], tuple[float, float]]
    title: str
    xlabel: str
    ylabel: str
    xlim: tuple[float, float] = (0.0, 1.0)
    ylim: tuple[float, float] = (0.0, 1.0)
    aspect: str = "equal"


def roc_plot_spec(result: UROCCompResult) -> ROCPlotSpec:
    """Build the plot description for both curves of ``result``."""
    return ROCPlotSpec(
        curves=(
            CurveSpec("ROC curve 1", result.roc1.fpr, result.roc1.tpr, "r"),
            CurveSpec("ROC curve 2", result.roc2.fpr, result.roc2.tpr, "b"),
        ),
        chance_line=((0.0, 0.0), (1.0, 1.0)),
        title="ROC Curves Comparison",
        xlabel="False positive rate (1 - Specificity)",
        ylabel="True positive rate (Sensitivity)",
    )


def plot_roc_comparison(
    result: UROCCompResult,
    ax: Axes | None = None,
) -> Axes:
    """Plot both ROC curves of ``result`` with the chance diagonal.

    Args:
        result: Output of :func:`~pyroccomp.comparison.compare`.
        ax: Matplotlib axes object. If None, creates new figure.

    Returns:
        Matplotlib Axes object containing the plot.
    """
    spec = roc_plot_spec(result)

    if ax is None:
        _, ax = plt.subplots(figsize=(5.6, 5.0))

    for curve in spec.curves:
        ax.step(
            curve.fpr,
            curve.tpr,
            where="post",
            color=curve.color,
            linewidth=2.0,
            label=curve.label,
        )

    (x0, y0), (x1, y1) = spec.chance_line
    ax.plot([x0, x1], [y0, y1], "k--", linewidth=1.0)

    ax.set_xlabel(spec.xlabel)
    ax.set_ylabel(spec.ylabel)
    ax.set_xlim(*spec.xlim)
    ax.set_ylim(*spec.ylim)
    ax.set_aspect(spec.aspect)
    ax.set_title(spec.title)
    ax.grid(True)
    ax.legend(loc="lower right")

    return ax
