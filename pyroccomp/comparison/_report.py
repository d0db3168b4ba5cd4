"""Tabular and dict renderings of a comparison result.

Pure data-to-text transformations; nothing here computes statistics.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pyroccomp.comparison._common import UROCCompResult

_RULE = "-" * 80


def auc_table(result: UROCCompResult) -> dict[str, dict[str, float]]:
    """Table 1: AUC and standard error per curve, keyed by column."""
    return {
        "ROC1": {"AUC": result.auc1, "Standard_error": result.se1},
        "ROC2": {"AUC": result.auc2, "Standard_error": result.se2},
    }


def ztest_table(result: UROCCompResult) -> dict[str, Any]:
    """Table 2: z statistic, p-value and verdict."""
    return {
        "z_value": result.statistic,
        "p_value": result.p_value,
        "Comment": result.comment,
    }


def _fmt(value: float, digits: int) -> str:
    if math.isinf(value):
        return "Inf"
    return f"{value:.{digits}f}"


def format_report(result: UROCCompResult, digits: int = 4) -> str:
    """Render both tables as fixed-width text."""
    t1 = auc_table(result)
    t2 = ztest_table(result)

    width = max(digits + 6, 8)
    row_w = len("Standard_error")
    lines = [
        "UNPAIRED ROC CURVES COMPARISON",
        _RULE,
        f"{'':<{row_w}}  " + "  ".join(f"{c:>{width}}" for c in t1),
    ]
    for row in ("AUC", "Standard_error"):
        cells = "  ".join(f"{_fmt(t1[c][row], digits):>{width}}" for c in t1)
        lines.append(f"{row:<{row_w}}  {cells}")

    z = _fmt(t2["z_value"], digits)
    p = f"{t2['p_value']:.{digits}g}"
    lines += [
        "",
        f"{'z_value':>{width}}  {'p_value':>{width}}  Comment",
        f"{z:>{width}}  {p:>{width}}  {t2['Comment']}",
    ]
    return "\n".join(lines)


def to_dict(result: UROCCompResult) -> dict[str, Any]:
    """JSON-serializable form of the result (``inf`` z becomes ``None``)."""
    z = result.statistic
    return {
        "auc_table": {
            col: {row: float(v) for row, v in rows.items()}
            for col, rows in auc_table(result).items()
        },
        "ztest_table": {
            "z_value": float(z) if math.isfinite(z) else None,
            "p_value": float(result.p_value),
            "Comment": result.comment,
        },
        "alpha": float(result.alpha),
        "significant": bool(result.significant),
        "curves": {
            "ROC1": {"fpr": result.roc1.fpr.tolist(), "tpr": result.roc1.tpr.tolist()},
            "ROC2": {"fpr": result.roc2.fpr.tolist(), "tpr": result.roc2.tpr.tolist()},
        },
    }
