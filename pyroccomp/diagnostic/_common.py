"""Shared result type and label checks for ROC estimation."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from pyroccomp._errors import (
    InvalidLabelError,
    OnlyHealthyError,
    OnlyUnhealthyError,
)


@dataclass(frozen=True)
class ROCResult:
    """Result of ROC analysis for one labelled sample.

    Attributes
    ----------
    thresholds : array
        Thresholds at which TPR/FPR are evaluated.  Includes ``-inf``
        and ``+inf`` so the curve always passes through (0,0) and (1,1).
    tpr : array
        True positive rate (sensitivity) at each threshold.
    fpr : array
        False positive rate (1 − specificity) at each threshold.
    auc : float
        Area under the ROC curve (Mann-Whitney U / (n1*n0)).
    auc_se : float
        Standard error of the AUC, estimated by ``se_method``.
    auc_ci_lower, auc_ci_upper : float
        Confidence interval for AUC (logit-transformed).
    conf_level : float
        Confidence level used for CI.
    n_positive, n_negative : int
        Number of positive (unhealthy) and negative (healthy) subjects.
    direction : str
        ``'<'`` (controls < cases) or ``'>'`` (controls > cases).
    se_method : str
        ``'hanley_mcneil'`` or ``'delong'``.
    """

    thresholds: NDArray[np.floating]
    tpr: NDArray[np.floating]  # sensitivity / true positive rate
    fpr: NDArray[np.floating]  # 1 - specificity / false positive rate
    auc: float
    auc_se: float
    auc_ci_lower: float
    auc_ci_upper: float
    conf_level: float
    n_positive: int
    n_negative: int
    direction: str  # '<' or '>'
    se_method: str

    def summary(self) -> str:
        """Human-readable summary."""
        se_label = "DeLong SE" if self.se_method == "delong" else "H&M SE"
        lines = [
            "ROC Analysis",
            "=" * 40,
            f"Direction   : controls {self.direction} cases",
            f"AUC         : {self.auc:.4f}",
            f"{se_label:<12}: {self.auc_se:.4f}",
            f"{self.conf_level:.0%} CI      : [{self.auc_ci_lower:.4f}, {self.auc_ci_upper:.4f}]",
            f"n positive  : {self.n_positive}",
            f"n negative  : {self.n_negative}",
            f"n thresholds: {len(self.thresholds)}",
        ]
        return "\n".join(lines)


# ---------------------------------------------------------------------------
# Label composition
# ---------------------------------------------------------------------------

def _check_labels(labels: NDArray, dataset: str | None = None) -> None:
    """Require 0/1 labels with both classes present.

    ``dataset`` names the offending input in error messages; ``None``
    yields a generic wording for callers that only see one sample.
    """
    where = f"{dataset}[:, 1]" if dataset else "the class labels"
    who = dataset if dataset else "the sample"

    if not np.all((labels == 0) | (labels == 1)):
        raise InvalidLabelError(
            f"All values in {where} must be 0 or 1, "
            f"got unique values {np.unique(labels)}",
            dataset,
        )
    if np.all(labels == 0):
        raise OnlyHealthyError(
            f"There are only healthy subjects in {who}", dataset,
        )
    if np.all(labels == 1):
        raise OnlyUnhealthyError(
            f"There are only unhealthy subjects in {who}", dataset,
        )
