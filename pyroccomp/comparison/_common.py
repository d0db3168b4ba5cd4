"""Result type for the unpaired ROC comparison."""

from __future__ import annotations

from dataclasses import dataclass, field

from pyroccomp.comparison._report import format_report
from pyroccomp.diagnostic._common import ROCResult

DIFFERENT = "The areas are statistically different"
NOT_DIFFERENT = "The areas are not statistically different"


@dataclass(frozen=True)
class UROCCompResult:
    """Result of comparing two independent ROC curves.

    Attributes
    ----------
    auc1, auc2 : float
        AUC of the first (X) and second (Y) sample.
    se1, se2 : float
        Standard errors of the two AUCs.
    statistic : float
        ``|auc1 - auc2| / sqrt(se1**2 + se2**2)``; may be ``inf``.
    p_value : float
        Two-sided p-value from the standard normal.
    alpha : float
        Significance level.
    significant : bool
        ``p_value <= alpha``.
    roc1, roc2 : ROCResult
        The curves the AUCs came from, kept for plotting.
    """

    auc1: float
    se1: float
    auc2: float
    se2: float
    statistic: float
    p_value: float
    alpha: float
    significant: bool
    roc1: ROCResult = field(repr=False)
    roc2: ROCResult = field(repr=False)

    @property
    def auc_diff(self) -> float:
        return self.auc1 - self.auc2

    @property
    def comment(self) -> str:
        return DIFFERENT if self.significant else NOT_DIFFERENT

    def summary(self) -> str:
        """Human-readable report with the AUC and z-test tables."""
        return format_report(self)
