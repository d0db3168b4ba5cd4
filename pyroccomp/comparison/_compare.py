"""z-test for the difference between two independent AUCs.

For two ROC curves estimated on independent samples the AUC estimates
are uncorrelated, so the difference is tested with

    z = |AUC1 - AUC2| / sqrt(SE1**2 + SE2**2)

against the standard normal, two-sided.  Correlated (paired) curves need
DeLong's covariance instead and are out of scope here.

References
----------
Hanley & McNeil (1983). A method of comparing the areas under receiver
operating characteristic curves derived from the same cases.
*Radiology*, 148(3), 839-843.

Cardillo G. (2009). uROCcomp: compare two unpaired ROC curves.
"""

from __future__ import annotations

import logging
import math

from numpy.typing import ArrayLike
from scipy import stats

from pyroccomp.comparison._common import UROCCompResult
from pyroccomp.comparison._validate import validate
from pyroccomp.diagnostic._registry import Estimator, get_estimator

logger = logging.getLogger(__name__)


def unpaired_z_test(
    auc1: float, se1: float, auc2: float, se2: float,
) -> tuple[float, float]:
    """z statistic and two-sided p-value for two independent AUCs.

    When both standard errors are zero the statistic is ``0`` for equal
    AUCs and ``inf`` otherwise (p-value 1 and 0 respectively).

    Returns
    -------
    tuple
        ``(z, p)`` with ``z >= 0`` and ``p`` in [0, 1].
    """
    for name, auc in (("auc1", auc1), ("auc2", auc2)):
        if not math.isfinite(auc) or not (0.0 <= auc <= 1.0):
            raise ValueError(f"{name} must be a finite value in [0, 1], got {auc}")
    for name, se in (("se1", se1), ("se2", se2)):
        if not math.isfinite(se) or se < 0:
            raise ValueError(f"{name} must be finite and non-negative, got {se}")

    diff = abs(auc1 - auc2)
    # sorted so swapping the curves gives a bit-identical result
    pooled = math.hypot(*sorted((se1, se2)))

    if pooled == 0.0:
        z = 0.0 if diff == 0.0 else math.inf
    else:
        z = diff / pooled

    # 2 * (1 - Phi(z)) == erfc(z / sqrt(2))
    p = min(1.0, float(2.0 * stats.norm.sf(z)))
    return z, p


def compare(
    x: ArrayLike,
    y: ArrayLike,
    alpha: float | None = None,
    *,
    estimator: str | Estimator | None = None,
) -> UROCCompResult:
    """Compare the AUCs of two unpaired ROC curves.

    Parameters
    ----------
    x, y : array-like, shape (n, 2)
        Independent samples, ``[:, 0]`` test values and ``[:, 1]`` class
        labels (1 = unhealthy, 0 = healthy).
    alpha : float or None
        Significance level in (0, 1); ``None`` means 0.05.
    estimator : str, callable or None
        ROC estimator, either a registered name (``'hanley_mcneil'``,
        ``'delong'``, ...) or a callable ``estimator(sample, alpha)``
        returning a :class:`~pyroccomp.diagnostic.ROCResult`.  ``None``
        uses the default registered estimator.

    Returns
    -------
    UROCCompResult

    Raises
    ------
    ShapeError, InvalidLabelError, OnlyHealthyError, OnlyUnhealthyError,
    SignificanceLevelError
        Invalid input, raised before any estimation.
    MissingDependencyError
        ``estimator`` names no registered estimator.

    Errors raised by the estimator itself propagate unchanged.
    """
    x, y, alpha = validate(x, y, alpha)
    estimate = get_estimator(estimator)
    logger.debug("using ROC estimator %r", getattr(estimate, "__name__", estimate))

    roc1 = estimate(x, alpha)
    roc2 = estimate(y, alpha)

    auc1, se1 = float(roc1.auc), float(roc1.auc_se)
    auc2, se2 = float(roc2.auc), float(roc2.auc_se)
    z, p = unpaired_z_test(auc1, se1, auc2, se2)
    significant = p <= alpha

    logger.debug(
        "AUC1=%.6f SE1=%.6f AUC2=%.6f SE2=%.6f -> z=%.6g p=%.6g significant=%s",
        auc1, se1, auc2, se2, z, p, significant,
    )

    return UROCCompResult(
        auc1=auc1,
        se1=se1,
        auc2=auc2,
        se2=se2,
        statistic=z,
        p_value=p,
        alpha=alpha,
        significant=significant,
        roc1=roc1,
        roc2=roc2,
    )
