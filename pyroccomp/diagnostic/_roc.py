"""Empirical ROC curve with Hanley-McNeil or DeLong standard errors.

Implements the empirical ROC curve, AUC via Mann-Whitney U, and two
standard-error estimators for the AUC: the closed-form Hanley & McNeil
approximation (the default, as used by Cardillo's ROC routine) and the
nonparametric DeLong placement-value variance.  CIs are computed on the
logit scale.

The ``*_estimator`` adapters expose :func:`roc` through the
``estimator(sample, alpha)`` signature that the comparison layer calls.

References
----------
Hanley & McNeil (1982). The meaning and use of the area under a
receiver operating characteristic (ROC) curve.  *Radiology*, 143(1),
29-36.

DeLong, DeLong & Clarke-Pearson (1988). Comparing the areas under two
or more correlated receiver operating characteristic curves: a
nonparametric approach.  *Biometrics*, 44(3), 837-845.

Validates against: R ``pROC::roc()``, ``pROC::ci.auc()``.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray
from scipy import stats

from pyroccomp._errors import ShapeError
from pyroccomp.diagnostic._common import ROCResult, _check_labels

logger = logging.getLogger(__name__)

_SE_METHODS = ("hanley_mcneil", "delong")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _validate_roc_inputs(
    response: NDArray, predictor: NDArray
) -> tuple[NDArray, NDArray]:
    """Validate and coerce inputs for ROC analysis."""
    response = np.asarray(response, dtype=np.float64)
    predictor = np.asarray(predictor, dtype=np.float64)

    if response.ndim != 1 or predictor.ndim != 1:
        raise ValueError("response and predictor must be 1-D arrays")
    if response.shape[0] != predictor.shape[0]:
        raise ValueError(
            f"response and predictor must have the same length, "
            f"got {response.shape[0]} and {predictor.shape[0]}"
        )
    if not np.all(np.isfinite(predictor)):
        raise ValueError("predictor must contain only finite values")

    _check_labels(response)

    return response.astype(np.intp), predictor


def _resolve_direction(
    response: NDArray, predictor: NDArray, direction: str,
) -> str:
    """Choose direction if 'auto'."""
    if direction == "auto":
        med_cases = np.median(predictor[response == 1])
        med_controls = np.median(predictor[response == 0])
        return "<" if med_controls <= med_cases else ">"
    if direction not in ("<", ">"):
        raise ValueError(f"direction must be '<', '>' or 'auto', got {direction!r}")
    return direction


def _compute_auc_and_placements(
    response: NDArray,
    predictor: NDArray,
    direction: str,
) -> tuple[float, NDArray, NDArray]:
    """Compute AUC via ranks and DeLong placement values.

    Returns (auc, V10, V01) where V10 has shape (n1,) and V01 has
    shape (n0,).
    """
    # Negate so that higher always means positive
    if direction == ">":
        predictor = -predictor

    case_mask = response == 1
    n1 = int(case_mask.sum())
    n0 = len(response) - n1

    # Midranks for ties
    pooled_ranks = stats.rankdata(predictor, method="average")
    case_ranks_within = stats.rankdata(predictor[case_mask], method="average")
    ctrl_ranks_within = stats.rankdata(predictor[~case_mask], method="average")

    sum_case_ranks = pooled_ranks[case_mask].sum()
    auc = (sum_case_ranks - n1 * (n1 + 1) / 2) / (n1 * n0)

    # V10[i]: fraction of controls below case i
    V10 = (pooled_ranks[case_mask] - case_ranks_within) / n0
    # V01[j]: fraction of cases above control j
    V01 = 1.0 - (pooled_ranks[~case_mask] - ctrl_ranks_within) / n1

    return float(auc), V10, V01


def _delong_variance(
    V10: NDArray, V01: NDArray, n1: int, n0: int,
) -> float:
    """DeLong variance of AUC from placement values."""
    S10 = np.var(V10, ddof=1) if n1 > 1 else 0.0
    S01 = np.var(V01, ddof=1) if n0 > 1 else 0.0
    return float(S10 / n1 + S01 / n0)


def _hanley_mcneil_variance(auc: float, n1: int, n0: int) -> float:
    """Hanley & McNeil (1982) variance of AUC.

    ``n1`` counts the unhealthy (positive) subjects and ``n0`` the
    healthy ones.  Every term is non-negative for ``auc`` in [0, 1].
    """
    q1 = auc / (2.0 - auc)
    q2 = 2.0 * auc**2 / (1.0 + auc)
    num = (
        auc * (1.0 - auc)
        + (n1 - 1) * (q1 - auc**2)
        + (n0 - 1) * (q2 - auc**2)
    )
    return max(num, 0.0) / (n1 * n0)


def _logit_ci(
    auc: float, var_auc: float, conf_level: float,
) -> tuple[float, float]:
    """AUC confidence interval on logit scale (matching pROC default)."""
    z = stats.norm.ppf((1 + conf_level) / 2)

    # Clamp AUC away from 0/1 to avoid log(0)
    auc_c = np.clip(auc, 1e-10, 1.0 - 1e-10)

    logit_auc = np.log(auc_c / (1.0 - auc_c))
    se_logit = np.sqrt(var_auc) / (auc_c * (1.0 - auc_c))

    logit_lo = logit_auc - z * se_logit
    logit_hi = logit_auc + z * se_logit

    ci_lo = 1.0 / (1.0 + np.exp(-logit_lo))
    ci_hi = 1.0 / (1.0 + np.exp(-logit_hi))

    return float(ci_lo), float(ci_hi)


def _empirical_roc_curve(
    response: NDArray,
    predictor: NDArray,
    direction: str,
) -> tuple[NDArray, NDArray, NDArray]:
    """Compute empirical ROC curve points.

    Returns (thresholds, tpr, fpr) sorted from (0,0) to (1,1).
    """
    case_mask = response == 1
    n1 = int(case_mask.sum())
    n0 = len(response) - n1
    cases = predictor[case_mask]
    controls = predictor[~case_mask]

    unique_vals = np.unique(predictor)

    if direction == "<":
        # Positive if predictor >= c, thresholds high to low
        sorted_thresh = unique_vals[::-1]
        tpr = np.array([np.sum(cases >= c) for c in sorted_thresh]) / n1
        fpr = np.array([np.sum(controls >= c) for c in sorted_thresh]) / n0
        thresholds = np.concatenate([[np.inf], sorted_thresh, [-np.inf]])
    else:
        # Positive if predictor <= c, thresholds low to high
        sorted_thresh = unique_vals
        tpr = np.array([np.sum(cases <= c) for c in sorted_thresh]) / n1
        fpr = np.array([np.sum(controls <= c) for c in sorted_thresh]) / n0
        thresholds = np.concatenate([[-np.inf], sorted_thresh, [np.inf]])

    tpr_arr = np.concatenate([[0.0], tpr, [1.0]])
    fpr_arr = np.concatenate([[0.0], fpr, [1.0]])

    return thresholds, tpr_arr, fpr_arr


# ---------------------------------------------------------------------------
# Public API — roc()
# ---------------------------------------------------------------------------

def roc(
    response: NDArray[np.integer],
    predictor: NDArray[np.floating],
    *,
    direction: str = "auto",
    conf_level: float = 0.95,
    se_method: str = "hanley_mcneil",
) -> ROCResult:
    """Compute empirical ROC curve with AUC standard error and CI.

    Parameters
    ----------
    response : array of int
        Binary outcome (1 = unhealthy, 0 = healthy).
    predictor : array of float
        Continuous or ordinal test value.
    direction : str
        ``'<'`` (controls < cases, higher predictor → positive),
        ``'>'`` (controls > cases, lower predictor → positive),
        or ``'auto'`` (choose direction giving AUC ≥ 0.5).
    conf_level : float
        Confidence level for AUC CI.
    se_method : str
        ``'hanley_mcneil'`` or ``'delong'``.

    Returns
    -------
    ROCResult

    Raises
    ------
    InvalidLabelError, OnlyHealthyError, OnlyUnhealthyError
        If ``response`` is not 0/1 with both classes present.
    """
    if not 0 < conf_level < 1:
        raise ValueError(f"conf_level must be in (0, 1), got {conf_level}")
    if se_method not in _SE_METHODS:
        raise ValueError(
            f"se_method must be one of {_SE_METHODS}, got {se_method!r}"
        )

    response, predictor = _validate_roc_inputs(response, predictor)
    direction = _resolve_direction(response, predictor, direction)

    n1 = int(response.sum())
    n0 = len(response) - n1

    auc_val, V10, V01 = _compute_auc_and_placements(
        response, predictor, direction,
    )

    if se_method == "delong":
        var_auc = _delong_variance(V10, V01, n1, n0)
    else:
        var_auc = _hanley_mcneil_variance(auc_val, n1, n0)
    se_auc = float(np.sqrt(var_auc))
    ci_lo, ci_hi = _logit_ci(auc_val, var_auc, conf_level)

    thresholds, tpr, fpr = _empirical_roc_curve(
        response, predictor, direction,
    )

    logger.debug(
        "roc: n1=%d n0=%d direction=%s auc=%.6f se=%.6f (%s)",
        n1, n0, direction, auc_val, se_auc, se_method,
    )

    return ROCResult(
        thresholds=thresholds,
        tpr=tpr,
        fpr=fpr,
        auc=auc_val,
        auc_se=se_auc,
        auc_ci_lower=ci_lo,
        auc_ci_upper=ci_hi,
        conf_level=conf_level,
        n_positive=n1,
        n_negative=n0,
        direction=direction,
        se_method=se_method,
    )


# ---------------------------------------------------------------------------
# Estimator adapters — estimator(sample, alpha) -> ROCResult
# ---------------------------------------------------------------------------

def _split_sample(sample: NDArray) -> tuple[NDArray, NDArray]:
    """Split an N-by-2 ``[value, label]`` matrix into (response, predictor)."""
    sample = np.asarray(sample, dtype=np.float64)
    if sample.ndim != 2 or sample.shape[1] != 2:
        raise ShapeError(
            f"sample must be an N-by-2 matrix, got shape {sample.shape}"
        )
    return sample[:, 1], sample[:, 0]


def hanley_mcneil_estimator(sample: NDArray, alpha: float) -> ROCResult:
    """ROC of an N-by-2 sample with Hanley-McNeil SE, CI at ``1 - alpha``."""
    response, predictor = _split_sample(sample)
    return roc(response, predictor, conf_level=1.0 - alpha, se_method="hanley_mcneil")


def delong_estimator(sample: NDArray, alpha: float) -> ROCResult:
    """ROC of an N-by-2 sample with DeLong SE, CI at ``1 - alpha``."""
    response, predictor = _split_sample(sample)
    return roc(response, predictor, conf_level=1.0 - alpha, se_method="delong")
