"""
ROC estimation for labelled diagnostic-test samples.

Empirical ROC curve, AUC via Mann-Whitney U, Hanley-McNeil or DeLong
standard errors, and the registry through which the comparison layer
looks up an estimator.

Validates against: R package pROC.
"""

from pyroccomp.diagnostic._common import ROCResult
from pyroccomp.diagnostic._roc import roc, hanley_mcneil_estimator, delong_estimator
from pyroccomp.diagnostic._registry import (
    DEFAULT_ESTIMATOR,
    Estimator,
    available_estimators,
    get_estimator,
    register_estimator,
    unregister_estimator,
)

__all__ = [
    "ROCResult",
    "Estimator",
    "DEFAULT_ESTIMATOR",
    "roc",
    "hanley_mcneil_estimator",
    "delong_estimator",
    "available_estimators",
    "get_estimator",
    "register_estimator",
    "unregister_estimator",
]
