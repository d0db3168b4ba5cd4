"""
PyROCComp: compare the AUCs of two unpaired ROC curves.

Two independent samples of a diagnostic test, each a ``[value, label]``
matrix, are reduced to their ROC curves; the difference between the two
areas under the curve is tested with a z-test on their standard errors.

Usage:
    from pyroccomp import compare, uroccomp
    from pyroccomp import diagnostic, comparison
"""

import logging

__version__ = "0.1.0"

from pyroccomp._errors import (
    UROCCompError,
    ShapeError,
    InvalidLabelError,
    OnlyHealthyError,
    OnlyUnhealthyError,
    SignificanceLevelError,
    MissingDependencyError,
)
from pyroccomp import diagnostic
from pyroccomp import comparison
from pyroccomp.comparison import compare, uroccomp, UROCCompResult

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "diagnostic",
    "comparison",
    "compare",
    "uroccomp",
    "UROCCompResult",
    "UROCCompError",
    "ShapeError",
    "InvalidLabelError",
    "OnlyHealthyError",
    "OnlyUnhealthyError",
    "SignificanceLevelError",
    "MissingDependencyError",
]
