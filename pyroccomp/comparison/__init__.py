"""
Unpaired comparison of two ROC curves.

Validates two independent ``[test value, class label]`` samples, tests
whether their AUCs differ with a z-test on the independent standard
errors, and renders the result as tables and a combined ROC plot.
"""

from pyroccomp.comparison._common import UROCCompResult
from pyroccomp.comparison._validate import validate, DEFAULT_ALPHA
from pyroccomp.comparison._compare import compare, unpaired_z_test
from pyroccomp.comparison._report import auc_table, ztest_table, format_report, to_dict
from pyroccomp.comparison._plot import CurveSpec, ROCPlotSpec, roc_plot_spec, plot_roc_comparison
from pyroccomp.comparison._uroccomp import uroccomp

__all__ = [
    "UROCCompResult",
    "CurveSpec",
    "ROCPlotSpec",
    "DEFAULT_ALPHA",
    "validate",
    "compare",
    "unpaired_z_test",
    "auc_table",
    "ztest_table",
    "format_report",
    "to_dict",
    "roc_plot_spec",
    "plot_roc_comparison",
    "uroccomp",
]
