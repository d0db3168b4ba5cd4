"""Exception types raised by pyroccomp.

Data errors subclass ``ValueError`` so existing ``except ValueError``
handlers keep working.  Errors tied to one input carry a ``dataset``
attribute (``'X'``, ``'Y'`` or ``None`` when raised by an estimator that
does not know which sample it was given).
"""

from __future__ import annotations


class UROCCompError(Exception):
    """Base class for all pyroccomp errors."""


class _DatasetError(UROCCompError, ValueError):

    def __init__(self, message: str, dataset: str | None = None) -> None:
        super().__init__(message)
        self.dataset = dataset


class ShapeError(_DatasetError):
    """Input is not a finite, real, non-empty N-by-2 matrix."""


class InvalidLabelError(_DatasetError):
    """Class-label column contains values other than 0 and 1."""


class OnlyHealthyError(_DatasetError):
    """Every subject is labelled 0 (healthy)."""


class OnlyUnhealthyError(_DatasetError):
    """Every subject is labelled 1 (unhealthy)."""


class SignificanceLevelError(UROCCompError, ValueError):
    """Significance level is not a real scalar in (0, 1)."""


class MissingDependencyError(UROCCompError, ImportError):
    """No ROC estimator is available under the requested name."""
