"""Registry of ROC estimators available to the comparison layer.

An estimator is any callable ``estimator(sample, alpha) -> ROCResult``
where ``sample`` is an N-by-2 ``[value, label]`` matrix.  Callers either
pass one directly or name a registered one; nothing is imported or
fetched implicitly.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from numpy.typing import NDArray

from pyroccomp._errors import MissingDependencyError
from pyroccomp.diagnostic._common import ROCResult
from pyroccomp.diagnostic._roc import delong_estimator, hanley_mcneil_estimator

logger = logging.getLogger(__name__)

Estimator = Callable[[NDArray, float], ROCResult]

DEFAULT_ESTIMATOR = "hanley_mcneil"

_ESTIMATORS: dict[str, Estimator] = {}


def register_estimator(
    name: str, func: Estimator, *, overwrite: bool = False,
) -> None:
    """Register ``func`` under ``name``.

    Raises ``ValueError`` if the name is taken and ``overwrite`` is false.
    """
    if not callable(func):
        raise TypeError(f"estimator must be callable, got {type(func).__name__}")
    if name in _ESTIMATORS and not overwrite:
        raise ValueError(
            f"An estimator named {name!r} is already registered; "
            f"pass overwrite=True to replace it"
        )
    _ESTIMATORS[name] = func
    logger.debug("registered ROC estimator %r", name)


def unregister_estimator(name: str) -> None:
    """Remove a registered estimator."""
    if name not in _ESTIMATORS:
        raise KeyError(name)
    del _ESTIMATORS[name]


def available_estimators() -> tuple[str, ...]:
    """Names of all registered estimators, sorted."""
    return tuple(sorted(_ESTIMATORS))


def get_estimator(estimator: str | Estimator | None = None) -> Estimator:
    """Resolve an estimator name (or ``None`` for the default) to a callable.

    Callables are returned unchanged.

    Raises
    ------
    MissingDependencyError
        If no estimator is registered under the name.
    """
    if estimator is None:
        estimator = DEFAULT_ESTIMATOR
    if callable(estimator):
        return estimator
    try:
        return _ESTIMATORS[estimator]
    except KeyError:
        registered = ", ".join(available_estimators()) or "none"
        raise MissingDependencyError(
            f"No ROC estimator named {estimator!r} is available "
            f"(registered: {registered}). Register one with "
            f"pyroccomp.diagnostic.register_estimator(name, func) or pass "
            f"a callable estimator(sample, alpha) directly."
        ) from None


register_estimator("hanley_mcneil", hanley_mcneil_estimator)
register_estimator("delong", delong_estimator)
