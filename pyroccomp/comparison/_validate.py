"""Input validation for the unpaired ROC comparison."""

from __future__ import annotations

import logging
import math
import numbers

import numpy as np
from numpy.typing import NDArray

from pyroccomp._errors import ShapeError, SignificanceLevelError
from pyroccomp.diagnostic._common import _check_labels

logger = logging.getLogger(__name__)

DEFAULT_ALPHA = 0.05


def _check_matrix(data, dataset: str) -> NDArray[np.floating]:
    """Coerce to a read-only float64 N-by-2 matrix or raise ShapeError."""
    try:
        arr = np.asarray(data)
    except (ValueError, TypeError) as exc:
        raise ShapeError(
            f"{dataset} must be a rectangular N-by-2 matrix", dataset,
        ) from exc

    if arr.dtype.kind not in "biuf":
        raise ShapeError(
            f"{dataset} must be a real numeric matrix, got dtype {arr.dtype}",
            dataset,
        )
    if arr.ndim != 2:
        raise ShapeError(
            f"{dataset} must be 2-D, got {arr.ndim}-D with shape {arr.shape}",
            dataset,
        )
    if arr.shape[0] == 0:
        raise ShapeError(f"{dataset} must not be empty", dataset)
    if arr.shape[1] != 2:
        raise ShapeError(
            f"{dataset} must have exactly 2 columns, got {arr.shape[1]}",
            dataset,
        )

    arr = np.array(arr, dtype=np.float64)
    if not np.all(np.isfinite(arr)):
        raise ShapeError(f"{dataset} must contain only finite values", dataset)

    arr.flags.writeable = False
    return arr


def _check_alpha(alpha) -> float:
    """Return alpha as a float in (0, 1), defaulting when ``None``."""
    if alpha is None:
        return DEFAULT_ALPHA
    if isinstance(alpha, np.ndarray) and alpha.ndim == 0 and alpha.dtype.kind in "iuf":
        alpha = alpha.item()
    if isinstance(alpha, (bool, np.bool_)) or not isinstance(alpha, numbers.Real):
        raise SignificanceLevelError(
            f"alpha must be a real scalar, got {type(alpha).__name__}"
        )
    alpha = float(alpha)
    if not math.isfinite(alpha) or not (0.0 < alpha < 1.0):
        raise SignificanceLevelError(f"alpha must be in (0, 1), got {alpha}")
    return alpha


def validate(
    x, y, alpha: float | None = None,
) -> tuple[NDArray[np.floating], NDArray[np.floating], float]:
    """Validate two labelled samples and the significance level.

    Parameters
    ----------
    x, y : array-like, shape (n, 2)
        ``[:, 0]`` test values, ``[:, 1]`` class labels
        (1 = unhealthy, 0 = healthy).
    alpha : float or None
        Significance level in (0, 1).  ``None`` means 0.05.

    Returns
    -------
    tuple
        ``(x, y, alpha)`` with read-only float64 arrays and a float alpha.

    Raises
    ------
    ShapeError
        Not a finite, real, non-empty N-by-2 matrix.
    SignificanceLevelError
        ``alpha`` not a real scalar in (0, 1).
    InvalidLabelError
        A label other than 0 or 1.
    OnlyHealthyError, OnlyUnhealthyError
        Only one class present.
    """
    x = _check_matrix(x, "X")
    y = _check_matrix(y, "Y")
    alpha = _check_alpha(alpha)

    _check_labels(x[:, 1], "X")
    _check_labels(y[:, 1], "Y")

    logger.debug(
        "validated X (n=%d) and Y (n=%d), alpha=%g",
        x.shape[0], y.shape[0], alpha,
    )
    return x, y, alpha
