"""Trapezoidal-rule integration of sampled data with FMA accumulation.

Two entry points per precision:

- ``trapezoid*`` takes abscissas, checks whether their spacing is uniform
  (within a tolerance scaled to the first interval) and then uses either
  the composite uniform formula or a per-segment sum.
- ``trapezoid_even*`` takes a fixed spacing and trusts it.

Invalid inputs return NaN in the working precision instead of raising.
All sums run in index order, so results are bit-reproducible.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import ArrayLike

from .precision import FLOAT32, FLOAT64, Precision, get_precision

logger = logging.getLogger(__name__)

__all__ = [
    "trapezoid",
    "trapezoid_even",
    "trapezoid_f32",
    "trapezoid_f64",
    "trapezoid_even_f32",
    "trapezoid_even_f64",
]


def _interior_sum(y: np.ndarray, prec: Precision):
    total = prec.scalar(0.0)
    for v in y[1:-1]:
        total += v
    return total


def _first_irregular_interval(x: np.ndarray, prec: Precision) -> int | None:
    """
    Index i of the first interval x[i+1] - x[i] that differs from the
    first one by more than max(|h0|, 1) * tolerance, or None.
    """
    h0 = x[1] - x[0]
    tol = np.fmax(abs(h0), prec.scalar(1.0)) * prec.scalar(prec.tolerance)
    for i, (a, b) in enumerate(zip(x[1:-1], x[2:]), start=1):
        if abs((b - a) - h0) > tol:
            return i
    return None


def _uniform(y: np.ndarray, h, prec: Precision):
    # h * (0.5*y0 + sum(y[1:-1]) + 0.5*yn)
    return h * prec.fma(y[0] + y[-1], prec.scalar(0.5), _interior_sum(y, prec))


def _general(y: np.ndarray, x: np.ndarray, prec: Precision):
    half = prec.scalar(0.5)
    integral = prec.scalar(0.0)
    for y0, y1, x0, x1 in zip(y[:-1], y[1:], x[:-1], x[1:]):
        integral = prec.fma((x1 - x0) * half, y0 + y1, integral)
    return integral


def trapezoid(y: ArrayLike, x: ArrayLike, precision: Precision | str = FLOAT64):
    """
    Definite integral of samples y at abscissas x by the trapezoidal rule.

    Parameters
    ----------
    y, x:
        1-D array-likes of equal length (>= 2). Converted to the dtype of
        ``precision``.
    precision:
        ``FLOAT32``/``FLOAT64`` or a name/dtype accepted by
        :func:`get_precision`.

    Returns
    -------
    Scalar of the precision's dtype; NaN if the inputs are invalid.
    """
    prec = get_precision(precision)
    y = prec.asarray(y)
    x = prec.asarray(x)

    if y.ndim != 1 or x.ndim != 1:
        logger.debug("trapezoid: inputs must be 1-D, returning NaN.")
        return prec.nan
    n = y.shape[0]
    if n < 2 or x.shape[0] != n:
        logger.debug(
            "trapezoid: need >= 2 samples of equal length (len(y)=%d, len(x)=%d), returning NaN.",
            n,
            x.shape[0],
        )
        return prec.nan

    with np.errstate(all="ignore"):
        irregular = _first_irregular_interval(x, prec)
        if irregular is None:
            logger.debug("trapezoid[%s]: uniform spacing, n=%d.", prec.name, n)
            result = _uniform(y, x[1] - x[0], prec)
        else:
            logger.debug(
                "trapezoid[%s]: non-uniform spacing at interval %d, n=%d.",
                prec.name,
                irregular,
                n,
            )
            result = _general(y, x, prec)
        return prec.scalar(result)


def trapezoid_even(y: ArrayLike, dx, precision: Precision | str = FLOAT64):
    """
    Trapezoidal integration for evenly spaced samples.

    y = function values, dx = spacing between x-values (must be > 0).
    Returns NaN for fewer than two samples or non-positive dx.
    """
    prec = get_precision(precision)
    y = prec.asarray(y)
    dx = prec.scalar(dx)

    if y.ndim != 1 or y.shape[0] < 2:
        logger.debug("trapezoid_even: need a 1-D input with >= 2 samples, returning NaN.")
        return prec.nan
    if not dx > 0:
        logger.debug("trapezoid_even: dx=%r is not positive, returning NaN.", dx)
        return prec.nan

    with np.errstate(all="ignore"):
        return prec.scalar(_uniform(y, dx, prec))


# -----------------------------
# Fixed-precision entry points
# -----------------------------
def trapezoid_f64(y: ArrayLike, x: ArrayLike) -> np.float64:
    """Trapezoidal rule over (possibly non-uniform) abscissas in float64."""
    return trapezoid(y, x, FLOAT64)


def trapezoid_f32(y: ArrayLike, x: ArrayLike) -> np.float64:
    """
    Trapezoidal rule over (possibly non-uniform) abscissas.

    Despite the name this is float64 in and float64 out, with the float64
    tolerance, so it returns exactly what ``trapezoid_f64`` returns. For a
    single-precision computation use ``trapezoid(y, x, FLOAT32)``.
    """
    return trapezoid(y, x, FLOAT64)


def trapezoid_even_f32(y: ArrayLike, dx) -> np.float32:
    return trapezoid_even(y, dx, FLOAT32)


def trapezoid_even_f64(y: ArrayLike, dx) -> np.float64:
    return trapezoid_even(y, dx, FLOAT64)
