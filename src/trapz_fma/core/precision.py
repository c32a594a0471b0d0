from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import numpy as np

from .fma import fma_f32, fma_f64


@dataclass(frozen=True, slots=True)
class Precision:
    """
    Floating-point width used by the integrators.

    Stores:
      - name: canonical name ("float32" / "float64")
      - dtype: numpy scalar type all arithmetic is carried out in
      - tolerance: relative tolerance for the uniform-spacing check
      - fma: fused multiply-add kernel for this width
    """

    name: str
    dtype: type[np.floating]
    tolerance: float
    fma: Callable

    def __post_init__(self):
        if not np.issubdtype(self.dtype, np.floating):
            raise ValueError("dtype must be a floating-point type.")
        if not self.tolerance > 0:
            raise ValueError("tolerance must be positive.")

    # -----------------------------
    # Helpers
    # -----------------------------
    @property
    def nan(self) -> np.floating:
        return self.dtype(np.nan)

    def scalar(self, value) -> np.floating:
        """Convert a Python/numpy number to this precision."""
        with np.errstate(over="ignore"):
            return self.dtype(value)

    def asarray(self, values) -> np.ndarray:
        """Array view of values in this precision (no copy if already matching)."""
        with np.errstate(over="ignore"):
            return np.asarray(values, dtype=self.dtype)


FLOAT32 = Precision("float32", np.float32, 1e-6, fma_f32)
FLOAT64 = Precision("float64", np.float64, 1e-12, fma_f64)

_ALIASES = {
    "float32": FLOAT32,
    "f32": FLOAT32,
    "single": FLOAT32,
    "float64": FLOAT64,
    "f64": FLOAT64,
    "double": FLOAT64,
}


def get_precision(value) -> Precision:
    """
    Resolve a precision from a Precision, a name or a numpy dtype.

    Raises ValueError for anything that is not float32 or float64.
    """
    if isinstance(value, Precision):
        return value
    if isinstance(value, str):
        try:
            return _ALIASES[value.strip().lower()]
        except KeyError:
            raise ValueError(f"Unknown precision {value!r}.") from None
    try:
        dtype = np.dtype(value)
    except TypeError:
        raise ValueError(f"Unknown precision {value!r}.") from None
    if dtype == np.float32:
        return FLOAT32
    if dtype == np.float64:
        return FLOAT64
    raise ValueError(f"Unsupported precision dtype {dtype}.")


def fma(a, b, c, precision: Precision | str | None = None):
    """Fused multiply-add at the given precision (float64 by default)."""
    prec = FLOAT64 if precision is None else get_precision(precision)
    return prec.fma(a, b, c)
