from __future__ import annotations

import math

import numpy as np

# float64 values at or beyond this magnitude round to infinity in float32
_F32_ROUNDS_TO_INF = (2.0 - 2.0**-24) * 2.0**127


def fma_f64(a: float, b: float, c: float) -> np.float64:
    """
    Fused multiply-add in double precision: a*b + c with one rounding.

    math.fma raises on invalid operations and on overflow; here those
    cases return the IEEE result instead, so the function is total.
    """
    a, b, c = float(a), float(b), float(c)
    if not (math.isfinite(a) and math.isfinite(b) and math.isfinite(c)):
        # non-finite operands: fused and unfused results coincide
        return np.float64(a * b + c)
    try:
        return np.float64(math.fma(a, b, c))
    except OverflowError:
        return np.float64(a * b + c)


def _narrow(v) -> np.float32:
    """Round to float32 without numpy overflow warnings."""
    if isinstance(v, np.float32):
        return v
    v = float(v)
    if abs(v) >= _F32_ROUNDS_TO_INF:
        return np.float32(math.copysign(math.inf, v))
    return np.float32(v)


def _round_to_odd_sum(p: float, c: float) -> float:
    """
    p + c in double precision, rounded to odd.

    The exact error term comes from a two-sum; an inexact result whose
    last significand bit is even is moved one ulp towards the exact value.
    """
    s = p + c
    bp = s - p
    err = (p - (s - bp)) + (c - bp)
    if err == 0.0:
        return s
    if int(np.float64(s).view(np.int64)) & 1:
        return s
    return math.nextafter(s, math.inf if err > 0.0 else -math.inf)


def fma_f32(a, b, c) -> np.float32:
    """
    Fused multiply-add in single precision.

    The float32 product a*b is exact in float64. Rounding the float64 sum
    to odd and then to float32 gives the correctly rounded result, because
    float64 carries more than 2*24 + 2 significand bits.
    """
    a, b, c = float(_narrow(a)), float(_narrow(b)), float(_narrow(c))
    if not (math.isfinite(a) and math.isfinite(b) and math.isfinite(c)):
        return np.float32(a * b + c)
    return _narrow(_round_to_odd_sum(a * b, c))
