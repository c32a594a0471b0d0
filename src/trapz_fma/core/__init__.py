from .fma import fma_f32, fma_f64
from .precision import FLOAT32, FLOAT64, Precision, fma, get_precision
from .trapezoid import (
    trapezoid,
    trapezoid_even,
    trapezoid_even_f32,
    trapezoid_even_f64,
    trapezoid_f32,
    trapezoid_f64,
)

__all__ = [
    "Precision",
    "FLOAT32",
    "FLOAT64",
    "get_precision",
    "fma",
    "fma_f32",
    "fma_f64",
    "trapezoid",
    "trapezoid_even",
    "trapezoid_f32",
    "trapezoid_f64",
    "trapezoid_even_f32",
    "trapezoid_even_f64",
]
