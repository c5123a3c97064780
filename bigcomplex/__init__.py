"""
bigcomplex - arbitrary-precision complex numbers

A Complex value type over mpmath reals with:
- Exact componentwise arithmetic
- Powers, roots and logarithms with principal-value conventions
- Trigonometric and hyperbolic functions and their inverses
- Lossless JSON serialization

Every operation is available as a free function in bigcomplex.functions
and as a method / operator on Complex.
"""

from .numeric import Complex, to_complex
from . import functions
from .constants import i, infinity, nan, negative_i, one, zero
from .value import ToleranceMode
from .core.errors import BigComplexError, InvalidNumericLiteral

__version__ = "1.0.0"

__all__ = [
    "Complex",
    "to_complex",
    "functions",
    "i",
    "negative_i",
    "zero",
    "one",
    "nan",
    "infinity",
    "ToleranceMode",
    "BigComplexError",
    "InvalidNumericLiteral",
]
