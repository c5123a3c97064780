"""
Well-known Complex values, built once at import.

The real constants that depend on the working precision (pi, e) are not
frozen here; use bigcomplex.real.pi() / half_pi() / e() so they follow the
current engine setting.
"""

from .numeric import Complex
from .real import INFINITY, NAN, ONE, ZERO

i = Complex(ZERO, ONE)
negative_i = Complex(ZERO, -ONE)
zero = Complex(ZERO, ZERO)
one = Complex(ONE, ZERO)
nan = Complex(NAN, NAN)
infinity = Complex(INFINITY, INFINITY)

Complex.i = i
Complex.negative_i = negative_i
Complex.zero = zero
Complex.one = one
Complex.nan = nan
Complex.infinity = infinity

__all__ = ["i", "negative_i", "zero", "one", "nan", "infinity"]
