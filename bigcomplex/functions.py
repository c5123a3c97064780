"""
Complex-valued functions.

The single implementation of every operation on Complex values; Complex
methods and operators delegate here. Each function coerces its operands
with to_complex(), so ints, floats, numeric strings, Python complex values
and mpmath numbers are accepted wherever a Complex is.

Branch cuts follow arg() in (-pi, pi]. Nothing here raises on domain
problems: division by zero, ln(0) and friends produce NaN / Infinity
components through bigcomplex.real.

Reference formulas:
- complex exponentiation: mathworld.wolfram.com/ComplexExponentiation.html
- asin: mathonweb.com/help_ebook/html/complex_funcs.htm
- inverse hyperbolics: mathworld.wolfram.com/InverseHyperbolic*.html
"""

from __future__ import annotations

from typing import Any

from mpmath import mpf

from . import real as engine
from .constants import i, infinity, negative_i
from .core.config import get_settings
from .core.logging import get_context_logger
from .numeric import Complex, to_complex
from .real import INFINITY, ONE, ONE_HALF, TEN, ZERO, RealLike
from .value import ToleranceMode, fuzzy_compare

logger = get_context_logger(__name__)


# Comparison

def equals(a: Any, b: Any) -> bool:
    """Exact componentwise equality (no tolerance)."""
    a, b = to_complex(a), to_complex(b)
    return a.real == b.real and a.imaginary == b.imaginary


def approx_equals(
    a: Any, b: Any, tolerance: RealLike | None = None, mode: str = ToleranceMode.ABSOLUTE
) -> bool:
    """
    Componentwise comparison within a tolerance.

    Args:
        a: First value
        b: Second value
        tolerance: Per-component tolerance (None = settings.APPROX_TOLERANCE, 1e-6)
        mode: ToleranceMode.ABSOLUTE or ToleranceMode.RELATIVE

    Returns:
        True if both components are within tolerance
    """
    a, b = to_complex(a), to_complex(b)
    if tolerance is None:
        tolerance = get_settings().APPROX_TOLERANCE
    tolerance = engine.to_real(tolerance)
    return (fuzzy_compare(a.real, b.real, tolerance, mode)
            and fuzzy_compare(a.imaginary, b.imaginary, tolerance, mode))


# Arithmetic

def add(a: Any, b: Any) -> Complex:
    a, b = to_complex(a), to_complex(b)
    return Complex(a.real + b.real, a.imaginary + b.imaginary)


def sub(a: Any, b: Any) -> Complex:
    a, b = to_complex(a), to_complex(b)
    return Complex(a.real - b.real, a.imaginary - b.imaginary)


def mul(a: Any, b: Any) -> Complex:
    """(a + bi)(c + di) = (ac - bd) + (ad + bc)i"""
    a, b = to_complex(a), to_complex(b)
    real_part = a.real * b.real - a.imaginary * b.imaginary
    imag_part = a.real * b.imaginary + a.imaginary * b.real
    return Complex(real_part, imag_part)


def div(a: Any, b: Any) -> Complex:
    """
    (a + bi) / (c + di) = [(a + bi)(c - di)] / (c^2 + d^2)

    Dividing by zero does not raise: the components become Infinity or NaN
    as the real division gives them.
    """
    a, b = to_complex(a), to_complex(b)
    denominator = b.real * b.real + b.imaginary * b.imaginary
    real_part = engine.div(a.real * b.real + a.imaginary * b.imaginary, denominator)
    imag_part = engine.div(a.imaginary * b.real - a.real * b.imaginary, denominator)
    return Complex(real_part, imag_part)


def recip(z: Any) -> Complex:
    """1 / z"""
    z = to_complex(z)
    denominator = z.real * z.real + z.imaginary * z.imaginary
    return Complex(engine.div(z.real, denominator), engine.div(-z.imaginary, denominator))


def conj(z: Any) -> Complex:
    z = to_complex(z)
    return Complex(z.real, -z.imaginary)


def neg(z: Any) -> Complex:
    z = to_complex(z)
    return Complex(-z.real, -z.imaginary)


def mod(z: Any) -> mpf:
    """Magnitude, via hypot so large or tiny components do not overflow."""
    z = to_complex(z)
    return engine.hypot(z.real, z.imaginary)


def arg(z: Any) -> mpf:
    """Principal argument atan2(im, re), in (-pi, pi]."""
    z = to_complex(z)
    return engine.atan2(z.imaginary, z.real)


# Powers, roots and logarithms

def pow(base: Any, exponent: Any) -> Complex:
    """
    Principal value of base ** exponent.

    An imaginary (or zero) base raised to a real integer takes a fast path:
    (bi)^n = b^n * i^n, with i^n read from the 4-cycle 1, i, -1, -i. The
    general formula would leave rounding noise in the component that must be
    exactly zero.

    Otherwise, with r = |base| and t = arg(base):
        base^(c + di) = r^c * e^(-d t) * (cos(x) + i sin(x)),
        x = c t + d ln(r^2) / 2
    """
    base, exponent = to_complex(base), to_complex(exponent)

    if base.real == 0 and exponent.imaginary == 0 and engine.is_int(exponent.real):
        magnitude = engine.power(base.imaginary, exponent.real)
        residue = int(exponent.real) % 4
        logger.debug(
            "pow: imaginary base to integer power, residue %d",
            residue,
            extra_data={"base": base, "exponent": exponent.real},
        )
        if residue == 0:
            return Complex(magnitude, ZERO)
        elif residue == 1:
            return Complex(ZERO, magnitude)
        elif residue == 2:
            return Complex(-magnitude, ZERO)
        else:
            return Complex(ZERO, -magnitude)

    r = mod(base)
    theta = arg(base)

    left_factor = engine.power(r, exponent.real) * engine.exp(-exponent.imaginary * theta)
    ratio = exponent.real * theta
    # The ln(r^2) term vanishes for a real exponent; skipping it keeps
    # 0 ** real out of 0 * -Infinity
    if exponent.imaginary != 0:
        ratio += exponent.imaginary * engine.ln(r * r) / 2

    return Complex(engine.cos(ratio) * left_factor, engine.sin(ratio) * left_factor)


def sqrt(z: Any) -> Complex:
    """
    Principal square root.

    Real inputs are handled directly so that sqrt(4) is exactly 2 and
    sqrt(-1) exactly i.
    """
    z = to_complex(z)
    if z.imaginary == 0:
        if z.real >= 0:
            return Complex(engine.sqrt(z.real), ZERO)
        return Complex(ZERO, engine.sqrt(abs(z.real)))
    return pow(z, ONE_HALF)


def exp(z: Any) -> Complex:
    """e ** z"""
    return pow(engine.e(), z)


def ln(z: Any) -> Complex:
    """Principal natural logarithm, cut along the negative real axis."""
    z = to_complex(z)
    return Complex(engine.ln(mod(z)), arg(z))


def log(z: Any, base: Any = TEN) -> Complex:
    """Logarithm to an arbitrary (complex) base, default 10."""
    return div(ln(z), ln(base))


def lerp(a: Any, b: Any, t: RealLike) -> Complex:
    """(1 - t) * a + t * b, with t a real scalar."""
    a, b = to_complex(a), to_complex(b)
    t = engine.to_real(t)
    ratio = ONE - t
    return Complex(ratio * a.real + t * b.real, ratio * a.imaginary + t * b.imaginary)


# Rounding

def round(z: Any, step: RealLike = ONE) -> Complex:
    """Round each component to the nearest multiple of step."""
    z = to_complex(z)
    return Complex(engine.round_to(z.real, step), engine.round_to(z.imaginary, step))


def ceil(z: Any, step: RealLike = ONE) -> Complex:
    z = to_complex(z)
    return Complex(engine.ceil_to(z.real, step), engine.ceil_to(z.imaginary, step))


def floor(z: Any, step: RealLike = ONE) -> Complex:
    z = to_complex(z)
    return Complex(engine.floor_to(z.real, step), engine.floor_to(z.imaginary, step))


def to_significant_digits(z: Any, digits: int = 1) -> Complex:
    """Round each component independently to `digits` significant digits."""
    z = to_complex(z)
    return Complex(
        engine.to_significant_digits(z.real, digits),
        engine.to_significant_digits(z.imaginary, digits),
    )


# Trigonometric

def sin(z: Any) -> Complex:
    z = to_complex(z)
    return Complex(
        engine.sin(z.real) * engine.cosh(z.imaginary),
        engine.cos(z.real) * engine.sinh(z.imaginary),
    )


def cos(z: Any) -> Complex:
    z = to_complex(z)
    return Complex(
        engine.cos(z.real) * engine.cosh(z.imaginary),
        -(engine.sin(z.real) * engine.sinh(z.imaginary)),
    )


def tan(z: Any) -> Complex:
    return div(sin(z), cos(z))


def csc(z: Any) -> Complex:
    return recip(sin(z))


def sec(z: Any) -> Complex:
    return recip(cos(z))


def cot(z: Any) -> Complex:
    return recip(tan(z))


def asin(z: Any) -> Complex:
    """
    Inverse sine.

    With p = (1 + x)^2 + y^2 and q = (1 - x)^2 + y^2:
        a = (sqrt(p) - sqrt(q)) / 2,  b = (sqrt(p) + sqrt(q)) / 2
        asin(z) = asin(a) +/- i ln(b + sqrt(b^2 - 1))

    The imaginary part is negative when y < 0, or when x > 0 and y <= 0,
    and non-negative otherwise. So asin(2) = pi/2 - 1.3169...i.
    """
    z = to_complex(z)

    imag_squared = z.imaginary * z.imaginary
    left = engine.sqrt((ONE + z.real) ** 2 + imag_squared)
    right = engine.sqrt((ONE - z.real) ** 2 + imag_squared)

    # |a| <= 1 <= b holds exactly; clamp away rounding overshoot
    a = engine.clamp((left - right) / 2, -ONE, ONE)
    b = engine.clamp((left + right) / 2, ONE, INFINITY)

    real_part = engine.asin(a)
    imag_magnitude = engine.ln(b + engine.sqrt(b * b - ONE))

    negative = z.imaginary < 0 or (z.real > 0 and z.imaginary <= 0)
    return Complex(real_part, engine.with_sign(imag_magnitude, negative))


def acos(z: Any) -> Complex:
    """pi/2 - asin(z)"""
    return sub(engine.half_pi(), asin(z))


def atan(z: Any) -> Complex:
    """
    Inverse tangent.

        Re = atan2(2x, 1 - x^2 - y^2) / 2
        Im = ln((x^2 + (1 + y)^2) / (x^2 + (1 - y)^2)) / 4
    """
    z = to_complex(z)
    real_squared = z.real * z.real
    imag_squared = z.imaginary * z.imaginary

    real_part = engine.atan2(2 * z.real, ONE - real_squared - imag_squared) / 2
    ratio = engine.div(
        real_squared + (ONE + z.imaginary) ** 2,
        real_squared + (ONE - z.imaginary) ** 2,
    )
    imag_part = engine.ln(ratio) / 4
    return Complex(real_part, imag_part)


def acsc(z: Any) -> Complex:
    return asin(recip(z))


def asec(z: Any) -> Complex:
    return acos(recip(z))


def acot(z: Any) -> Complex:
    return atan(recip(z))


# Hyperbolic

def sinh(z: Any) -> Complex:
    z = to_complex(z)
    return Complex(
        engine.sinh(z.real) * engine.cos(z.imaginary),
        engine.cosh(z.real) * engine.sin(z.imaginary),
    )


def cosh(z: Any) -> Complex:
    z = to_complex(z)
    return Complex(
        engine.cosh(z.real) * engine.cos(z.imaginary),
        engine.sinh(z.real) * engine.sin(z.imaginary),
    )


def tanh(z: Any) -> Complex:
    return div(sinh(z), cosh(z))


def csch(z: Any) -> Complex:
    return recip(sinh(z))


def sech(z: Any) -> Complex:
    return recip(cosh(z))


def coth(z: Any) -> Complex:
    return recip(tanh(z))


def asinh(z: Any) -> Complex:
    """
    Inverse hyperbolic sine, -i asin(iz).

    The rotation leaves branch artifacts in the signs, so the result keeps
    its magnitudes and takes its signs from the input: the real part is
    negative when x < 0 (or x == 0 and y < 0), the imaginary part is
    negative when y < 0.
    """
    z = to_complex(z)
    rotated = mul(negative_i, asin(mul(i, z)))

    real_negative = z.real < 0 or (z.real == 0 and z.imaginary < 0)
    return Complex(
        engine.with_sign(rotated.real, real_negative),
        engine.with_sign(rotated.imaginary, z.imaginary < 0),
    )


def acosh(z: Any) -> Complex:
    """sqrt(z - 1) / sqrt(1 - z) * acos(z)"""
    z = to_complex(z)
    return mul(div(sqrt(sub(z, ONE)), sqrt(sub(ONE, z))), acos(z))


def atanh(z: Any) -> Complex:
    """-i atan(iz)"""
    return mul(negative_i, atan(mul(i, z)))


def acsch(z: Any) -> Complex:
    """
    Inverse hyperbolic cosecant, asinh(1/z).

    On the real axis the real closed form asinh(w) = ln(|w| + sqrt(w^2 + 1)),
    w = 1/x, is used with the sign of w; acsch(0) is Infinity.
    """
    z = to_complex(z)
    if z.imaginary == 0:
        if z.real == 0:
            logger.debug("acsch: origin maps to Infinity", extra_data={"input": z})
            return Complex(INFINITY, ZERO)
        w = engine.div(ONE, z.real)
        magnitude = engine.ln(abs(w) + engine.sqrt(w * w + ONE))
        return Complex(engine.with_sign(magnitude, w < 0), ZERO)
    return asinh(recip(z))


def asech(z: Any) -> Complex:
    """
    Inverse hyperbolic secant, acosh(1/z).

    asech(0) is the infinity constant; a negative real input gets a
    non-negative imaginary part.
    """
    z = to_complex(z)
    if z.real == 0 and z.imaginary == 0:
        logger.debug("asech: origin maps to infinity", extra_data={"input": z})
        return infinity

    result = acosh(recip(z))
    if z.imaginary == 0 and z.real < 0:
        return Complex(result.real, abs(result.imaginary))
    return result


def acoth(z: Any) -> Complex:
    """Inverse hyperbolic cotangent, atanh(1/z); acoth(0) = i pi/2."""
    z = to_complex(z)
    if z.real == 0 and z.imaginary == 0:
        logger.debug("acoth: origin maps to i pi/2", extra_data={"input": z})
        return Complex(ZERO, engine.half_pi())
    return atanh(recip(z))
