"""
Real-number engine adapter.

Wraps mpmath.mpf so the complex layer sees IEEE-754-like semantics: division
by zero gives Infinity or NaN, out-of-domain inputs give NaN, and no function
ever returns an mpmath.mpc. Everything runs at mpmath's global working
precision, which this module only reads.
"""

from __future__ import annotations

import numbers
from decimal import Decimal
from typing import Any, Callable, Union

import mpmath
from mpmath import mpf
from mpmath.libmp import repr_dps

from .core.errors import InvalidNumericLiteral
from .core.logging import get_context_logger

logger = get_context_logger(__name__)

RealLike = Union[mpf, int, float, str, Decimal]

ZERO = mpf(0)
ONE = mpf(1)
TEN = mpf(10)
ONE_HALF = mpf("0.5")
NAN = mpf("nan")
INFINITY = mpf("inf")


def to_real(value: Any) -> mpf:
    """
    Parse a real-like value into an engine real.

    Args:
        value: mpf, int, float, Decimal, Fraction or numeric string

    Returns:
        mpf rounded to the working precision

    Raises:
        InvalidNumericLiteral: If the value cannot be parsed
    """
    if isinstance(value, mpf):
        return value

    if isinstance(value, Decimal):
        if value.is_nan():
            return NAN
        if value.is_infinite():
            return -INFINITY if value.is_signed() else INFINITY
        value = str(value)

    if isinstance(value, str):
        text = value.strip()
        if not text:
            logger.debug("Rejected empty numeric literal", extra_data={"value": value})
            raise InvalidNumericLiteral(value, "empty string")
        try:
            return mpf(text)
        except (ValueError, TypeError) as exc:
            logger.debug("Rejected numeric literal %r", value, extra_data={"reason": str(exc)})
            raise InvalidNumericLiteral(value, str(exc)) from exc

    if isinstance(value, bool):
        logger.debug("Rejected boolean %r", value)
        raise InvalidNumericLiteral(value, "booleans are not numbers")

    if isinstance(value, (int, float)):
        return mpf(value)

    if isinstance(value, numbers.Rational):
        return mpf(value.numerator) / value.denominator

    logger.debug("Rejected value of type %s", type(value).__name__, extra_data={"value": repr(value)})
    raise InvalidNumericLiteral(value, f"unsupported type {type(value).__name__}")


# Predicates

def is_nan(x: mpf) -> bool:
    return mpmath.isnan(x)


def is_finite(x: mpf) -> bool:
    return mpmath.isfinite(x)


def is_int(x: mpf) -> bool:
    """True for finite integral values."""
    return mpmath.isfinite(x) and mpmath.isint(x)


# Sign helpers

def with_sign(x: mpf, negative: bool) -> mpf:
    """Return |x| carrying the requested sign. NaN stays NaN."""
    magnitude = abs(x)
    return -magnitude if negative else magnitude


def clamp(x: mpf, lower: mpf, upper: mpf) -> mpf:
    """Clamp into [lower, upper], letting NaN through."""
    if x > upper:
        return upper
    if x < lower:
        return lower
    return x


# Arithmetic

def div(a: mpf, b: mpf) -> mpf:
    """a / b with x/0 = signed Infinity and 0/0 = NaN."""
    if b == 0:
        if a == 0 or is_nan(a):
            return NAN
        return INFINITY if a > 0 else -INFINITY
    return a / b


def power(base: mpf, exponent: mpf) -> mpf:
    """Real power; NaN where the real result does not exist."""
    if base == 0 and exponent < 0:
        return INFINITY
    if is_int(exponent):
        return base ** int(exponent)
    if base < 0:
        return NAN
    return base ** exponent


def sqrt(x: mpf) -> mpf:
    if x < 0:
        return NAN
    return mpmath.sqrt(x)


def ln(x: mpf) -> mpf:
    if x < 0:
        return NAN
    if x == 0:
        return -INFINITY
    return mpmath.ln(x)


def exp(x: mpf) -> mpf:
    return mpmath.exp(x)


# Trigonometric and hyperbolic

def sin(x: mpf) -> mpf:
    if mpmath.isinf(x):
        return NAN
    return mpmath.sin(x)


def cos(x: mpf) -> mpf:
    if mpmath.isinf(x):
        return NAN
    return mpmath.cos(x)


def sinh(x: mpf) -> mpf:
    if mpmath.isinf(x):
        return x
    return mpmath.sinh(x)


def cosh(x: mpf) -> mpf:
    if mpmath.isinf(x):
        return INFINITY
    return mpmath.cosh(x)


def asin(x: mpf) -> mpf:
    if is_nan(x) or x > 1 or x < -1:
        return NAN
    return mpmath.asin(x)


def atan2(y: mpf, x: mpf) -> mpf:
    """Two-argument arctangent in (-pi, pi]."""
    if is_nan(x) or is_nan(y):
        return NAN
    return mpmath.atan2(y, x)


def hypot(x: mpf, y: mpf) -> mpf:
    """sqrt(x^2 + y^2) without intermediate overflow."""
    if mpmath.isinf(x) or mpmath.isinf(y):
        return INFINITY
    if is_nan(x) or is_nan(y):
        return NAN
    return mpmath.hypot(x, y)


# Constants at the working precision

def pi() -> mpf:
    return mpf(mpmath.pi)


def half_pi() -> mpf:
    return mpf(mpmath.pi) / 2


def e() -> mpf:
    return mpf(mpmath.e)


# Rounding

def _snap(x: mpf, step: RealLike, snap: Callable[[mpf], mpf]) -> mpf:
    """snap(x / step) * step, letting non-finite values and a zero step through div()."""
    if not is_finite(x):
        return x
    step = to_real(step)
    quotient = div(x, step)
    if not is_finite(quotient):
        return quotient
    return snap(quotient) * step


def round_to(x: mpf, step: RealLike = ONE) -> mpf:
    """Round to the nearest multiple of step (ties to even)."""
    return _snap(x, step, mpmath.nint)


def ceil_to(x: mpf, step: RealLike = ONE) -> mpf:
    return _snap(x, step, mpmath.ceil)


def floor_to(x: mpf, step: RealLike = ONE) -> mpf:
    return _snap(x, step, mpmath.floor)


def to_significant_digits(x: mpf, digits: int = 1) -> mpf:
    """
    Round to a number of significant decimal digits.

    Args:
        x: Value to round
        digits: Significant digits to keep (at least 1)

    Returns:
        The rounded value; zero and non-finite values are returned unchanged
    """
    digits = int(digits)
    if digits < 1:
        raise ValueError(f"digits must be at least 1, got {digits}")
    if x == 0 or not is_finite(x):
        return x

    magnitude = abs(x)
    exponent = int(mpmath.floor(mpmath.log10(magnitude)))
    # log10 can land one off next to exact powers of ten
    if TEN ** (exponent + 1) <= magnitude:
        exponent += 1
    elif TEN ** exponent > magnitude:
        exponent -= 1

    shift = digits - 1 - exponent
    if shift >= 0:
        scale = TEN ** shift
        return mpmath.nint(x * scale) / scale
    scale = TEN ** -shift
    return mpmath.nint(x / scale) * scale


# Formatting

def to_string(x: mpf) -> str:
    """Human-readable form at the working precision, without a trailing '.0'."""
    mantissa, marker, exponent = mpmath.nstr(x, mpmath.mp.dps).partition("e")
    if mantissa.endswith(".0"):
        mantissa = mantissa[:-2]
    return mantissa + marker + exponent


def to_tex(x: mpf) -> str:
    if is_nan(x):
        return r"\mathrm{NaN}"
    if mpmath.isinf(x):
        return r"\infty" if x > 0 else r"-\infty"
    return to_string(x)


def to_exact_string(x: mpf) -> str:
    """Decimal string that parses back to exactly x at the working precision."""
    return mpmath.nstr(x, repr_dps(mpmath.mp.prec))


def to_float(x: mpf) -> float:
    return float(x)
