"""
The Complex value type.

A frozen pydantic model holding two mpmath reals. The formulas live in
bigcomplex.functions; the methods and operators here delegate to them so
that z.sin() and functions.sin(z) are the same computation.
"""

from __future__ import annotations

import json
import numbers
from typing import Any, Callable, ClassVar

from mpmath import mpc, mpf
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from . import real as engine
from .core.errors import InvalidNumericLiteral
from .real import RealLike


class Complex(BaseModel):
    """
    Arbitrary-precision complex number.

    Both components are mpmath reals at the engine's working precision. They
    may be NaN or Infinity; any pair of reals is a valid Complex.

    Examples:
        >>> Complex(3, -4)          # 3 - 4i
        >>> Complex("0.1")          # 0.1, imaginary part exactly zero
        >>> Complex(1, 1).sqrt()
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    real: mpf = Field(description="The real part")
    imaginary: mpf = Field(default=engine.ZERO, description="The imaginary part")

    # Bound by bigcomplex.constants
    i: ClassVar[Complex]
    negative_i: ClassVar[Complex]
    zero: ClassVar[Complex]
    one: ClassVar[Complex]
    nan: ClassVar[Complex]
    infinity: ClassVar[Complex]

    def __init__(self, real: RealLike = 0, imaginary: RealLike = 0, **kwargs):
        """
        Initialize a Complex number.

        Args:
            real: Real part (number, numeric string, Decimal or mpf)
            imaginary: Imaginary part (default 0)

        Raises:
            InvalidNumericLiteral: If either part cannot be parsed
        """
        super().__init__(real=engine.to_real(real), imaginary=engine.to_real(imaginary), **kwargs)

    @field_validator("real", "imaginary", mode="before")
    @classmethod
    def _parse_component(cls, value: Any) -> mpf:
        return engine.to_real(value)

    @field_serializer("real", "imaginary")
    def _serialize_component(self, value: mpf) -> str:
        return engine.to_exact_string(value)

    # Construction helpers

    @classmethod
    def from_real(cls, value: Any) -> Complex:
        """Coerce a number or Complex to a Complex (see to_complex)."""
        return to_complex(value)

    @classmethod
    def from_json(cls, data: str | bytes | dict) -> Complex:
        """
        Rebuild a Complex from to_json() output.

        Args:
            data: The mapping returned by to_json(), or its JSON text

        Raises:
            InvalidNumericLiteral: If the payload is malformed
        """
        if isinstance(data, (str, bytes)):
            try:
                data = json.loads(data)
            except json.JSONDecodeError as exc:
                raise InvalidNumericLiteral(data, "malformed JSON") from exc

        if not isinstance(data, dict) or "real" not in data:
            raise InvalidNumericLiteral(data, "expected a mapping with a 'real' key")

        return cls(data["real"], data.get("imaginary", 0))

    # Comparison

    def equals(self, other: Any) -> bool:
        """Exact componentwise equality."""
        return fn.equals(self, other)

    def approx_equals(self, other: Any, tolerance: RealLike | None = None) -> bool:
        """Componentwise equality within an absolute tolerance (default 1e-6)."""
        return fn.approx_equals(self, other, tolerance)

    def __eq__(self, other: Any) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return fn.equals(self, other)

    def __ne__(self, other: Any) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        # Match hash(x) for real values, as the builtin complex does
        if self.imaginary == 0:
            return hash(self.real)
        return hash((self.real, self.imaginary))

    def __bool__(self) -> bool:
        return not (self.real == 0 and self.imaginary == 0)

    # Arithmetic

    def add(self, other: Any) -> Complex:
        return fn.add(self, other)

    def sub(self, other: Any) -> Complex:
        return fn.sub(self, other)

    def mul(self, other: Any) -> Complex:
        return fn.mul(self, other)

    def div(self, other: Any) -> Complex:
        return fn.div(self, other)

    def recip(self) -> Complex:
        return fn.recip(self)

    def conj(self) -> Complex:
        return fn.conj(self)

    def neg(self) -> Complex:
        return fn.neg(self)

    def mod(self) -> mpf:
        """Magnitude |z|."""
        return fn.mod(self)

    def arg(self) -> mpf:
        """Principal argument in (-pi, pi]."""
        return fn.arg(self)

    def __add__(self, other: Any) -> Complex:
        if not _is_operand(other):
            return NotImplemented
        return fn.add(self, other)

    def __radd__(self, other: Any) -> Complex:
        if not _is_operand(other):
            return NotImplemented
        return fn.add(other, self)

    def __sub__(self, other: Any) -> Complex:
        if not _is_operand(other):
            return NotImplemented
        return fn.sub(self, other)

    def __rsub__(self, other: Any) -> Complex:
        if not _is_operand(other):
            return NotImplemented
        return fn.sub(other, self)

    def __mul__(self, other: Any) -> Complex:
        if not _is_operand(other):
            return NotImplemented
        return fn.mul(self, other)

    def __rmul__(self, other: Any) -> Complex:
        if not _is_operand(other):
            return NotImplemented
        return fn.mul(other, self)

    def __truediv__(self, other: Any) -> Complex:
        if not _is_operand(other):
            return NotImplemented
        return fn.div(self, other)

    def __rtruediv__(self, other: Any) -> Complex:
        if not _is_operand(other):
            return NotImplemented
        return fn.div(other, self)

    def __pow__(self, other: Any) -> Complex:
        if not _is_operand(other):
            return NotImplemented
        return fn.pow(self, other)

    def __rpow__(self, other: Any) -> Complex:
        if not _is_operand(other):
            return NotImplemented
        return fn.pow(other, self)

    def __neg__(self) -> Complex:
        return fn.neg(self)

    def __pos__(self) -> Complex:
        return self

    def __abs__(self) -> mpf:
        return fn.mod(self)

    # Powers, roots and logarithms

    def pow(self, exponent: Any) -> Complex:
        return fn.pow(self, exponent)

    def sqrt(self) -> Complex:
        return fn.sqrt(self)

    def exp(self) -> Complex:
        return fn.exp(self)

    def ln(self) -> Complex:
        return fn.ln(self)

    def log(self, base: Any = 10) -> Complex:
        return fn.log(self, base)

    def lerp(self, other: Any, t: RealLike) -> Complex:
        return fn.lerp(self, other, t)

    # Rounding

    def round(self, step: RealLike = 1) -> Complex:
        return fn.round(self, step)

    def ceil(self, step: RealLike = 1) -> Complex:
        return fn.ceil(self, step)

    def floor(self, step: RealLike = 1) -> Complex:
        return fn.floor(self, step)

    def to_significant_digits(self, digits: int = 1) -> Complex:
        return fn.to_significant_digits(self, digits)

    # Trigonometric

    def sin(self) -> Complex:
        return fn.sin(self)

    def cos(self) -> Complex:
        return fn.cos(self)

    def tan(self) -> Complex:
        return fn.tan(self)

    def csc(self) -> Complex:
        return fn.csc(self)

    def sec(self) -> Complex:
        return fn.sec(self)

    def cot(self) -> Complex:
        return fn.cot(self)

    def asin(self) -> Complex:
        return fn.asin(self)

    def acos(self) -> Complex:
        return fn.acos(self)

    def atan(self) -> Complex:
        return fn.atan(self)

    def acsc(self) -> Complex:
        return fn.acsc(self)

    def asec(self) -> Complex:
        return fn.asec(self)

    def acot(self) -> Complex:
        return fn.acot(self)

    # Hyperbolic

    def sinh(self) -> Complex:
        return fn.sinh(self)

    def cosh(self) -> Complex:
        return fn.cosh(self)

    def tanh(self) -> Complex:
        return fn.tanh(self)

    def csch(self) -> Complex:
        return fn.csch(self)

    def sech(self) -> Complex:
        return fn.sech(self)

    def coth(self) -> Complex:
        return fn.coth(self)

    def asinh(self) -> Complex:
        return fn.asinh(self)

    def acosh(self) -> Complex:
        return fn.acosh(self)

    def atanh(self) -> Complex:
        return fn.atanh(self)

    def acsch(self) -> Complex:
        return fn.acsch(self)

    def asech(self) -> Complex:
        return fn.asech(self)

    def acoth(self) -> Complex:
        return fn.acoth(self)

    # Conversion

    def to_number(self) -> complex:
        """Lossy conversion to a Python complex, for display only."""
        return complex(engine.to_float(self.real), engine.to_float(self.imaginary))

    def __complex__(self) -> complex:
        return self.to_number()

    def to_json(self) -> dict[str, str]:
        """Both components as decimal strings that round-trip exactly."""
        return self.model_dump(mode="json")

    def to_string(self) -> str:
        """Convert to string, e.g. '3 - 4i', '2i', '-i', '5'."""
        return _format(self, engine.to_string)

    def to_tex(self) -> str:
        """Convert to LaTeX."""
        return _format(self, engine.to_tex)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_string()})"


def to_complex(value: Any) -> Complex:
    """
    Coerce a value to a Complex.

    A Complex is returned unchanged; a Python complex or mpmath.mpc is split
    into its parts; anything else becomes the real part with an exactly zero
    imaginary part.

    Raises:
        InvalidNumericLiteral: If the value cannot be parsed
    """
    if isinstance(value, Complex):
        return value
    if isinstance(value, (complex, mpc)):
        return Complex(value.real, value.imag)
    return Complex(value, engine.ZERO)


def _is_operand(value: Any) -> bool:
    """Operands accepted by the arithmetic operators (strings are not)."""
    return isinstance(value, (Complex, numbers.Number, mpf, mpc))


def _format(z: Complex, render: Callable[[mpf], str]) -> str:
    if z.imaginary == 0:
        return render(z.real)

    magnitude = abs(z.imaginary)
    coefficient = "" if magnitude == 1 else render(magnitude)

    if z.real == 0:
        sign = "-" if z.imaginary < 0 else ""
        return f"{sign}{coefficient}i"

    sign = "-" if z.imaginary < 0 else "+"
    return f"{render(z.real)} {sign} {coefficient}i"


# functions imports Complex from this module, so it is bound last
from . import functions as fn  # noqa: E402
