import functools
import logging
import numbers
import typing

import numpy as np

from . import util
from .errors import (
    RationalError,
    InvalidDenominatorError,
    InvalidFloatInputError,
    UndefinedInverseError
)

module_logger = logging.getLogger(__name__)


__all__ = [
    "Rational"
]


# smallest positive normal float64; anything closer to zero is subnormal
_float_tiny = float(np.finfo(np.float64).tiny)
_float_limit = float(util.INT_MAX)


@functools.total_ordering
class Rational:
    """
    A rational number, stored as an irreducible fraction of two fixed width
    integers (see `util.int_dtype`).

    The denominator is always positive, so the sign lives in the numerator,
    and zero is always 0/1. Instances are never modified after construction;
    every operation returns a new Rational.

    Arithmetic comes in two flavours. The named methods and operators
    (``add``, ``+``, ...) raise OverflowError if an intermediate cross
    product leaves the integer range. The ``*_with_overflow`` methods never
    raise on overflow and instead return ``(result, overflow)``.
    """

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator, denominator=1):
        n = util.as_fixed(numerator, "numerator")
        d = util.as_fixed(denominator, "denominator")
        if d == 0:
            raise InvalidDenominatorError(
                "Rational cannot be initialized with a denominator of 0")
        if d != 1:
            common = util.gcd(abs(n), abs(d))
            n, d = n // common, d // common
            if d < 0:
                n, d = -n, -d
                if not (util.fits(n) and util.fits(d)):
                    raise OverflowError(
                        (f"Rational({numerator}, {denominator}) "
                         f"can't be normalized in {util.int_dtype.name}"))
        self._numerator = n
        self._denominator = d

    @classmethod
    def from_int(cls, value):
        return cls(value, 1)

    @classmethod
    def from_float(cls, value):
        """
        Approximate a float with a fraction whose denominator is a power of
        ten.

        The magnitude is scaled by ten until it is integral, until
        ``10**util.MAXIMUM_POWER`` is reached, or until another step would
        push it out of the integer range. The scaled magnitude is then
        rounded half away from zero.

        Args:
            value (float)
        Returns:
            Rational
        """
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise TypeError(
                f"Can't build a Rational from {type(value).__name__}")
        tiny = _float_tiny
        if isinstance(value, np.floating):
            tiny = float(np.finfo(type(value)).tiny)
        value = float(value)
        if (not np.isfinite(value) or
                (value != 0.0 and abs(value) < tiny)):
            raise InvalidFloatInputError(
                f"Rational can only be constructed from a normal float, "
                f"got {value}")

        magnitude = abs(value)
        scale = 1
        for _ in range(util.MAXIMUM_POWER):
            if magnitude % 1 == 0 or magnitude * 10 >= _float_limit:
                break
            magnitude *= 10
            scale *= 10

        whole = np.floor(magnitude)
        numerator = int(whole)
        if magnitude - whole >= 0.5:
            numerator += 1
        if np.signbit(value):
            numerator = -numerator
        if not util.fits(numerator):
            raise InvalidFloatInputError(
                f"{value} is too large for {util.int_dtype.name}")

        module_logger.debug((f"from_float: value={value}, "
                             f"numerator={numerator}, scale={scale}"))
        return cls(numerator, scale)

    @classmethod
    def try_create(cls, numerator, denominator=1):
        """
        Like the constructor, but return None instead of raising when the
        pair can't be made into a Rational.
        """
        try:
            return cls(numerator, denominator)
        except (RationalError, OverflowError) as err:
            module_logger.debug(f"try_create: {err}")
            return None

    @classmethod
    def try_from_float(cls, value):
        try:
            return cls.from_float(value)
        except (RationalError, OverflowError) as err:
            module_logger.debug(f"try_from_float: {err}")
            return None

    @property
    def numerator(self):
        return self._numerator

    @property
    def nu(self):
        return self._numerator

    @property
    def denominator(self):
        return self._denominator

    @property
    def de(self):
        return self._denominator

    @property
    def inverse(self) -> typing.Optional["Rational"]:
        """
        The multiplicative inverse, or None if this Rational is zero.
        """
        if self.nu == 0:
            return None
        return Rational(self.de, self.nu)

    def __float__(self):
        return self.nu / self.de

    def __int__(self):
        whole = abs(self.nu) // self.de
        return -whole if self.nu < 0 else whole

    def __bool__(self):
        return self.nu != 0

    def __str__(self):
        return f"{self.nu}/{self.de}"

    def __repr__(self):
        return f"Rational({self.nu}, {self.de})"

    def __hash__(self):
        if self.de == 1:
            return hash(self.nu)
        return hash((self.nu, self.de))

    @classmethod
    def _coerce(cls, other):
        if isinstance(other, Rational):
            return other
        if isinstance(other, bool):
            return None
        if isinstance(other, numbers.Integral) and util.fits(int(other)):
            return cls.from_int(other)
        return None

    def _operand(self, other, op_name):
        coerced = self._coerce(other)
        if coerced is None:
            raise TypeError(
                (f"{op_name}: unsupported operand {other!r} "
                 f"of type {type(other).__name__}"))
        return coerced

    @staticmethod
    def _exact_int(other):
        if (isinstance(other, numbers.Integral) and
                not isinstance(other, bool)):
            return int(other)
        return None

    def __eq__(self, other):
        whole = self._exact_int(other)
        if whole is not None:
            return self.de == 1 and self.nu == whole
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.nu == other.nu and self.de == other.de

    def __lt__(self, other):
        whole = self._exact_int(other)
        if whole is not None:
            return self.nu < self.de * whole
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.nu * other.de < self.de * other.nu

    # Checked arithmetic

    @classmethod
    def _from_wrapped(cls, n, d, overflow):
        result = cls.try_create(n, d)
        return result, overflow or result is None

    def _combine_with_overflow(self, other, combine):
        if self.de == other.de:
            n, overflow = combine(self.nu, other.nu)
            return self._from_wrapped(n, self.de, overflow)
        ad, of1 = util.multiply_with_overflow(self.nu, other.de)
        bc, of2 = util.multiply_with_overflow(self.de, other.nu)
        n, of3 = combine(ad, bc)
        bd, of4 = util.multiply_with_overflow(self.de, other.de)
        return self._from_wrapped(n, bd, of1 or of2 or of3 or of4)

    def add_with_overflow(self, other):
        """
        Add `other`, returning the result and a bool that is True iff the
        operation overflowed.

        On overflow the result is built from the wrapped intermediates, or
        is None if those don't form a valid Rational.

        Returns:
            tuple: (Rational or None, bool)
        """
        other = self._operand(other, "add_with_overflow")
        return self._combine_with_overflow(other, util.add_with_overflow)

    def subtract_with_overflow(self, other):
        other = self._operand(other, "subtract_with_overflow")
        return self._combine_with_overflow(
            other, util.subtract_with_overflow)

    def multiply_with_overflow(self, other):
        other = self._operand(other, "multiply_with_overflow")
        ac, of1 = util.multiply_with_overflow(self.nu, other.nu)
        bd, of2 = util.multiply_with_overflow(self.de, other.de)
        return self._from_wrapped(ac, bd, of1 or of2)

    def divide_with_overflow(self, other):
        """
        Divide by `other`, returning the result and an overflow flag.

        Only overflow is reported through the flag: dividing by zero still
        raises UndefinedInverseError, so check `other` first.
        """
        other = self._operand(other, "divide_with_overflow")
        if other.nu == 0:
            raise UndefinedInverseError(
                f"divide_with_overflow: {self} / {other} has no inverse")
        # multiply by other's inverse, de/nu
        ac, of1 = util.multiply_with_overflow(self.nu, other.de)
        bd, of2 = util.multiply_with_overflow(self.de, other.nu)
        return self._from_wrapped(ac, bd, of1 or of2)

    # Unchecked arithmetic

    def _unchecked(self, other, symbol, result, overflow):
        if overflow:
            raise OverflowError(
                f"{self} {symbol} {other} overflows {util.int_dtype.name}")
        return result

    def add(self, other):
        return self._unchecked(
            other, "+", *self.add_with_overflow(other))

    def subtract(self, other):
        return self._unchecked(
            other, "-", *self.subtract_with_overflow(other))

    def multiply(self, other):
        return self._unchecked(
            other, "*", *self.multiply_with_overflow(other))

    def divide(self, other):
        other = self._operand(other, "divide")
        inverse = other.inverse
        if inverse is None:
            raise UndefinedInverseError(f"{self} / {other} has no inverse")
        return self.multiply(inverse)

    def negate(self):
        return Rational(-self.nu, self.de)

    def absolute(self):
        return Rational(abs(self.nu), self.de)

    def __add__(self, other):
        if self._coerce(other) is None:
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return coerced.add(self)

    def __sub__(self, other):
        if self._coerce(other) is None:
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return coerced.subtract(self)

    def __mul__(self, other):
        if self._coerce(other) is None:
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return coerced.multiply(self)

    def __truediv__(self, other):
        if self._coerce(other) is None:
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other):
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return coerced.divide(self)

    def __neg__(self):
        return self.negate()

    def __pos__(self):
        return self

    def __abs__(self):
        return self.absolute()
