import logging
import numbers
import typing

import numpy as np
import numba

module_logger = logging.getLogger(__name__)


__all__ = [
    "int_dtype",
    "INT_MIN",
    "INT_MAX",
    "INT_BITS",
    "MAXIMUM_POWER",
    "gcd",
    "fits",
    "wrap",
    "as_fixed",
    "add_with_overflow",
    "subtract_with_overflow",
    "multiply_with_overflow"
]


int_dtype = np.dtype(np.int64)

_int_info = np.iinfo(int_dtype)

INT_MIN = int(_int_info.min)
INT_MAX = int(_int_info.max)
INT_BITS = int(_int_info.bits)

# 10**MAXIMUM_POWER is the largest denominator produced from a float
MAXIMUM_POWER = int(np.log10(INT_MAX))

checked_type = typing.Tuple[int, bool]


@numba.njit("uint64(uint64, uint64)", cache=True)
def _gcd(u, v):
    a = u
    b = v
    while b != 0:
        t = b
        b = a % b
        a = t
    return a


def gcd(u: int, v: int) -> int:
    """
    Greatest common divisor of two non-negative integers, using the
    iterative Euclidean algorithm.

    Operands may be as large as ``abs(INT_MIN)``, which is why the compiled
    kernel works on unsigned 64 bit integers.
    """
    if u < 0 or v < 0:
        raise ValueError(f"gcd: operands must be non-negative, got {u}, {v}")
    return int(_gcd(np.uint64(u), np.uint64(v)))


def fits(value: int) -> bool:
    return INT_MIN <= value <= INT_MAX


def wrap(value: int) -> int:
    """
    Two's complement wraparound of an exact integer into the fixed width.
    """
    return ((value - INT_MIN) % (1 << INT_BITS)) + INT_MIN


def as_fixed(value: typing.Any, name: str = "value") -> int:
    """
    Return `value` as a plain int, making sure it is an integral number that
    fits in `int_dtype`.

    Args:
        value (int/np.integer)
        name (str): used in error messages
    Returns:
        int
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(
            f"{name} must be an integer, not {type(value).__name__}")
    value = int(value)
    if not fits(value):
        raise OverflowError(
            f"{name}={value} does not fit in {int_dtype.name}")
    return value


def _checked(exact: int) -> checked_type:
    if fits(exact):
        return exact, False
    wrapped = wrap(exact)
    module_logger.debug(f"_checked: {exact} overflows {int_dtype.name}, "
                        f"wrapped to {wrapped}")
    return wrapped, True


def add_with_overflow(a: int, b: int) -> checked_type:
    return _checked(a + b)


def subtract_with_overflow(a: int, b: int) -> checked_type:
    return _checked(a - b)


def multiply_with_overflow(a: int, b: int) -> checked_type:
    return _checked(a * b)
