__version__ = "0.1.0"

from . import util
from .errors import (
    RationalError,
    InvalidDenominatorError,
    InvalidFloatInputError,
    UndefinedInverseError
)
from .rational import Rational

__all__ = [
    "util",
    "Rational",
    "RationalError",
    "InvalidDenominatorError",
    "InvalidFloatInputError",
    "UndefinedInverseError"
]
