__all__ = [
    "RationalError",
    "InvalidDenominatorError",
    "InvalidFloatInputError",
    "UndefinedInverseError"
]


class RationalError(Exception):
    pass


class InvalidDenominatorError(RationalError, ZeroDivisionError):
    pass


class InvalidFloatInputError(RationalError, ValueError):
    pass


class UndefinedInverseError(RationalError, ZeroDivisionError):
    pass
