import argparse
import logging
import sys

from .rational import Rational

module_logger = logging.getLogger(__name__)


def create_parser():

    parser = argparse.ArgumentParser(
        description="walk through what fixrat's Rational can do")

    parser.add_argument("-v", "--verbose",
                        dest="verbose", action="store_true")

    parser.add_argument("--lhs",
                        dest="lhs", nargs=2, type=int, default=[57, 12],
                        metavar=("NUMERATOR", "DENOMINATOR"))

    parser.add_argument("--rhs",
                        dest="rhs", nargs=2, type=int, default=[7, -19],
                        metavar=("NUMERATOR", "DENOMINATOR"))

    return parser


def run_demo(lhs: Rational, rhs: Rational, out=None) -> None:
    if out is None:
        out = sys.stdout

    def emit(line=""):
        out.write(f"{line}\n")

    emit("Welcome to fixrat's demo!\n")

    r1 = Rational.from_int(15)
    r2 = Rational(152, 71)
    r3 = Rational.from_float(1.159282)
    emit("Rationals can be constructed from integers, floats, "
         "or as fractions:")
    emit(f"r1 is {r1}, r2 is {r2}, r3 is {r3}")

    r4 = Rational(1, 2)
    r5 = Rational(1, 2)
    r6 = Rational(2, 3)
    r7 = Rational(7, 9)
    emit("\nRationals can be compared:")
    emit(f"{r4} == {r5}? {r4 == r5}")
    emit(f"{r5} < {r6} < {r7}? {r5 < r6 < r7}")

    emit("\nDo math with rationals:")
    emit(f"{lhs} + {rhs} = {lhs + rhs}")
    emit(f"{lhs} - {rhs} = {lhs - rhs}")
    emit(f"{lhs} * {rhs} = {lhs * rhs}")
    if rhs.inverse is None:
        emit(f"{lhs} / {rhs} is undefined")
    else:
        emit(f"{lhs} / {rhs} = {lhs / rhs}")

    emit("\nDo more math with rationals:")
    r10 = Rational(5, 992)
    emit(f"-({r10}) = {-r10}")
    emit(f"({r10})^-1 = {r10.inverse}")

    emit("\nTurn rationals back into other numeric types:")
    r11 = Rational(6, 129)
    emit(f"{r11} has a numerator of {r11.numerator}, "
         f"denominator of {r11.denominator}")
    emit(f"{r11}'s floating-point value is {float(r11)}")


def main(argv=None) -> int:
    parsed = create_parser().parse_args(argv)
    level = logging.ERROR
    if parsed.verbose:
        level = logging.DEBUG
    logging.basicConfig(level=level)

    lhs = Rational.try_create(*parsed.lhs)
    rhs = Rational.try_create(*parsed.rhs)
    for name, pair, value in (("lhs", parsed.lhs, lhs),
                              ("rhs", parsed.rhs, rhs)):
        if value is None:
            module_logger.error(
                f"main: {name}={pair[0]}/{pair[1]} is not a valid rational")
            return 1
    module_logger.debug(f"main: lhs={lhs}, rhs={rhs}")

    try:
        run_demo(lhs, rhs)
    except OverflowError as err:
        module_logger.error(f"main: {err}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
