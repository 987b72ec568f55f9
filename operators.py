"""The operator table: symbol -> precedence, associativity and function.

>>> precedence("*") > precedence("+") > precedence("(")
True
>>> associativity("^"), associativity("-")
('r', 'l')
>>> apply("/", -7, 2)
-3
"""
import math
import operator
from typing import Callable, Literal, NamedTuple, Optional

from errors import InvalidOperator, NegativeExponent, ResultTooLarge, UnknownOperator

# Largest power we compute, in decimal digits. Matches the default limit
# on int -> str conversion, so any power we return can still be printed.
MAX_POWER_DIGITS = 4300


def truncdiv(x, y):
    """Integer division rounding toward zero (unlike python's `//`).

    >>> truncdiv(7, 2), truncdiv(-7, 2), truncdiv(7, -2), truncdiv(-7, -2)
    (3, -3, -3, 3)
    """
    q = abs(x) // abs(y)
    return q if (x < 0) == (y < 0) else -q


def ipow(x, y):
    """Exact integer power.

    >>> ipow(-2, 3), ipow(0, 0)
    (-8, 1)
    >>> ipow(10, 5000)
    Traceback (most recent call last):
      ...
    errors.ResultTooLarge: 10 ^ 5000 has more than 4300 digits
    """
    if y < 0:
        raise NegativeExponent(f"{x} ^ {y} has no integer value")
    if abs(x) > 1 and y * math.log10(abs(x)) >= MAX_POWER_DIGITS:
        raise ResultTooLarge(f"{x} ^ {y} has more than {MAX_POWER_DIGITS} digits")
    return x**y


class Op(NamedTuple):
    symbol: str
    prec: int
    assoc: Literal["l", "r", "n"]  # left-associative, right-associative, grouping
    fun: Optional[Callable[[int, int], int]]

    def __call__(self, lhs, rhs):
        if self.fun is None:
            raise InvalidOperator(f"{self.symbol} is not a binary operator.")
        return self.fun(lhs, rhs)

    def __repr__(self):
        return f"Op({self.symbol!r})"

    @property
    def is_paren(self):
        return self.assoc == "n"

    def reduces_before(self, other):
        """Whether `self`, pending on the stack, must be reduced before pushing `other`."""
        if self.prec != other.prec:
            return self.prec > other.prec
        # ties only reduce for left-associative operators
        return other.assoc == "l"


OPS = {
    "(": Op("(", 0, "n", None),
    ")": Op(")", 0, "n", None),
    "+": Op("+", 1, "l", operator.add),
    "-": Op("-", 1, "l", operator.sub),
    "*": Op("*", 2, "l", operator.mul),
    "/": Op("/", 2, "l", truncdiv),
    "^": Op("^", 3, "r", ipow),
}


def is_operator(symbol):
    return symbol in OPS


def lookup(symbol):
    try:
        return OPS[symbol]
    except KeyError:
        raise UnknownOperator(f"{symbol} is not a valid operator.") from None


def precedence(symbol):
    return lookup(symbol).prec


def associativity(symbol):
    op = lookup(symbol)
    if op.is_paren:
        raise InvalidOperator(f"{symbol} has no associativity.")
    return op.assoc


def apply(symbol, lhs, rhs):
    return lookup(symbol)(lhs, rhs)
