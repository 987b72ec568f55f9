"""Errors raised while lexing, parsing and evaluating expressions.

Everything raised during parsing derives from `ExpressionError`; the
`Expression` constructor turns any of them into a single
`InvalidExpression`.
"""


class ExpressionError(ValueError):
    """Generic malformed-expression error"""


class UnknownOperator(ExpressionError):
    """Symbol is not in the operator table"""


class InvalidOperator(ExpressionError):
    """Operation not supported by the symbol (e.g. applying a parenthesis)"""


class UnknownToken(ExpressionError):
    """Unexpected character in input"""


class LiteralTooLong(ExpressionError):
    """Integer literal with more digits than can be printed back"""


class EndOfInput(ExpressionError):
    """Read past the end of the input"""


class UnbalancedParentheses(ExpressionError):
    pass


class MissingOperand(ExpressionError):
    pass


class MissingOperator(ExpressionError):
    pass


class MismatchedOperandCount(ExpressionError):
    pass


class MalformedExpression(ExpressionError):
    pass


class NegativeExponent(ArithmeticError):
    """Integer power with a negative exponent has no integer result"""


class ResultTooLarge(ArithmeticError):
    """Power too large to compute (see `operators.MAX_POWER_DIGITS`)"""


class InvalidExpression(ValueError):
    def __init__(self, reason):
        super().__init__(f"Invalid expression.\nReason: {reason}")
        self.reason = reason
