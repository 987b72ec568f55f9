"""Operator-precedence (shunting-yard) parsing straight into a tree.

>>> to_ast("1 - 2 - 3").infix()
'( ( 1 - 2 ) - 3 )'
>>> to_ast("2 ^ 2 ^ 3").infix()
'( 2 ^ ( 2 ^ 3 ) )'
"""
import logging

from errors import (
    MalformedExpression,
    MismatchedOperandCount,
    MissingOperand,
    MissingOperator,
    UnbalancedParentheses,
)
from lexer import lex
from nodes import BinOp, Operand
from operators import Op

logger = logging.getLogger(__name__)


def reduce(ops, exprs):
    """Replace the top operator and the top two operands with one subtree."""
    if not ops:
        raise MissingOperator("Missing operator to reduce.")
    if ops[-1].symbol == "(":
        raise UnbalancedParentheses("No matching close parenthesis found.")
    if len(exprs) < 2:
        raise MissingOperand(
            "Missing right hand side operand."
            if not exprs
            else "Missing left hand side operand."
        )
    op = ops.pop()
    rhs = exprs.pop()
    lhs = exprs.pop()
    exprs.append(BinOp(op, lhs, rhs))
    logger.debug("reduced %s", exprs[-1])


def parse_expr(tokens):
    exprs = []
    ops = []
    for tok in tokens:
        if isinstance(tok, Operand):
            exprs.append(tok)
        elif isinstance(tok, Op) and tok.symbol == "(":
            ops.append(tok)
        elif isinstance(tok, Op) and tok.symbol == ")":
            while ops and ops[-1].symbol != "(":
                reduce(ops, exprs)
            if not ops:
                raise UnbalancedParentheses("No matching open parenthesis found.")
            ops.pop()
        elif isinstance(tok, Op):
            while ops and not ops[-1].is_paren and ops[-1].reduces_before(tok):
                reduce(ops, exprs)
            ops.append(tok)
        else:
            raise MalformedExpression(f"Unknown token: {tok!r}")
    while ops:
        reduce(ops, exprs)
    if len(exprs) != 1:
        raise MismatchedOperandCount(
            f"Mismatch in number of operands and operators ({len(exprs)} operands left)."
        )
    (ans,) = exprs
    return ans


def to_ast(x):
    return parse_expr(lex(x))
