"""Expression trees.

A tree is either an `Operand` leaf or a `BinOp` owning an operator and its
left and right subtrees. Both are immutable tuples, so two trees compare
equal iff they have the same shape, operators and values.

>>> from operators import OPS
>>> tree = BinOp(OPS["-"], Operand(1), BinOp(OPS["*"], Operand(2), Operand(3)))
>>> tree.evaluate()
-5
>>> tree.postfix()
'1 2 3 * -'
>>> tree.prefix()
'- 1 * 2 3'
>>> tree.infix()
'( 1 - ( 2 * 3 ) )'
>>> tree.lisp()
'( - 1 ( * 2 3 ) )'
"""
from typing import NamedTuple, Union

from errors import MissingOperand
from operators import Op


class Operand(NamedTuple):
    value: int

    def evaluate(self):
        return self.value

    def __str__(self):
        return str(self.value)

    # A literal renders the same way in every notation.
    postfix = prefix = infix = lisp = __str__


class BinOp(NamedTuple):
    op: Op
    lhs: "Node"
    rhs: "Node"

    @property
    def symbol(self):
        return self.op.symbol

    def children(self):
        if self.lhs is None:
            raise MissingOperand("Missing left operand.")
        if self.rhs is None:
            raise MissingOperand("Missing right operand.")
        return self.lhs, self.rhs

    def evaluate(self):
        lhs, rhs = self.children()
        x = lhs.evaluate()
        y = rhs.evaluate()
        return self.op(x, y)

    def postfix(self):
        lhs, rhs = self.children()
        return f"{lhs.postfix()} {rhs.postfix()} {self.symbol}"

    def prefix(self):
        lhs, rhs = self.children()
        return f"{self.symbol} {lhs.prefix()} {rhs.prefix()}"

    def infix(self):
        lhs, rhs = self.children()
        return f"( {lhs.infix()} {self.symbol} {rhs.infix()} )"

    def lisp(self):
        lhs, rhs = self.children()
        return f"( {self.symbol} {lhs.lisp()} {rhs.lisp()} )"

    def __str__(self):
        return self.infix()


Node = Union[Operand, BinOp]
