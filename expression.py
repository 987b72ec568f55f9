"""Public entry point: parse an infix integer expression once, then evaluate
or re-render it.

>>> e = Expression("3 - 7 * ( 4 + ( 25 / (3 + 2)) - 2)")
>>> e.evaluate()
-46
>>> e.to_infix()
'( 3 - ( 7 * ( ( 4 + ( 25 / ( 3 + 2 ) ) ) - 2 ) ) )'
>>> e.to_postfix()
'3 7 4 25 3 2 + / + 2 - * -'
>>> e.to_prefix()
'- 3 * 7 - + 4 / 25 + 3 2 2'
>>> e.to_lisp()
'( - 3 ( * 7 ( - ( + 4 ( / 25 ( + 3 2 ) ) ) 2 ) ) )'
>>> Expression("(1 + 2")
Traceback (most recent call last):
  ...
errors.InvalidExpression: Invalid expression.
Reason: No matching close parenthesis found.
"""
import logging

from errors import ExpressionError, InvalidExpression
from parser import to_ast

logger = logging.getLogger(__name__)


class Expression:
    __slots__ = ("_text", "_tree")

    def __init__(self, text):
        try:
            tree = to_ast(text)
        except ExpressionError as e:
            logger.debug("rejected %r: %s", text, e)
            raise InvalidExpression(str(e)) from e
        self._text = text
        self._tree = tree

    @property
    def text(self):
        return self._text

    @property
    def tree(self):
        return self._tree

    def __repr__(self):
        return f"Expression({self._text!r})"

    def evaluate(self):
        return self._tree.evaluate()

    def to_postfix(self):
        return self._tree.postfix()

    def to_prefix(self):
        return self._tree.prefix()

    def to_infix(self):
        return self._tree.infix()

    def to_lisp(self):
        return self._tree.lisp()
