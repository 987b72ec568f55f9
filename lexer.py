"""Turn expression text into a lazy stream of tokens.

Literals come out as `Operand` leaves, operators and parentheses as their
`Op` entry from the operator table.

>>> list(lex("12*(3 +4)"))
[Operand(value=12), Op('*'), Op('('), Operand(value=3), Op('+'), Operand(value=4), Op(')')]
"""
from errors import EndOfInput, LiteralTooLong, UnknownToken
from nodes import Operand
from operators import OPS, is_operator

DIGITS = "0123456789"
# Longest literal accepted; longer ones could not be rendered back to text.
MAX_LITERAL_DIGITS = 4300


class Cursor:
    def __init__(self, text):
        # the whole expression is already in memory,
        # so a position into it is all the state we need
        self._text = text
        self._idx = 0

    @property
    def pos(self):
        return self._idx

    @property
    def exhausted(self):
        return self._idx >= len(self._text)

    def peek(self):
        if self.exhausted:
            raise EndOfInput("No more characters in input.")
        return self._text[self._idx]

    def advance(self):
        c = self.peek()
        self._idx += 1
        return c

    def skip_whitespace(self):
        while not self.exhausted and self.peek().isspace():
            self._idx += 1


def lex(src):
    """Yield the tokens of `src` (a string or a `Cursor`) one at a time.

    >>> tokens = lex("1 $ 2")
    >>> next(tokens)
    Operand(value=1)
    >>> next(tokens)
    Traceback (most recent call last):
      ...
    errors.UnknownToken: Unknown token: '$' at position 2
    """
    cursor = src if isinstance(src, Cursor) else Cursor(src)
    while True:
        cursor.skip_whitespace()
        if cursor.exhausted:
            return
        c = cursor.peek()
        if c in DIGITS:
            start = cursor.pos
            value = 0
            while not cursor.exhausted and cursor.peek() in DIGITS:
                if cursor.pos - start >= MAX_LITERAL_DIGITS:
                    raise LiteralTooLong(
                        f"Literal at position {start} is longer than {MAX_LITERAL_DIGITS} digits"
                    )
                value = value * 10 + DIGITS.index(cursor.advance())
            yield Operand(value)
        elif is_operator(c):
            yield OPS[cursor.advance()]
        else:
            raise UnknownToken(f"Unknown token: {c!r} at position {cursor.pos}")
