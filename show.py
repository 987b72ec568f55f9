"""Print an expression's value and its renderings.

Usage:
  python show.py "1 + 2 * 3" "(1 + 2) * 3"
  python show.py --expect 7 "1 + 2 * 3"

With no expression the demo expression is shown. Set DEBUG (or pass
--debug) to log every reduction the parser makes.
"""
import argparse
import logging
import os
import sys

from expression import Expression

DEBUG = bool(os.getenv("DEBUG", False))
DEMO = "3 - 7 * ( 4 + ( 25 / (3 + 2)) - 2)"
DEMO_ANSWER = -46

logger = logging.getLogger(__name__)


def show(e, expected=None):
    """Return the report block for `e`, an `Expression` or its source text."""
    if not isinstance(e, Expression):
        e = Expression(e)
    answer = f"Answer: {e.evaluate()}"
    if expected is not None:
        answer += f" (Expected {expected})"
    return "\n".join(
        [
            f"Expression: {e.text}",
            answer,
            f"Infix   : {e.to_infix()}",
            f"Postfix : {e.to_postfix()}",
            f"Prefix  : {e.to_prefix()}",
            f"Lisp    : {e.to_lisp()}",
        ]
    )


def main(argv=None):
    ap = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    ap.add_argument("expressions", nargs="*", metavar="EXPR")
    ap.add_argument("--expect", type=int, help="expected value of a single EXPR")
    ap.add_argument("--debug", action="store_true", default=DEBUG)
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    exprs = args.expressions
    expect = args.expect
    if not exprs:
        exprs = [DEMO]
        expect = DEMO_ANSWER if expect is None else expect
    if expect is not None and len(exprs) != 1:
        ap.error("--expect needs exactly one expression")

    status = 0
    for text in exprs:
        # InvalidExpression, and a value too long to print, are ValueErrors
        try:
            e = Expression(text)
            value = e.evaluate()
            report = show(e, expect)
        except (ValueError, ArithmeticError) as err:
            print(f"{text!r}: {err}", file=sys.stderr)
            status = 1
            continue
        print(report)
        if expect is not None and value != expect:
            logger.warning("%r evaluated to something other than %d", text, expect)
            status = 1
    return status


if __name__ == "__main__":
    sys.exit(main())
