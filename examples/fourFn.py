# fourFn.py
#
# Demonstration of the scanner, implementing a simple 4-function expression
# evaluator with parentheses, unary minus and exponentiation.
#
import operator

from mo_scanning import ParseError, RegexPattern, Scanner

"""
expop   :: '^'
multop  :: '*' | '/'
addop   :: '+' | '-'
atom    :: real | '(' expr ')' | '-' atom
factor  :: atom [ expop factor ]*
term    :: factor [ multop factor ]*
expr    :: term [ addop term ]*
"""

fnumber = RegexPattern(r"^\d+(?:\.\d*)?(?:[eE][+-]?\d+)?")

opn = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
    "^": operator.pow,
}


def atom(scanner):
    scanner.skip_whitespace()
    if scanner.try_match_literal("-"):
        return -atom(scanner)
    start = scanner.capture_position()
    if scanner.try_match_literal("("):
        value = expr(scanner)
        scanner.skip_whitespace()
        if not scanner.try_match_literal(")"):
            opened = scanner.error_at(start, "group opened here")
            raise scanner.error_here("expected tag `)`").push(
                "to close the group opened at [" + str(opened.line) + ", " + str(opened.column) + "]"
            )
        return value
    number = scanner.try_match_pattern(fnumber)
    if number is None:
        raise scanner.error_here("expected a number or `(`")
    return float(number)


def factor(scanner):
    value = atom(scanner)
    scanner.skip_whitespace()
    if scanner.try_match_literal("^"):
        # RIGHT ASSOCIATIVE
        return opn["^"](value, factor(scanner))
    return value


def _binary(scanner, operators, operand):
    value = operand(scanner)
    while True:
        scanner.skip_whitespace()
        for op in operators:
            if scanner.try_match_literal(op):
                value = opn[op](value, operand(scanner))
                break
        else:
            return value


def term(scanner):
    return _binary(scanner, "*/", factor)


def expr(scanner):
    return _binary(scanner, "+-", term)


def evaluate(text):
    scanner = Scanner(text)
    value = expr(scanner)
    scanner.skip_whitespace()
    if not scanner.is_at_end():
        raise scanner.error_here("expected end of text")
    return value


if __name__ == "__main__":
    for test in ["9", "-9", "9 + 3 * 2", "(9 + 3) * 2", "2^3^2", "1 + ", "(1 + 2"]:
        try:
            print(test, "=", evaluate(test))
        except ParseError as cause:
            print(cause)
