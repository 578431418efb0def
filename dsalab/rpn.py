"""Evaluation of statements in reverse Polish notation over named numbers."""

from __future__ import annotations

_OPERATORS = frozenset("+-*%/^")

_OPERATIONS = {
    "+": lambda first, second: first.add(second),
    "-": lambda first, second: first.subtract(second),
    "*": lambda first, second: first.multiply(second),
    "/": lambda first, second: first.divide(second),
    "%": lambda first, second: first.module(second),
    "^": lambda first, second: first.power(second),
}


class RPNError(RuntimeError):
    """Raised when a statement cannot be evaluated."""


def split(line):
    """Return the whitespace-separated tokens of ``line``."""
    return line.split()


class RPN:
    """A statement whose operands are names looked up in ``numbers``."""

    def __init__(self, statement, numbers):
        self.statement = statement
        self.numbers = numbers

    def is_operator(self, symbol):
        """Return whether ``symbol`` is one of ``+ - * % / ^``."""
        return symbol in _OPERATORS

    def operate(self):
        """Evaluate the statement and return the resulting number."""
        stack = []
        for token in split(self.statement):
            if self.is_operator(token[0]):
                if len(stack) < 2:
                    raise RPNError("Missing operands")
                second = stack.pop()
                first = stack.pop()
                stack.append(_OPERATIONS[token[0]](first, second))
            elif token in self.numbers:
                stack.append(self.numbers[token])
            else:
                raise RPNError(f"Token not recognized: {token}")
        if len(stack) != 1:
            raise RPNError("Unexpected number of operands")
        return stack[0]