"""Command line evaluating a file of number definitions and RPN statements."""

from __future__ import annotations

import sys
from pathlib import Path

from dsalab.bigint import BigIntBadDigit, create_number
from dsalab.rpn import RPN, RPNError, split


def process_line(line, board):
    """Process one line, updating ``board``; return its output or None if blank.

    A line is either ``NAME = BASE, DIGITS`` or ``NAME ? RPN-STATEMENT``.
    """
    tokens = split(line)
    if not tokens:
        return None
    if len(tokens) < 2:
        raise ValueError(f"malformed line: {line!r}")
    name, marker = tokens[0], tokens[1][0]
    if marker == "=":
        if len(tokens) < 4:
            raise ValueError(f"malformed definition: {line!r}")
        base = int(tokens[2].removesuffix(","))
        number = create_number(base, tokens[3])
    elif marker == "?":
        number = RPN(" ".join(tokens[2:]), board).operate()
    else:
        raise BigIntBadDigit(f"unknown line marker {tokens[1]!r}")
    board[name] = number
    return f"{name} = {number.base}, {number}\n"


def process_lines(lines):
    """Process every line with a shared board; return the outputs in order."""
    board = {}
    outputs = (process_line(line, board) for line in lines)
    return [output for output in outputs if output is not None]


def main(argv=None):
    """Evaluate the file named first in ``argv`` and write ``<file>.out``."""
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print("Faltan argumentos", file=sys.stderr)
        return 1
    path = Path(argv[0])
    try:
        with path.open(encoding="utf-8") as source:
            outputs = process_lines(source)
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except (RPNError, ValueError, ZeroDivisionError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    for output in outputs:
        sys.stdout.write(output)
    Path(f"{path}.out").write_text("".join(outputs), encoding="utf-8")
    return 0


if __name__ == "__main__":
    sys.exit(main())