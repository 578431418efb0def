"""Command line that fills a sequence of keys and sorts it."""

from __future__ import annotations

import random
import sys
from collections import deque
from dataclasses import dataclass
from pathlib import Path

from dsalab.keys import Alumno, Nif
from dsalab.sort_trace import (
    HeapSortTrace,
    QuickSortTrace,
    RadixSortTrace,
    SelectionSortTrace,
    ShellSortTrace,
)
from dsalab.sorting import HeapSort, QuickSort, RadixSort, SelectionSort, ShellSort

USAGE = "Uso: programa -size <tamaño> -ord <método> -init <tipo> [-trace <y/n>]"
SHELL_INCREMENT = 0.5
TABLE_SIZE = 8
TABLE_FILE = "alumnos"
_SEPARATOR = "-" * 69

_SORTERS = {
    "selection": (SelectionSort, SelectionSortTrace),
    "quick": (QuickSort, QuickSortTrace),
    "heap": (HeapSort, HeapSortTrace),
    "shell": (ShellSort, ShellSortTrace),
    "radix": (RadixSort, RadixSortTrace),
}

_TABLE_ROWS = (
    ("SELECTION SORT", " " * 8, "selection"),
    ("QUICK SORT", " " * 12, "quick"),
    ("HEAP SORT", " " * 12, "heap"),
    ("SHELL SORT", " " * 10, "shell"),
)


@dataclass
class SortOptions:
    """Options given on the command line."""

    size: int = 0
    method: str = ""
    init_type: str = "random"
    filename: str = ""
    trace: bool = True


def parse_arguments(argv):
    """Parse ``-size``, ``-ord``, ``-init`` and ``-trace``; ignore anything else."""
    if not argv:
        raise ValueError(USAGE)
    options = SortOptions()
    tokens = deque(argv)
    while tokens:
        option = tokens.popleft()
        if option not in ("-size", "-ord", "-init", "-trace") or not tokens:
            continue
        value = tokens.popleft()
        if option == "-size":
            options.size = int(value)
        elif option == "-ord":
            options.method = value
        elif option == "-init":
            options.init_type = value
            if value == "file" and tokens:
                options.filename = tokens.popleft()
        else:
            options.trace = value == "y"
    return options


def _parse_nif(text):
    nif = Nif.parse(text)
    if not 10_000_000 <= nif.value <= 99_999_999:
        raise ValueError("NIF must be an 8-digit number")
    return nif


def fill_random(size, rng=None):
    """Return ``size`` NIFs drawn from 90000000 to 99999999."""
    rng = random.Random() if rng is None else rng
    return [Nif(rng.randrange(10_000_000) + 90_000_000) for _ in range(size)]


def fill_from_file(filename, size, parser):
    """Read ``size`` keys, one per non-blank line, from ``<filename>.txt``."""
    path = Path(f"{filename}.txt")
    with path.open(encoding="utf-8") as source:
        lines = [line for line in source if line.strip()]
    if len(lines) < size:
        raise ValueError(f"{path} holds {len(lines)} keys, {size} needed")
    return [parser(line) for line in lines[:size]]


def fill_manual(size, parser, stdin=None, stdout=None):
    """Prompt for ``size`` keys and read them one per line."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    items = []
    for index in range(size):
        stdout.write(f"Introduce el valor {index}: ")
        line = stdin.readline()
        if not line:
            raise EOFError("input ended before all values were read")
        items.append(parser(line))
    return items


def build_sorter(method, items, trace, out=None):
    """Return the sort method named ``method`` over ``items``."""
    try:
        plain, traced = _SORTERS[method]
    except KeyError:
        raise ValueError("Método de ordenación no válido") from None
    factory = traced if trace else plain
    if method == "shell":
        return factory(items, SHELL_INCREMENT, out)
    return factory(items, out)


def comparison_table(items, out=None):
    """Sort copies of ``items`` with each method and print their counts.

    Returns the rows as ``(name, comparisons, swaps)`` tuples.
    """
    out = sys.stdout if out is None else out
    out.write(f"SORT METHODS{' ' * 10}COMPARATIONS{' ' * 10}SWAPS\n")
    out.write(_SEPARATOR + "\n")
    rows = []
    for position, (name, padding, method) in enumerate(_TABLE_ROWS):
        sorter = build_sorter(method, list(items), False, out)
        sorter.sort()
        rows.append((name, sorter.comparisons, sorter.swaps))
        out.write(f"{name}{padding}{sorter.comparisons}{' ' * 21}{sorter.swaps}\n")
        if position < len(_TABLE_ROWS) - 1:
            out.write(_SEPARATOR + "\n")
    return rows


def _fill(options):
    if options.init_type == "manual":
        return fill_manual(options.size, _parse_nif)
    if options.init_type == "random":
        return fill_random(options.size)
    if options.init_type == "file":
        return fill_from_file(options.filename, options.size, _parse_nif)
    raise ValueError(f"Tipo de inicialización no válido: {options.init_type}")


def main(argv=None):
    """Fill a sequence as the options say and sort it.

    ``-ord table`` instead sorts students read from a file with every method
    and prints how many comparisons and swaps each made.
    """
    argv = sys.argv[1:] if argv is None else argv
    try:
        options = parse_arguments(argv)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    try:
        if options.method == "table":
            items = fill_from_file(
                options.filename or TABLE_FILE, options.size or TABLE_SIZE, Alumno.parse
            )
            comparison_table(items, sys.stdout)
            return 0
        items = _fill(options)
    except (OSError, ValueError, EOFError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    try:
        sorter = build_sorter(options.method, items, options.trace, sys.stdout)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    if options.trace:
        sorter.sort_trace(True)
    else:
        sorter.sort()
    return 0


if __name__ == "__main__":
    sys.exit(main())