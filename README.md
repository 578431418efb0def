# dsalab

Classic data-structure and algorithm exercises. You can use them as a library
or run them from the command line. Console messages are in Spanish.

- **Key types** (`dsalab.keys`): `Nif` is a number from 0 to 99999999.
  `Alumno` is a student with `nombre`, `apellidos` and `clave`, and its integer
  value is the sum of the character codes of `clave`. `Persona` is built from
  a name, surnames and an eight-digit NIF followed by its letter.
- **Sequences** (`dsalab.sequence`): `DynamicSequence` is unbounded.
  `StaticSequence` holds at most `block_size` distinct keys.
- **Dispersion functions** (`dsalab.dispersion`): `ModuloDispersion`,
  `SumDispersion` (digit sum) and `PseudoRandomDispersion` (a generator seeded
  with the key).
- **Exploration functions** (`dsalab.exploration`): `LinearExploration`,
  `QuadraticExploration`, `DoubleDispersionExploration` and
  `RedispersionExploration`.
- **Hash table** (`dsalab.hashtable.HashTable`): each address holds a
  `DynamicSequence` (open) or, when `block_size` is given, a `StaticSequence`
  (closed).
- **Sorting methods** (`dsalab.sorting`): `SelectionSort`, `QuickSort`,
  `HeapSort`, `ShellSort` and `RadixSort` sort a list in place and count
  `comparisons` and `swaps`. Traced variants in `dsalab.sort_trace`
  (`SelectionSortTrace`, `QuickSortTrace`, …) print every step.
- **Big integers** (`dsalab.bigint.BigInt`): signed integers held as digits in
  a base from 2 to 16. `create_number` and `to_base` accept bases 2, 8, 10 and
  16. Division truncates towards zero. Errors are raised as
  `BigIntBadDigit`, `BigIntBaseNotImplemented` and `BigIntDivisionByZero`.
- **RPN evaluator** (`dsalab.rpn.RPN`): evaluates reverse-Polish statements
  over named numbers. Errors are raised as `RPNError`.

## What the hash table does not do

The hash table stores an exploration function but never probes with it. Every
key goes to the bucket at its dispersion address. In a closed table, an insert
into a full bucket fails. It is not moved to another address.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command-line tools

### `dsalab-hash`

Builds a hash table of `Alumno` records and opens an interactive menu:

1. insert
2. search
3. show the table
4. quit

Enter each element on one line as `nombre apellidos clave`.

```
dsalab-hash -ts 10 -fd 0 -hash open
dsalab-hash -ts 10 -fd 2 -hash close -bs 3 -fe 1
```

| Option  | Meaning                                                                          |
|---------|----------------------------------------------------------------------------------|
| `-ts`   | table size (required)                                                            |
| `-fd`   | dispersion function: `0` modulo, `1` pseudo-random, `2` digit sum                |
| `-hash` | `open` or `close`                                                                |
| `-bs`   | block size (closed table)                                                        |
| `-fe`   | exploration (closed table): `0` linear, `1` quadratic, `2` double dispersion, `3` redispersion |

These are reported as errors and the command exits with status 1:

- an unknown option;
- an option without its value;
- a non-numeric size;
- an invalid `-fd` or `-fe` code.

If `-hash` is neither `open` nor `close`, the command exits after printing the
parameters and does not open the menu.

### `dsalab-sort`

Fills a sequence of NIF numbers and sorts it.

```
dsalab-sort -size 8 -ord quick -init random -trace y
dsalab-sort -size 5 -ord heap -init file datos -trace n
dsalab-sort -size 4 -ord shell -init manual
```

- `-ord` chooses the method: `selection`, `quick`, `heap`, `shell` or `radix`.
  Shell sort uses an increment of 0.5.
- `-init` chooses how the sequence is filled:
  - `random` draws NIFs from 90000000 to 99999999 (the default);
  - `manual` prompts for each value;
  - `file <name>` reads one value per line from `<name>.txt`.

  Manual and file values must be eight-digit numbers.
- `-trace` chooses the output. `y` runs the traced method; this is the default.
  Any other value runs the plain method.

`-ord table` works differently. It reads students (`nombre apellidos clave`,
one per line) from `alumnos.txt`, or from `<name>.txt` with `-init file
<name>`. It reads 8 of them unless `-size` says otherwise. It then sorts them
with selection, quick, heap and shell sort and prints a table of the
comparisons and swaps each method made.

### `dsalab-rpn`

Reads a file of definitions and reverse-Polish statements. It prints each
result and also writes the results to `<file>.out`.

```
dsalab-rpn operaciones.txt
```

Each line either defines a number in a base or evaluates a statement over
names already defined:

```
N1 = 10, 125
N2 = 16, 1F
E1 ? N1 N2 +
```

Supported operators are `+ - * / % ^`. A result is written in the base of the
left operand. Each output line has the form `NAME = BASE, VALUE`.

## Library use

```python
from dsalab.bigint import BigInt, create_number
from dsalab.rpn import RPN

a = create_number(10, "125")
b = create_number(16, "1F")
result = RPN("a b +", {"a": a, "b": b}).operate()
print(result)                              # 156

print(BigInt("1010", 2).to_base(10))       # 10
```

```python
from dsalab.dispersion import ModuloDispersion
from dsalab.exploration import LinearExploration
from dsalab.hashtable import HashTable
from dsalab.keys import Nif

table = HashTable(10, ModuloDispersion(10), LinearExploration(), 3)
table.insert(Nif(12345678))
print(table.search(Nif(12345678)))         # True
print(table)
```

```python
from dsalab.sorting import QuickSort

items = [5, 3, 8, 1]
sorter = QuickSort(items)
sorter.sort()                              # prints the sequence before and after
print(items, sorter.comparisons, sorter.swaps)
```