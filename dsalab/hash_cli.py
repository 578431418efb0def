"""Command line for building a hash table and editing it through a menu."""

from __future__ import annotations

import sys
from dataclasses import dataclass

from dsalab.dispersion import ModuloDispersion, PseudoRandomDispersion, SumDispersion
from dsalab.exploration import (
    DoubleDispersionExploration,
    LinearExploration,
    QuadraticExploration,
    RedispersionExploration,
)
from dsalab.hashtable import HashTable
from dsalab.keys import Alumno

_MENU = (
    "\n╭─────────────────────────────────────────────╮\n"
    "│                   PR04                      │\n"
    "├─────────────────────────────────────────────┤\n"
    "│   [1] ➤ Insertar elemento                   │\n"
    "│   [2] ➤ Buscar elemento                     │\n"
    "│   [3] ➤ Mostrar tabla                       │\n"
    "│   [4] ➤ Salir                               │\n"
    "╰─────────────────────────────────────────────╯\n"
    "Seleccione una opción (1-4): "
)

_DISPERSIONS = {
    "0": ("Modulo", ModuloDispersion),
    "1": ("PseudoRandom", PseudoRandomDispersion),
    "2": ("Suma", SumDispersion),
}

_EXPLORATIONS = {
    "0": "Lineal",
    "1": "Cuadratica",
    "2": "Doble dispersión",
    "3": "Redispersion",
}


@dataclass
class HashParameters:
    """Options given on the command line."""

    table_size: int
    dispersion: str = ""
    hash_type: str = ""
    block_size: int = 0
    exploration: str = ""


def _to_int(option, text):
    try:
        return int(text)
    except ValueError as exc:
        raise ValueError(f"Valor no numérico para la opción {option}: {text}") from exc


def parse_arguments(argv):
    """Parse ``-ts``, ``-fd``, ``-hash``, ``-bs`` and ``-fe`` options."""
    if len(argv) < 3:
        raise ValueError("Faltan argumentos obligatorios.")
    values = {}
    tokens = iter(argv)
    for option in tokens:
        if option not in ("-ts", "-fd", "-hash", "-bs", "-fe"):
            raise ValueError("Opción desconocida")
        value = next(tokens, None)
        if value is None:
            raise ValueError(f"Falta el argumento para la opción {option}")
        values[option] = value
    if "-ts" not in values:
        raise ValueError("Falta la opción -ts")
    return HashParameters(
        table_size=_to_int("-ts", values["-ts"]),
        dispersion=values.get("-fd", ""),
        hash_type=values.get("-hash", ""),
        block_size=_to_int("-bs", values["-bs"]) if "-bs" in values else 0,
        exploration=values.get("-fe", ""),
    )


def build_dispersion(code, table_size):
    """Return the dispersion function named by ``code`` ("0", "1" or "2")."""
    try:
        _, factory = _DISPERSIONS[code]
    except KeyError:
        raise ValueError(f"Código de función de dispersión incorrecto: {code}") from None
    return factory(table_size)


def build_exploration(code, dispersion):
    """Return the exploration function named by ``code`` ("0" to "3")."""
    if code == "0":
        return LinearExploration()
    if code == "1":
        return QuadraticExploration()
    if code == "2":
        return DoubleDispersionExploration(dispersion)
    if code == "3":
        return RedispersionExploration()
    raise ValueError(f"Código de función de exploración incorrecto: {code}")


def _read_key(key_parser, stdin, stdout, prompt):
    stdout.write(prompt)
    line = stdin.readline()
    if not line:
        return None, True
    try:
        return key_parser(line), False
    except ValueError:
        stdout.write("Elemento no válido\n\n")
        return None, False


def run_menu(table, key_parser, stdin=None, stdout=None):
    """Run the interactive menu until option 4 or end of input."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    while True:
        stdout.write(_MENU)
        line = stdin.readline()
        if not line:
            return
        option = line.strip()
        if option == "1":
            key, eof = _read_key(
                key_parser, stdin, stdout, "Introduzca el elemento que quiere insertar: "
            )
            if eof:
                return
            if key is None:
                continue
            if table.insert(key):
                stdout.write(f"Elemento insertado en la dirección {table.dispersion(key)}\n")
                stdout.write("El elemento se ha insertado correctamente en la tabla\n\n")
            else:
                stdout.write("El elemento no se ha podido insertar en la tabla\n\n")
        elif option == "2":
            key, eof = _read_key(
                key_parser, stdin, stdout, "Introduzca el elemento que quiere buscar: "
            )
            if eof:
                return
            if key is None:
                continue
            if table.search(key):
                stdout.write("El elemento está en la tabla\n\n")
            else:
                stdout.write("El elemento no está en la tabla\n\n")
        elif option == "3":
            stdout.write(str(table))
        elif option == "4":
            stdout.write("\n")
            return
        else:
            stdout.write("Opción no válida\n")


def main(argv=None):
    """Build a hash table of students from the options and run the menu."""
    argv = sys.argv[1:] if argv is None else argv
    out = sys.stdout
    try:
        parameters = parse_arguments(argv)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"->  Tipo de hash:              {parameters.hash_type}", file=out)
    print(f"->  Función de dispersión:     {parameters.dispersion}", file=out)
    print(f"->  Función de exploración:    {parameters.exploration}", file=out)
    print(f"->  Tamaño del bloque:         {parameters.block_size}", file=out)
    print(f"-> Tamaño de la tabla:        {parameters.table_size}", file=out)

    try:
        dispersion = build_dispersion(parameters.dispersion, parameters.table_size)
    except ValueError:
        print("Código de función de dispersión incorrecto", file=out)
        print("Introduce o 0 para Modulo, 1 para PseudoRandom o 2 para Suma", file=out)
        return 1
    print(f"Funcion de dispersion {_DISPERSIONS[parameters.dispersion][0]}", file=out)

    exploration = None
    if parameters.hash_type == "close":
        try:
            exploration = build_exploration(parameters.exploration, dispersion)
        except ValueError:
            print("Código de función de exploración incorrecto", file=out)
            print(
                "Introduce o 0 para Lineal, 1 para Cuadrática, "
                "2 para Doble dispersión o 3 para PseudoRandom",
                file=out,
            )
            return 1
        print(f"Funcion de exploracion {_EXPLORATIONS[parameters.exploration]}", file=out)

    if parameters.hash_type == "open":
        print("Tabla hash de dispersión abierta", file=out)
        table = HashTable(parameters.table_size, dispersion, exploration)
    elif parameters.hash_type == "close":
        print("Tabla hash de dispersión cerrada", file=out)
        table = HashTable(
            parameters.table_size, dispersion, exploration, parameters.block_size
        )
    else:
        return 0
    run_menu(table, Alumno.parse, sys.stdin, out)
    return 0


if __name__ == "__main__":
    sys.exit(main())