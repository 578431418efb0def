"""Key types stored in the hash tables and ordered by the sort methods."""

from __future__ import annotations

import random
from dataclasses import dataclass

NIF_MAX = 99_999_999


def _as_int(value):
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class _OrderedByInt:
    """Orders keys by their integer conversion, as the sort methods expect."""

    __slots__ = ()

    def _compare(self, other, op):
        other_value = _as_int(other)
        if other_value is None:
            return NotImplemented
        return op(int(self), other_value)

    def __lt__(self, other):
        return self._compare(other, lambda a, b: a < b)

    def __le__(self, other):
        return self._compare(other, lambda a, b: a <= b)

    def __gt__(self, other):
        return self._compare(other, lambda a, b: a > b)

    def __ge__(self, other):
        return self._compare(other, lambda a, b: a >= b)


@dataclass(frozen=True, order=True)
class Nif:
    """A national identity number between 0 and 99999999."""

    value: int

    def __post_init__(self):
        number = int(self.value)
        if not 0 <= number <= NIF_MAX:
            raise ValueError(f"invalid NIF: {self.value}")
        object.__setattr__(self, "value", number)

    @classmethod
    def random(cls):
        """Return a NIF with a random value in the valid range."""
        return cls(random.randrange(NIF_MAX + 1))

    @classmethod
    def parse(cls, text):
        """Build a NIF from its decimal text."""
        return cls(int(text.strip()))

    def __int__(self):
        return self.value

    def __floordiv__(self, divisor):
        return Nif(self.value // divisor)

    def __mod__(self, divisor):
        return self.value % divisor

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True)
class Alumno(_OrderedByInt):
    """A student identified by an alphanumeric key."""

    nombre: str
    apellidos: str
    clave: str

    @classmethod
    def parse(cls, text):
        """Build a student from 'nombre apellidos clave'."""
        tokens = text.split()
        if len(tokens) != 3:
            raise ValueError(f"expected 'nombre apellidos clave', got {text!r}")
        return cls(*tokens)

    def __int__(self):
        return sum(map(ord, self.clave))

    def __str__(self):
        return f"Nombre: {self.nombre}, Apellidos: {self.apellidos}, Clave: {self.clave}"


class Persona(_OrderedByInt):
    """A person identified by a NIF followed by its control letter."""

    __slots__ = ("nombre", "apellidos", "nif", "letra")

    def __init__(self, nombre, apellidos, nif_with_letra):
        if len(nif_with_letra) < 8:
            raise ValueError(f"NIF too short: {nif_with_letra!r}")
        try:
            number = int(nif_with_letra[:8])
        except ValueError as exc:
            raise ValueError(f"invalid NIF: {nif_with_letra!r}") from exc
        self.nombre = nombre
        self.apellidos = apellidos
        self.nif = Nif(number)
        self.letra = nif_with_letra[8:9]

    def __eq__(self, other):
        if not isinstance(other, Persona):
            return NotImplemented
        return (self.nombre, self.apellidos, self.nif) == (
            other.nombre,
            other.apellidos,
            other.nif,
        )

    def __hash__(self):
        return hash((self.nombre, self.apellidos, self.nif))

    def __int__(self):
        return int(self.nif) + (ord(self.letra) if self.letra else 0)

    def __str__(self):
        return f"Nombre: {self.nombre}, Apellidos: {self.apellidos}, NIF: {self.nif}"

    def __repr__(self):
        return (
            f"Persona({self.nombre!r}, {self.apellidos!r}, "
            f"{str(self.nif.value).zfill(8) + self.letra!r})"
        )