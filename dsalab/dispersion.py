"""Dispersion (hash) functions mapping a key to a table position."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod

_RAND_BITS = 31


class DispersionFunction(ABC):
    """Maps a key to a position in a table of ``table_size`` slots."""

    def __init__(self, table_size):
        if table_size <= 0:
            raise ValueError(f"table size must be positive, got {table_size}")
        self.table_size = table_size

    @abstractmethod
    def __call__(self, key):
        """Return the table position for ``key``."""


class ModuloDispersion(DispersionFunction):
    """Position is the key modulo the table size."""

    def __call__(self, key):
        return int(key) % self.table_size


class SumDispersion(DispersionFunction):
    """Position is the sum of the key's decimal digits modulo the table size."""

    def __call__(self, key):
        number = int(key)
        total = sum(int(digit) for digit in str(number)) if number > 0 else 0
        return total % self.table_size


class PseudoRandomDispersion(DispersionFunction):
    """Position is a pseudo-random number seeded with the key."""

    def __call__(self, key):
        return random.Random(int(key)).getrandbits(_RAND_BITS) % self.table_size