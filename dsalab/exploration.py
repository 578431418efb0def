"""Exploration functions giving the probe offset for a key and attempt."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod

_RAND_BITS = 31


class ExplorationFunction(ABC):
    """Returns the offset used on the given probe attempt for a key."""

    @abstractmethod
    def __call__(self, key, attempt):
        """Return the offset for ``key`` on probe ``attempt``."""


class LinearExploration(ExplorationFunction):
    """Offset grows by one with every attempt."""

    def __call__(self, key, attempt):
        return attempt + 1


class QuadraticExploration(ExplorationFunction):
    """Offset is the square of the attempt."""

    def __call__(self, key, attempt):
        return attempt * attempt


class DoubleDispersionExploration(ExplorationFunction):
    """Offset is a second dispersion of the key times the attempt."""

    def __init__(self, dispersion):
        self.dispersion = dispersion

    def __call__(self, key, attempt):
        return self.dispersion(key) * attempt


class RedispersionExploration(ExplorationFunction):
    """Offset is the attempt-th number of a generator seeded with the key."""

    def __call__(self, key, attempt):
        rng = random.Random(int(key))
        for _ in range(attempt - 1):
            rng.getrandbits(_RAND_BITS)
        return rng.getrandbits(_RAND_BITS)