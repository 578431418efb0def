"""Sequences used as the buckets of a hash table."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Sequence(ABC):
    """A collection of distinct keys."""

    @abstractmethod
    def search(self, key):
        """Return whether ``key`` is stored."""

    @abstractmethod
    def insert(self, key):
        """Store ``key``; return whether it was added."""

    @abstractmethod
    def is_full(self):
        """Return whether no more keys fit."""


class DynamicSequence(Sequence):
    """An unbounded sequence of distinct keys, in insertion order."""

    def __init__(self):
        self._items = []

    def search(self, key):
        return key in self._items

    def insert(self, key):
        if self.search(key):
            return False
        self._items.append(key)
        return True

    def is_full(self):
        return False

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __repr__(self):
        return f"DynamicSequence({self._items!r})"


class StaticSequence(Sequence):
    """A sequence of distinct keys holding at most ``block_size`` of them."""

    def __init__(self, block_size=0):
        if block_size < 0:
            raise ValueError(f"block size must not be negative, got {block_size}")
        self.block_size = block_size
        self._items = []

    def search(self, key):
        return key in self._items

    def insert(self, key):
        if self.is_full() or self.search(key):
            return False
        self._items.append(key)
        return True

    def is_full(self):
        return len(self._items) == self.block_size

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __repr__(self):
        return f"StaticSequence({self.block_size}, {self._items!r})"