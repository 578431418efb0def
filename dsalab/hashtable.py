"""Hash table whose addresses hold open (unbounded) or closed (fixed-size) buckets."""

from __future__ import annotations

from dsalab.sequence import DynamicSequence, Sequence, StaticSequence


class HashTable(Sequence):
    """A table of ``table_size`` buckets addressed by a dispersion function.

    Without a ``block_size`` every address holds an unbounded bucket (open
    hashing); with one, every address holds at most ``block_size`` keys
    (closed hashing).
    """

    def __init__(self, table_size, dispersion, exploration=None, block_size=None):
        if table_size <= 0:
            raise ValueError(f"table size must be positive, got {table_size}")
        self.table_size = table_size
        self.dispersion = dispersion
        self.exploration = exploration
        self.block_size = block_size
        if block_size is None:
            self._buckets = [DynamicSequence() for _ in range(table_size)]
        else:
            self._buckets = [StaticSequence(block_size) for _ in range(table_size)]

    @property
    def is_open(self):
        """Whether the buckets are unbounded."""
        return self.block_size is None

    def _bucket(self, key):
        return self._buckets[self.dispersion(key)]

    def search(self, key):
        return self._bucket(key).search(key)

    def insert(self, key):
        """Store ``key`` at its address; return whether it was added."""
        return self._bucket(key).insert(key)

    def is_full(self):
        return False

    def __contains__(self, key):
        return self.search(key)

    def __len__(self):
        return sum(len(bucket) for bucket in self._buckets)

    def __str__(self):
        separator = " || Valor: " if self.is_open else "|| Valor : "
        lines = (
            f"Direccion {address}: " + "".join(f"{separator}{key} " for key in bucket)
            for address, bucket in enumerate(self._buckets)
        )
        return "".join(f"{line}\n" for line in lines)