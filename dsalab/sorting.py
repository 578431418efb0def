"""In-place sort methods that count their comparisons and swaps."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod


def _check_increment(increment):
    if not 0 < increment < 1:
        raise ValueError(f"shell sort increment must lie in (0, 1), got {increment}")
    return increment


class SortMethod(ABC):
    """Sorts a mutable sequence in place, counting comparisons and swaps."""

    def __init__(self, items, out=None):
        self.items = items
        self.out = out
        self.comparisons = 0
        self.swaps = 0

    @abstractmethod
    def sort(self):
        """Sort ``items`` in place."""

    def _write(self, text):
        (sys.stdout if self.out is None else self.out).write(text)

    def _print_sequence(self, label=""):
        self._write(label + "".join(f"{item} " for item in self.items) + "\n")

    def _swap(self, first, second):
        items = self.items
        items[first], items[second] = items[second], items[first]


class SelectionSort(SortMethod):
    """Selection sort; counts a comparison each time a new minimum is found."""

    def sort(self):
        items = self.items
        for i in range(len(items) - 1):
            smallest = i
            for j in range(i + 1, len(items)):
                if items[j] < items[smallest]:
                    self.comparisons += 1
                    smallest = j
            self._swap(i, smallest)
            self.swaps += 1


class QuickSort(SortMethod):
    """Quick sort with the last element of each range as pivot."""

    def sort(self):
        self._print_sequence()
        self._quick_sort(0, len(self.items) - 1)
        self._print_sequence("Final Sequence: ")

    def _quick_sort(self, low, high):
        if low < high:
            pivot_index = self._partition(low, high)
            self._quick_sort(low, pivot_index - 1)
            self._quick_sort(pivot_index + 1, high)
            self.comparisons += 1

    def _partition(self, low, high):
        items = self.items
        pivot = items[high]
        boundary = low - 1
        for j in range(low, high):
            if items[j] < pivot:
                self.comparisons += 1
                boundary += 1
                self._swap(boundary, j)
                self.swaps += 1
        self._swap(boundary + 1, high)
        self.swaps += 1
        return boundary + 1


class HeapSort(SortMethod):
    """Heap sort over a max-heap built in place."""

    def sort(self):
        self._print_sequence("Initial Sequence: ")
        size = len(self.items)
        for root in range(size // 2 - 1, -1, -1):
            self._heapify(size, root)
        for end in range(size - 1, 0, -1):
            self._swap(0, end)
            self.swaps += 1
            self._heapify(end, 0)
        self._print_sequence("Final Sequence: ")

    def _heapify(self, size, root):
        items = self.items
        largest = root
        left = 2 * root + 1
        right = 2 * root + 2
        if left < size and items[left] > items[largest]:
            self.comparisons += 1
            largest = left
        if right < size and items[right] > items[largest]:
            self.comparisons += 1
            largest = right
        if largest != root:
            self._swap(root, largest)
            self.swaps += 1
            self._heapify(size, largest)


class ShellSort(SortMethod):
    """Shell sort whose gap is multiplied by ``increment`` after every pass."""

    def __init__(self, items, increment=0.5, out=None):
        super().__init__(items, out)
        self.increment = _check_increment(increment)

    def sort(self):
        self._print_sequence("Initial Sequence: ")
        items = self.items
        gap = int(len(items) * self.increment)
        while gap > 0:
            for i in range(gap, len(items)):
                current = items[i]
                j = i
                while j >= gap and items[j - gap] > current:
                    self.comparisons += 1
                    self.swaps += 1
                    items[j] = items[j - gap]
                    j -= gap
                self.comparisons += 1
                self.swaps += 1
                items[j] = current
            gap = int(gap * self.increment)
        self._print_sequence("Final Sequence: ")


class RadixSort(SortMethod):
    """Least-significant-digit radix sort on the keys' decimal digits."""

    def sort(self):
        self._print_sequence("Initial Sequence: ")
        if self.items:
            largest = int(max(self.items))
            exp = 1
            while largest // exp > 0:
                self._counting_sort(exp)
                exp *= 10
        self._print_sequence("Final Sequence: ")

    def _counting_sort(self, exp):
        buckets = [[] for _ in range(10)]
        for item in self.items:
            buckets[(int(item) // exp) % 10].append(item)
        self.items[:] = [item for bucket in buckets for item in bucket]