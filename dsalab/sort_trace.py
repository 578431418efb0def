"""Sort methods that print a trace of the sequence as they work."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod


class TraceSortMethod(ABC):
    """Sorts a mutable sequence in place, writing its steps to ``out``."""

    def __init__(self, items, out=None):
        self.items = items
        self.out = out

    @abstractmethod
    def sort_trace(self, trace):
        """Sort ``items`` in place, tracing the steps when ``trace`` is true."""

    def _write(self, text):
        (sys.stdout if self.out is None else self.out).write(text)

    def _print_sequence(self, label=""):
        self._write(label + "".join(f"{item} " for item in self.items) + "\n")

    def _swap(self, first, second):
        items = self.items
        items[first], items[second] = items[second], items[first]


class SelectionSortTrace(TraceSortMethod):
    """Selection sort printing the sequence after every swap; idle without trace."""

    def sort_trace(self, trace):
        if not trace:
            return
        items = self.items
        for i in range(len(items) - 1):
            smallest = i
            for j in range(i + 1, len(items)):
                if items[j] < items[smallest]:
                    smallest = j
            self._swap(i, smallest)
            self._print_sequence()


class QuickSortTrace(TraceSortMethod):
    """Quick sort printing pivots and swaps; only shows the input without trace."""

    def sort_trace(self, trace):
        self._print_sequence("Initial Sequence: ")
        if trace:
            self._quick_sort(0, len(self.items) - 1, trace)
            self._write("\n")
            self._print_sequence("Final Sequence: ")

    def _quick_sort(self, low, high, trace):
        if low < high:
            pivot_index = self._partition(low, high, trace)
            self._quick_sort(low, pivot_index - 1, trace)
            self._quick_sort(pivot_index + 1, high, trace)

    def _partition(self, low, high, trace):
        items = self.items
        pivot = items[high]
        self._write(f"Pivot: {pivot} \n")
        boundary = low - 1
        for j in range(low, high):
            if items[j] < pivot:
                boundary += 1
                self._write(f"swap: {items[boundary]} {items[j]}\n")
                self._swap(boundary, j)
                if trace:
                    self._print_sequence()
        self._swap(boundary + 1, high)
        if trace:
            self._print_sequence("swap del pivote: ")
        self._write("\n")
        return boundary + 1


class HeapSortTrace(TraceSortMethod):
    """Heap sort printing every swap made while sifting down."""

    def sort_trace(self, trace):
        self._print_sequence("Initial Sequence: ")
        size = len(self.items)
        for root in range(size // 2 - 1, -1, -1):
            self._heapify(size, root, trace)
        for end in range(size - 1, 0, -1):
            self._swap(0, end)
            self._heapify(end, 0, trace)
        self._print_sequence("Final Sequence: ")

    def _heapify(self, size, root, trace):
        items = self.items
        largest = root
        left = 2 * root + 1
        right = 2 * root + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest != root:
            self._write(f"swap: {items[root]} {items[largest]}\n")
            self._swap(root, largest)
            self._print_sequence()
            self._heapify(size, largest, trace)


class ShellSortTrace(TraceSortMethod):
    """Shell sort printing every shift and the sequence after every pass."""

    def __init__(self, items, increment=0.5, out=None):
        super().__init__(items, out)
        if not 0 < increment < 1:
            raise ValueError(f"shell sort increment must lie in (0, 1), got {increment}")
        self.increment = increment

    def sort_trace(self, trace):
        self._print_sequence("Initial Sequence: ")
        items = self.items
        gap = int(len(items) * self.increment)
        while gap > 0:
            for i in range(gap, len(items)):
                current = items[i]
                j = i
                while j >= gap and items[j - gap] > current:
                    self._write(f"swap: {items[j]} {items[j - gap]}\n")
                    self._print_sequence()
                    items[j] = items[j - gap]
                    j -= gap
                items[j] = current
            self._print_sequence()
            gap = int(gap * self.increment)
        self._print_sequence("Final Sequence: ")


class RadixSortTrace(TraceSortMethod):
    """Radix sort printing the sequence before and after every digit pass."""

    def sort_trace(self, trace):
        self._print_sequence("Initial Sequence: ")
        if self.items:
            largest = int(max(self.items))
            exp = 1
            while largest // exp > 0:
                self._print_sequence()
                self._counting_sort(exp)
                exp *= 10
            self._print_sequence()
        self._print_sequence("Final Sequence: ")

    def _counting_sort(self, exp):
        buckets = [[] for _ in range(10)]
        for item in self.items:
            buckets[(int(item) // exp) % 10].append(item)
        self.items[:] = [item for bucket in buckets for item in bucket]