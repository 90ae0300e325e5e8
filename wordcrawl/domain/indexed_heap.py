import itertools
from typing import Dict, Hashable, Iterator, List, Tuple


class IndexedMinHeap:
    """Binary min-heap keyed by item with in-place priority updates.

    Keeps a key -> position index next to the heap array so that `update`
    can find an entry in O(1) and re-sift it in O(log n).

    Ties are broken first-in first-out: among entries of equal priority the
    one pushed (or last updated) earliest sits closest to the top. An update
    gives the entry a fresh sequence number, as if it had been re-inserted.
    """

    def __init__(self):
        # entries are [priority, sequence, key]
        self._heap: List[list] = []
        self._positions: Dict[Hashable, int] = {}
        self._sequence = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, key) -> bool:
        return key in self._positions

    def __iter__(self) -> Iterator[Hashable]:
        """Iterate keys in heap-array order (not sorted)."""
        return iter([entry[2] for entry in self._heap])

    def push(self, key, priority) -> None:
        if key in self._positions:
            raise KeyError(f"{key!r} is already in the heap")
        self._heap.append([priority, next(self._sequence), key])
        index = len(self._heap) - 1
        self._positions[key] = index
        self._sift_up(index)

    def peek(self) -> Tuple[Hashable, int]:
        if not self._heap:
            raise IndexError("peek from empty heap")
        priority, _, key = self._heap[0]
        return key, priority

    def pop(self) -> Tuple[Hashable, int]:
        if not self._heap:
            raise IndexError("pop from empty heap")
        last = len(self._heap) - 1
        self._swap(0, last)
        priority, _, key = self._heap.pop()
        del self._positions[key]
        if self._heap:
            self._sift_down(0)
        return key, priority

    def update(self, key, priority) -> None:
        index = self._positions[key]
        entry = self._heap[index]
        previous = entry[0]
        entry[0] = priority
        entry[1] = next(self._sequence)
        # a fresh sequence makes the entry strictly larger unless priority dropped
        if priority < previous:
            self._sift_up(index)
        else:
            self._sift_down(index)

    def _less(self, i: int, j: int) -> bool:
        a, b = self._heap[i], self._heap[j]
        return (a[0], a[1]) < (b[0], b[1])

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._positions[heap[i][2]] = i
        self._positions[heap[j][2]] = j

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = (index - 1) // 2
            if not self._less(index, parent):
                break
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index: int) -> None:
        size = len(self._heap)
        while True:
            left = 2 * index + 1
            right = left + 1
            smallest = index
            if left < size and self._less(left, smallest):
                smallest = left
            if right < size and self._less(right, smallest):
                smallest = right
            if smallest == index:
                break
            self._swap(index, smallest)
            index = smallest
