from __future__ import annotations

import math
import numbers
from typing import Iterator, List, Optional

from algograph.exceptions import (
    DuplicateIndexError,
    InvalidVertexError,
    KeyOrderError,
    MissingIndexError,
    QueueUnderflowError,
)


class IndexMinPQ:
    """Binary min-heap over the indices 0..n-1, each carrying a mutable key.

    The heap stores indices, not keys, in 1-based positions:

      pq[pos]  -> index held at heap position pos
      qp[i]    -> heap position of index i (-1 when i is not on the queue)
      keys[i]  -> current key of index i

    pq and qp are inverses of each other for every index on the queue, which
    is what lets decrease_key find an arbitrary index in O(1) before sifting.

    insert / decrease_key / del_min / delete are O(log n); contains is O(1).
    """

    def __init__(self, capacity: int):
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._capacity = capacity
        self._n = 0
        self._pq: List[int] = [0] * (capacity + 1)
        self._qp: List[int] = [-1] * capacity
        self._keys: List[Optional[float]] = [None] * capacity

    def _validate_index(self, i: int) -> None:
        if not 0 <= i < self._capacity:
            raise InvalidVertexError(i, self._capacity)

    @staticmethod
    def _validate_key(key: float) -> None:
        if isinstance(key, bool) or not isinstance(key, numbers.Real):
            raise TypeError(f"key must be a real number, got {key!r}")
        if math.isnan(key):
            raise KeyOrderError("key must not be NaN")

    def is_empty(self) -> bool:
        return self._n == 0

    def size(self) -> int:
        return self._n

    def __len__(self) -> int:
        return self._n

    def contains(self, i: int) -> bool:
        self._validate_index(i)
        return self._qp[i] != -1

    def __contains__(self, i: int) -> bool:
        return self.contains(i)

    def insert(self, i: int, key: float) -> None:
        self._validate_index(i)
        self._validate_key(key)
        if self._qp[i] != -1:
            raise DuplicateIndexError(f"index {i} is already in the priority queue")
        self._n += 1
        self._qp[i] = self._n
        self._pq[self._n] = i
        self._keys[i] = key
        self._swim(self._n)

    def min_index(self) -> int:
        if self._n == 0:
            raise QueueUnderflowError("priority queue underflow")
        return self._pq[1]

    def min_key(self) -> float:
        return self._keys[self.min_index()]

    def key_of(self, i: int) -> float:
        self._validate_index(i)
        if self._qp[i] == -1:
            raise MissingIndexError(f"index {i} is not in the priority queue")
        return self._keys[i]

    def decrease_key(self, i: int, key: float) -> None:
        """Lower the key of index i. An equal key is accepted as a no-op."""
        self._validate_index(i)
        self._validate_key(key)
        if self._qp[i] == -1:
            raise MissingIndexError(f"index {i} is not in the priority queue")
        current = self._keys[i]
        if key > current:
            raise KeyOrderError(f"new key {key!r} is greater than current key {current!r} for index {i}")
        if key == current:
            return
        self._keys[i] = key
        self._swim(self._qp[i])

    def del_min(self) -> int:
        """Remove the index with the smallest key and return it."""
        if self._n == 0:
            raise QueueUnderflowError("priority queue underflow")
        min_i = self._pq[1]
        self._exch(1, self._n)
        self._n -= 1
        self._sink(1)
        self._qp[min_i] = -1
        self._keys[min_i] = None
        self._pq[self._n + 1] = -1
        return min_i

    def delete(self, i: int) -> None:
        """Remove index i and its key from the queue."""
        self._validate_index(i)
        if self._qp[i] == -1:
            raise MissingIndexError(f"index {i} is not in the priority queue")
        pos = self._qp[i]
        self._exch(pos, self._n)
        self._n -= 1
        if pos <= self._n:
            self._swim(pos)
            self._sink(pos)
        self._keys[i] = None
        self._qp[i] = -1
        self._pq[self._n + 1] = -1

    def __iter__(self) -> Iterator[int]:
        """Indices in ascending key order, as of the call; the queue itself is left untouched."""
        copy = IndexMinPQ(self._capacity)
        for pos in range(1, self._n + 1):
            i = self._pq[pos]
            copy.insert(i, self._keys[i])
        return _drain(copy)

    # heap helpers

    def _greater(self, a: int, b: int) -> bool:
        return self._keys[self._pq[a]] > self._keys[self._pq[b]]

    def _exch(self, a: int, b: int) -> None:
        pq = self._pq
        pq[a], pq[b] = pq[b], pq[a]
        self._qp[pq[a]] = a
        self._qp[pq[b]] = b

    def _swim(self, k: int) -> None:
        while k > 1 and self._greater(k // 2, k):
            self._exch(k, k // 2)
            k //= 2

    def _sink(self, k: int) -> None:
        n = self._n
        while 2 * k <= n:
            j = 2 * k
            if j < n and self._greater(j, j + 1):
                j += 1
            if not self._greater(k, j):
                break
            self._exch(k, j)
            k = j


def _drain(pq: IndexMinPQ) -> Iterator[int]:
    while not pq.is_empty():
        yield pq.del_min()
