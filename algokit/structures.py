"""Disjoint sets, Fenwick and segment trees, and an LRU cache."""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Hashable, Iterable
from typing import Any


class DisjointSet:
    """Union-find over 0..size-1 with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self._parent = list(range(size))
        self._rank = [0] * size

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} is out of range")

    def find(self, x: int) -> int:
        """Representative of the set containing ``x``."""
        self._check(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of ``a`` and ``b``; False if already merged."""
        a, b = self.find(a), self.find(b)
        if a == b:
            return False
        if self._rank[a] < self._rank[b]:
            a, b = b, a
        self._parent[b] = a
        if self._rank[a] == self._rank[b]:
            self._rank[a] += 1
        return True


class FenwickTree:
    """Binary indexed tree over positions 1..size for prefix sums."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self._size = size
        self._tree = [0] * (size + 1)

    def __len__(self) -> int:
        return self._size

    def add(self, index: int, value: int) -> None:
        """Add ``value`` at 1-based position ``index``."""
        if not 1 <= index <= self._size:
            raise IndexError(f"index {index} is out of range 1..{self._size}")
        while index <= self._size:
            self._tree[index] += value
            index += index & -index

    def prefix_sum(self, index: int) -> int:
        """Sum of positions 1..index."""
        if not 0 <= index <= self._size:
            raise IndexError(f"index {index} is out of range 0..{self._size}")
        total = 0
        while index > 0:
            total += self._tree[index]
            index -= index & -index
        return total

    def range_sum(self, left: int, right: int) -> int:
        """Sum of positions left..right, both inclusive."""
        return self.prefix_sum(right) - self.prefix_sum(left - 1)


class SegmentTree:
    """Range-sum segment tree with point assignment."""

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        if not items:
            raise ValueError("segment tree needs at least one value")
        self._size = len(items)
        self._tree = [0] * self._size + items
        for node in range(self._size - 1, 0, -1):
            self._tree[node] = self._tree[2 * node] + self._tree[2 * node + 1]

    def __len__(self) -> int:
        return self._size

    def query(self, left: int, right: int) -> int:
        """Sum of indices left..right inclusive, clipped to the array; 0 if empty."""
        left = max(left, 0)
        right = min(right, self._size - 1)
        if left > right:
            return 0
        total = 0
        low, high = left + self._size, right + self._size + 1
        while low < high:
            if low & 1:
                total += self._tree[low]
                low += 1
            if high & 1:
                high -= 1
                total += self._tree[high]
            low //= 2
            high //= 2
        return total

    def update(self, index: int, value: int) -> None:
        """Set position ``index`` to ``value``."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} is out of range")
        node = index + self._size
        self._tree[node] = value
        node //= 2
        while node:
            self._tree[node] = self._tree[2 * node] + self._tree[2 * node + 1]
            node //= 2


class LRUCache:
    """Fixed-capacity mapping that evicts the least recently used key."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._entries: OrderedDict[Hashable, Any] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._entries

    def get(self, key: Hashable) -> Any:
        """Value for ``key``, marking it most recent; None if absent."""
        if key not in self._entries:
            return None
        self._entries.move_to_end(key)
        return self._entries[key]

    def put(self, key: Hashable, value: Any) -> None:
        """Store ``value`` under ``key``, evicting the oldest key if full."""
        if key in self._entries:
            self._entries.move_to_end(key)
        elif len(self._entries) == self.capacity:
            self._entries.popitem(last=False)
        self._entries[key] = value