"""
Weighted quick-union with path compression.

Elements are the integers 0..n-1. Parent links and tree sizes are kept in
numpy integer arrays so a grid with millions of sites stays compact.
"""

import numpy as np


class DisjointSet:
    """
    Partition of a fixed universe of n elements into disjoint classes.

    Union by size plus path compression gives near-constant amortized
    time for both union() and connected().

    Example:
        ds = DisjointSet(4)
        ds.union(0, 1)
        ds.connected(0, 1)  # True
        ds.count            # 3
    """

    def __init__(self, n: int):
        """
        Initialize n singleton classes.

        Args:
            n: Number of elements in the universe
        """
        if n < 0:
            raise ValueError(f"Universe size must be non-negative, got {n}")
        self._parent = np.arange(n, dtype=np.int64)
        self._size = np.ones(n, dtype=np.int64)
        self._count = n

    def __len__(self) -> int:
        return len(self._parent)

    @property
    def count(self) -> int:
        """Number of disjoint classes."""
        return self._count

    def _validate(self, p: int) -> None:
        n = len(self._parent)
        if p < 0 or p >= n:
            raise IndexError(f"index {p} is not between 0 and {n - 1}")

    def find(self, p: int) -> int:
        """
        Return the canonical element of the class containing p.

        Every node visited on the way up is re-pointed at the root.
        """
        self._validate(p)
        root = p
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[p] != root:
            nxt = self._parent[p]
            self._parent[p] = root
            p = nxt
        return int(root)

    def connected(self, p: int, q: int) -> bool:
        """Return True if p and q are in the same class."""
        return self.find(p) == self.find(q)

    def union(self, p: int, q: int) -> None:
        """Merge the classes containing p and q (no-op if already merged)."""
        root_p = self.find(p)
        root_q = self.find(q)
        if root_p == root_q:
            return

        # Smaller tree goes under the larger one
        if self._size[root_p] < self._size[root_q]:
            root_p, root_q = root_q, root_p
        self._parent[root_q] = root_p
        self._size[root_p] += self._size[root_q]
        self._count -= 1
