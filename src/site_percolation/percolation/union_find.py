"""
Weighted quick-union disjoint-set forest.

Elements are the integers 0..n-1. Parent and tree-size bookkeeping live in
flat numpy arrays indexed by element id, so no per-node objects are allocated.
"""

import numpy as np


class WeightedQuickUnionUF:
    """
    Union-find over a fixed universe with union by size and path halving.

    m union/find operations over n elements run in O(n + m log* n) amortized.
    """

    def __init__(self, n: int):
        """
        Initialize the forest with every element in its own set.

        Args:
            n: Number of elements in the universe
        """
        if n <= 0:
            raise ValueError("n needs to be > 0")

        self.n = n
        self.parent = np.arange(n, dtype=np.int64)
        self.size = np.ones(n, dtype=np.int64)
        self._count = n

    def __len__(self) -> int:
        return self.n

    @property
    def count(self) -> int:
        """Number of disjoint sets."""
        return self._count

    def _validate(self, p: int) -> None:
        if p < 0 or p >= self.n:
            raise IndexError(f"index {p} is not between 0 and {self.n - 1}")

    def find(self, p: int) -> int:
        """
        Return the root of the set containing p.

        Every other node on the walk is pointed at its grandparent.
        """
        self._validate(p)
        parent = self.parent
        while p != parent[p]:
            parent[p] = parent[parent[p]]
            p = parent[p]
        return int(p)

    def connected(self, p: int, q: int) -> bool:
        """Check whether p and q are in the same set."""
        return self.find(p) == self.find(q)

    def union(self, p: int, q: int) -> bool:
        """
        Merge the sets containing p and q.

        Args:
            p: First element
            q: Second element

        Returns:
            True if two sets were merged, False if p and q were already joined
        """
        root_p = self.find(p)
        root_q = self.find(q)

        if root_p == root_q:
            return False

        # Smaller tree goes under the larger one
        if self.size[root_p] < self.size[root_q]:
            self.parent[root_p] = root_q
            self.size[root_q] += self.size[root_p]
        else:
            self.parent[root_q] = root_p
            self.size[root_p] += self.size[root_q]

        self._count -= 1
        return True
