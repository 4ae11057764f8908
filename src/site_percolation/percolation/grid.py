"""
Site percolation on an n-by-n grid.

Each site is either open or blocked. A full site is an open site that can be
connected to an open site in the top row via a chain of neighboring
(left, right, up, down) open sites. The system percolates if there is a full
site in the bottom row.

Connectivity is maintained incrementally with two union-find structures:
one with virtual top and bottom nodes that answers percolates(), and one
with only a virtual top node that answers is_full(). Keeping the bottom node
out of the second structure stops sites that only reach the bottom row from
being reported full ("backwash").
"""

from typing import List, Tuple

import numpy as np

from .union_find import WeightedQuickUnionUF


class Percolation:
    """
    An n-by-n percolation system with 1-indexed (row, col) coordinates.

    Not thread-safe. Concurrent callers must guard open() and every query
    with one shared lock, since open() performs several dependent unions.

    Example:
        grid = Percolation(3)
        grid.open(1, 1)
        grid.open(2, 1)
        grid.open(3, 1)
        assert grid.percolates()
    """

    def __init__(self, n: int):
        """
        Create an n-by-n grid with all sites blocked.

        Args:
            n: Side length of the grid, must be > 0
        """
        if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
            raise TypeError(f"n must be an integer, got {type(n).__name__}")
        if n <= 0:
            raise ValueError("n needs to be > 0")

        self.n = int(n)
        self.grid = np.zeros(self.n * self.n, dtype=bool)
        self.full_uf = WeightedQuickUnionUF(self.n * self.n + 2)
        self.top_uf = WeightedQuickUnionUF(self.n * self.n + 1)
        self.virtual_top = self.n * self.n
        self.virtual_bottom = self.n * self.n + 1
        self.open_sites = 0

    def __repr__(self) -> str:
        return (f"Percolation(n={self.n}, open_sites={self.open_sites}, "
                f"percolates={self.percolates()})")

    @property
    def size(self) -> int:
        return self.n

    # --- Coordinates ---

    def _in_range(self, row: int, col: int) -> bool:
        return 1 <= row <= self.n and 1 <= col <= self.n

    def _validate(self, row: int, col: int) -> None:
        if not self._in_range(row, col):
            raise IndexError(
                f"site ({row}, {col}) is outside the grid, "
                f"row and col must be between 1 and {self.n}"
            )

    def _to_index(self, row: int, col: int) -> int:
        """Map 1-indexed (row, col) to the row-major offset into the grid."""
        return self.n * (row - 1) + (col - 1)

    def _adjacent_sites(self, row: int, col: int) -> List[Tuple[int, int]]:
        """In-range up, down, left and right neighbours of (row, col)."""
        candidates = [(row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)]
        return [(r, c) for r, c in candidates if self._in_range(r, c)]

    # --- Mutation ---

    def open(self, row: int, col: int) -> None:
        """
        Open site (row, col) if it is not open already.

        The new site is joined to each open neighbour in both structures,
        to the virtual top if it sits in row 1, and to the virtual bottom
        (full-connectivity structure only) if it sits in row n.
        """
        self._validate(row, col)
        if self.is_open(row, col):
            return

        site = self._to_index(row, col)
        self.grid[site] = True
        self.open_sites += 1

        for adj_row, adj_col in self._adjacent_sites(row, col):
            neighbour = self._to_index(adj_row, adj_col)
            if self.grid[neighbour]:
                self.full_uf.union(site, neighbour)
                self.top_uf.union(site, neighbour)

        if row == 1:
            self.full_uf.union(self.virtual_top, site)
            self.top_uf.union(self.virtual_top, site)

        # n == 1 takes both branches
        if row == self.n:
            self.full_uf.union(self.virtual_bottom, site)

    # --- Queries ---

    def is_open(self, row: int, col: int) -> bool:
        self._validate(row, col)
        return bool(self.grid[self._to_index(row, col)])

    def is_full(self, row: int, col: int) -> bool:
        """Check whether (row, col) is open and connected to the top row."""
        self._validate(row, col)
        site = self._to_index(row, col)
        return bool(self.grid[site]) and self.top_uf.connected(site, self.virtual_top)

    def number_of_open_sites(self) -> int:
        return self.open_sites

    def percolates(self) -> bool:
        """Check whether some open path joins the top row to the bottom row."""
        return self.full_uf.connected(self.virtual_top, self.virtual_bottom)

    # --- Reporting ---

    def open_mask(self) -> np.ndarray:
        """
        Open/blocked state as an (n, n) boolean array.

        Returns:
            A copy; writing to it does not affect the grid
        """
        return self.grid.reshape(self.n, self.n).copy()

    def full_mask(self) -> np.ndarray:
        """Full/not-full state of every site as an (n, n) boolean array."""
        mask = np.zeros((self.n, self.n), dtype=bool)
        for site in np.flatnonzero(self.grid):
            if self.top_uf.connected(int(site), self.virtual_top):
                mask[site // self.n, site % self.n] = True
        return mask

    def full_sites(self) -> List[Tuple[int, int]]:
        """1-indexed (row, col) of every full site, in row-major order."""
        rows, cols = np.nonzero(self.full_mask())
        return [(int(r) + 1, int(c) + 1) for r, c in zip(rows, cols)]
