"""
Core site percolation model on an N-by-N grid.

Sites start blocked and are opened one at a time. Connectivity among open
sites is tracked incrementally with two disjoint sets:

- top-to-bottom: grid sites plus a virtual top and a virtual bottom node,
  used to answer percolates()
- top-only: grid sites plus a virtual top node, used to answer is_full()
  without backwash through the bottom sink
"""

import numpy as np

from .disjoint_set import DisjointSet


class InvalidSizeError(ValueError):
    """Grid side length is smaller than 1."""


class OutOfBoundsError(IndexError):
    """Row or column index lies outside [0, n-1]."""


class PercolationGrid:
    """
    N-by-N percolation system with all sites initially blocked.

    Sites are addressed by zero-based (row, col). The open state is kept in
    a flat boolean array indexed row-major (row * n + col).

    Example:
        grid = PercolationGrid(3)
        for row in range(3):
            grid.open(row, 0)
        grid.percolates()            # True
        grid.number_of_open_sites()  # 3
    """

    def __init__(self, n: int):
        """
        Create an n-by-n grid.

        Args:
            n: Side length of the grid (must be >= 1)
        """
        if n < 1:
            raise InvalidSizeError(f"Size must be greater than 0, got {n}")

        self._n = n
        self._open = np.zeros(n * n, dtype=bool)
        self._open_sites = 0

        # Virtual nodes live just past the grid sites
        self._top = n * n
        self._bottom = n * n + 1
        self._top_to_bottom = DisjointSet(n * n + 2)
        self._top_only = DisjointSet(n * n + 1)

    @property
    def n(self) -> int:
        """Side length of the grid."""
        return self._n

    def _check_bounds(self, row: int, col: int) -> None:
        if row < 0 or row >= self._n:
            raise OutOfBoundsError(
                f"row index {row} must be between 0 and {self._n - 1}")
        if col < 0 or col >= self._n:
            raise OutOfBoundsError(
                f"column index {col} must be between 0 and {self._n - 1}")

    def _encode(self, row: int, col: int) -> int:
        return row * self._n + col

    def _union(self, p: int, q: int) -> None:
        self._top_to_bottom.union(p, q)
        self._top_only.union(p, q)

    def open(self, row: int, col: int) -> None:
        """
        Open site (row, col) if it is not open already.

        The site is marked open before any union so that only neighbours
        that are already open get connected to it.
        """
        self._check_bounds(row, col)
        site = self._encode(row, col)
        if self._open[site]:
            return

        self._open[site] = True
        self._open_sites += 1

        n = self._n
        if row > 0 and self._open[site - n]:
            self._union(site, site - n)
        if row < n - 1 and self._open[site + n]:
            self._union(site, site + n)
        if col > 0 and self._open[site - 1]:
            self._union(site, site - 1)
        if col < n - 1 and self._open[site + 1]:
            self._union(site, site + 1)

        if row == 0:
            self._union(site, self._top)
        # Bottom sink only in the top-to-bottom set
        if row == n - 1:
            self._top_to_bottom.union(site, self._bottom)

    def is_open(self, row: int, col: int) -> bool:
        """Is site (row, col) open?"""
        self._check_bounds(row, col)
        return bool(self._open[self._encode(row, col)])

    def is_full(self, row: int, col: int) -> bool:
        """Is site (row, col) open and connected to the top row?"""
        self._check_bounds(row, col)
        site = self._encode(row, col)
        if not self._open[site]:
            return False
        return self._top_only.connected(site, self._top)

    def percolates(self) -> bool:
        """Does the system percolate?"""
        return self._top_to_bottom.connected(self._top, self._bottom)

    def number_of_open_sites(self) -> int:
        """Number of open sites; repeated opens of one site count once."""
        return self._open_sites

    def __repr__(self) -> str:
        return (f"PercolationGrid(n={self._n}, "
                f"open_sites={self._open_sites}, percolates={self.percolates()})")
