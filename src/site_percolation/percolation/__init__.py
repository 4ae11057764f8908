"""Incremental site percolation on square grids."""

from .union_find import WeightedQuickUnionUF
from .grid import Percolation

__all__ = ['WeightedQuickUnionUF', 'Percolation']
