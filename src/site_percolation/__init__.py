"""
Site Percolation - incremental connectivity for n-by-n percolation grids.

This package provides tools for:
- Opening sites one at a time and asking whether the grid percolates
- Querying which open sites are full (connected to the top row)
- Running YAML-defined site-opening scenarios from the command line
"""

__version__ = "1.0.0"

from .percolation import Percolation, WeightedQuickUnionUF

__all__ = ['Percolation', 'WeightedQuickUnionUF', '__version__']
