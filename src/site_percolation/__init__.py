"""
Site Percolation - connectivity model for N-by-N grids.

This package provides tools for:
- Incremental site percolation with weighted union-find
- Replaying site files and saving per-file results
- Aggregating results into CSV
- YAML-defined runs over a directory of site files
"""

__version__ = "1.0.0"
