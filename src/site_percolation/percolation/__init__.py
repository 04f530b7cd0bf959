"""Site percolation on an N-by-N grid via incremental union-find."""

from .disjoint_set import DisjointSet
from .grid import PercolationGrid, InvalidSizeError, OutOfBoundsError
from .worker import read_site_file, run_sites, run_site_file, process_percolation_chunk
from .analysis import format_report, aggregate_result_files_to_csv

__all__ = [
    'DisjointSet', 'PercolationGrid', 'InvalidSizeError', 'OutOfBoundsError',
    'read_site_file', 'run_sites', 'run_site_file', 'process_percolation_chunk',
    'format_report', 'aggregate_result_files_to_csv',
]
