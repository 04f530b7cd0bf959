"""
Percolation worker for processing site files.

A site file holds the grid size N followed by (row, col) pairs to open, as
whitespace-separated integers. The worker replays the opens on a fresh
PercolationGrid and saves a small .result file per input.
"""

import numpy as np
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from .grid import PercolationGrid
from .analysis import write_result_file


def read_site_file(site_file: Union[str, Path]) -> Tuple[int, np.ndarray]:
    """
    Parse a site file.

    Args:
        site_file: Path to a text file with N followed by row/col pairs

    Returns:
        Tuple of (n, sites) where sites has shape (k, 2)
    """
    site_file = Path(site_file)
    with open(site_file, 'r') as f:
        tokens = f.read().split()

    if not tokens:
        raise ValueError(f"Site file is empty: {site_file}")

    try:
        ints = [int(tok) for tok in tokens]
    except ValueError:
        raise ValueError(f"Site file contains a non-integer token: {site_file}") from None

    try:
        values = np.array(ints, dtype=np.int64)
    except OverflowError:
        raise ValueError(f"Site file contains an integer out of range: {site_file}") from None

    coords = values[1:]
    if len(coords) % 2 != 0:
        raise ValueError(
            f"Site file has a row without a column ({len(coords)} coordinates): {site_file}")

    return int(values[0]), coords.reshape(-1, 2)


def run_sites(
    n: int,
    sites: Union[np.ndarray, Sequence[Sequence[int]]],
    full_query: Optional[Tuple[int, int]] = None,
) -> Dict[str, Any]:
    """
    Open each site in order on a fresh n-by-n grid.

    Args:
        n: Grid side length
        sites: Sequence of (row, col) pairs
        full_query: Optional (row, col) to test with is_full() after all opens

    Returns:
        Dict with 'n', 'open_sites', 'percolates' and 'is_full'
        (None when no full_query was given)
    """
    grid = PercolationGrid(n)
    for row, col in sites:
        grid.open(int(row), int(col))

    is_full = None
    if full_query is not None:
        is_full = grid.is_full(int(full_query[0]), int(full_query[1]))

    return {
        'n': n,
        'open_sites': grid.number_of_open_sites(),
        'percolates': grid.percolates(),
        'is_full': is_full,
    }


def run_site_file(
    site_file: Union[str, Path],
    full_query: Optional[Tuple[int, int]] = None,
) -> Dict[str, Any]:
    """Read a site file and run it. See run_sites()."""
    n, sites = read_site_file(site_file)
    return run_sites(n, sites, full_query=full_query)


def read_job_list(job_list_file: Union[str, Path]) -> List[str]:
    """
    Read job list from a file.

    Args:
        job_list_file: Path to job list file (one job per line)

    Returns:
        List of job lines (stripped, non-empty, non-comment)
    """
    jobs = []
    with open(job_list_file, 'r') as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith('#'):
                jobs.append(line)
    return jobs


def process_percolation_chunk(
    chunk_file: Union[str, Path],
    input_base_dir: Union[str, Path],
    output_dir: Union[str, Path],
    full_query: Optional[Tuple[int, int]] = None,
) -> int:
    """
    Process a chunk of site files and save a .result file for each.

    This worker:
    1. Reads relative site file paths from the chunk file
    2. Replays each file on a fresh grid
    3. Saves {output_dir}/{relative path}.result mirroring the input tree

    Args:
        chunk_file: Path to chunk file containing list of site file paths
        input_base_dir: Base directory the listed paths are relative to
        output_dir: Output directory for .result files
        full_query: Optional (row, col) is_full() query applied to every file

    Returns:
        Number of files processed
    """
    input_base_dir = Path(input_base_dir)
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    site_files = read_job_list(chunk_file)
    print(f"Processing {len(site_files)} files from chunk...")

    processed = 0

    for site_file_rel in site_files:
        site_file = input_base_dir / site_file_rel

        if not site_file.exists():
            print(f"  Skipping missing file: {site_file_rel}")
            continue

        try:
            result = run_site_file(site_file, full_query=full_query)
        except Exception as e:
            print(f"  ERROR processing {site_file_rel}: {e}")
            continue

        result_file = output_dir / result_path_for(site_file_rel)
        write_result_file(result, result_file)
        processed += 1

    print(f"✓ Processed {processed}/{len(site_files)} files")
    return processed


def result_path_for(site_file_rel: Union[str, Path]) -> Path:
    """Relative .result path for a relative site file path (input name kept whole)."""
    return Path(f"{site_file_rel}.result")
