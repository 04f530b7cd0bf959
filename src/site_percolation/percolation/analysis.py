"""
Percolation result utilities.

Includes report formatting for a single run and aggregation of .result
files written by chunk workers.
"""

import pandas as pd
from pathlib import Path
from typing import Any, Dict, List, Union


def format_report(result: Dict[str, Any]) -> List[str]:
    """
    Format a run result as report lines.

    Args:
        result: Dict from run_sites()

    Returns:
        Lines: open site count, percolation verdict and, if queried,
        the is_full answer as 'true'/'false'
    """
    lines = [f"{result['open_sites']} open sites"]
    lines.append("percolates" if result['percolates'] else "does not percolate")
    if result.get('is_full') is not None:
        lines.append("true" if result['is_full'] else "false")
    return lines


def write_result_file(result: Dict[str, Any], result_file: Union[str, Path]) -> Path:
    """
    Save a run result as a single tab-separated line.

    Format: open_sites\\tpercolates[\\tis_full]
    """
    result_file = Path(result_file)
    result_file.parent.mkdir(parents=True, exist_ok=True)

    fields = [str(result['open_sites']), str(bool(result['percolates']))]
    if result.get('is_full') is not None:
        fields.append(str(bool(result['is_full'])))

    with open(result_file, 'w') as f:
        f.write('\t'.join(fields) + '\n')
    return result_file


def _parse_bool(value: str) -> bool:
    if value == 'True':
        return True
    if value == 'False':
        return False
    raise ValueError(f"Expected True or False, got {value!r}")


def read_result_file(result_file: Union[str, Path]) -> Dict[str, Any]:
    """Load a result saved by write_result_file()."""
    with open(result_file, 'r') as f:
        line = f.read().strip()

    parts = line.split('\t')
    if len(parts) not in (2, 3):
        raise ValueError(f"Malformed result file: {result_file}")

    return {
        'open_sites': int(parts[0]),
        'percolates': _parse_bool(parts[1]),
        'is_full': _parse_bool(parts[2]) if len(parts) == 3 else None,
    }


def aggregate_result_files_to_csv(
    base_dir: Union[str, Path],
    output_csv: Union[str, Path],
) -> pd.DataFrame:
    """
    Aggregate .result files into a CSV.

    Args:
        base_dir: Base directory containing .result files (searched recursively)
        output_csv: Output CSV file path

    Returns:
        DataFrame with columns input, open_sites, percolates, is_full
    """
    base_dir = Path(base_dir)
    output_csv = Path(output_csv)

    result_files = sorted(base_dir.rglob("*.result"))
    print(f"Found {len(result_files)} .result files")

    if not result_files:
        print("No .result files found")
        return pd.DataFrame()

    rows = []
    failed_count = 0

    for result_file in result_files:
        try:
            result = read_result_file(result_file)
        except ValueError:
            failed_count += 1
            continue

        result['input'] = str(result_file.relative_to(base_dir).with_suffix(''))
        rows.append(result)

    if failed_count:
        print(f"  Skipped {failed_count} empty or malformed .result files")

    df = pd.DataFrame(rows, columns=['input', 'open_sites', 'percolates', 'is_full'])

    output_csv.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_csv, index=False)
    print(f"Saved {len(df)} results to {output_csv}")

    n_perc = int(df['percolates'].sum()) if len(df) else 0
    print(f"  {n_perc}/{len(df)} inputs percolate")

    return df
