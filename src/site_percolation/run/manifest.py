"""
Run configuration and manifest generation.

The RunConfig loads a YAML run definition. The RunManifest computes
the set of expected .result files and checks progress against actual files.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from ..percolation.worker import result_path_for


class RunConfig:
    """
    Loads and validates a run configuration YAML.

    Example:
        config = RunConfig.from_yaml('config/run_demo.yaml')
        print(config.run_name)
        print(config.input_dir, config.pattern)
    """

    def __init__(self, data: Dict[str, Any]):
        self._data = data
        self._validate()

    @classmethod
    def from_yaml(cls, path: str) -> 'RunConfig':
        """Load run config from YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Run config not found: {path}")

        with open(path, 'r') as f:
            data = yaml.safe_load(f)

        return cls(data)

    def _validate(self):
        """Validate required config sections."""
        if not isinstance(self._data, dict):
            raise ValueError("Run config must be a mapping")

        required_sections = ['run_name', 'input', 'output']
        for section in required_sections:
            if section not in self._data:
                raise ValueError(f"Missing required config section: '{section}'")

        for section in ['input', 'output']:
            if not isinstance(self._data[section], dict):
                raise ValueError(f"Config section '{section}' must be a mapping")
        if not isinstance(self._data.get('query') or {}, dict):
            raise ValueError("Config section 'query' must be a mapping")

        if 'base_dir' not in self._data['input']:
            raise ValueError("Missing required config key: 'input.base_dir'")
        if 'base_dir' not in self._data['output']:
            raise ValueError("Missing required config key: 'output.base_dir'")

        # Fail early on a malformed query
        self.full_query

    # --- Properties ---

    @property
    def run_name(self) -> str:
        return self._data['run_name']

    @property
    def description(self) -> str:
        return self._data.get('description', '')

    # --- Input ---

    @property
    def input_dir(self) -> Path:
        return Path(self._data['input']['base_dir'])

    @property
    def pattern(self) -> str:
        return self._data['input'].get('pattern', '**/*.txt')

    # --- Output paths ---

    @property
    def base_dir(self) -> Path:
        return Path(self._data['output']['base_dir'])

    @property
    def results_dir(self) -> Path:
        return self.base_dir / self._data['output'].get('results_dir', 'results')

    @property
    def scores_csv(self) -> Path:
        return self.base_dir / self._data['output'].get('scores_csv', 'results.csv')

    @property
    def job_list_file(self) -> Path:
        return self.base_dir / 'jobs.txt'

    # --- Query ---

    @property
    def full_query(self) -> Optional[Tuple[int, int]]:
        """Optional (row, col) checked with is_full() after each run."""
        query = self._data.get('query') or {}
        full = query.get('full')
        if full is None:
            return None
        if (not isinstance(full, (list, tuple)) or len(full) != 2
                or not all(isinstance(v, int) and not isinstance(v, bool) for v in full)):
            raise ValueError(f"query.full must be a [row, col] pair of integers, got {full!r}")
        return int(full[0]), int(full[1])


class RunManifest:
    """
    Computes the expected outputs from a RunConfig.

    Example:
        config = RunConfig.from_yaml('config/run_demo.yaml')
        manifest = RunManifest(config)
        print(manifest.summary())
    """

    def __init__(self, config: RunConfig):
        self.config = config

    def input_files(self) -> List[str]:
        """Site files matching the config pattern, relative to the input dir."""
        input_dir = self.config.input_dir
        if not input_dir.exists():
            raise FileNotFoundError(f"Input directory not found: {input_dir}")

        files = [p for p in input_dir.glob(self.config.pattern) if p.is_file()]
        return sorted(str(p.relative_to(input_dir)) for p in files)

    def expected_outputs(self) -> List[str]:
        return [str(result_path_for(f)) for f in self.input_files()]

    def pending_inputs(self) -> List[str]:
        """Inputs whose .result file does not exist yet."""
        results_dir = self.config.results_dir
        return [f for f in self.input_files()
                if not (results_dir / result_path_for(f)).exists()]

    def write_job_list(self, pending_only: bool = False) -> Path:
        """Write inputs (or only pending ones) to the run's job list file."""
        jobs = self.pending_inputs() if pending_only else self.input_files()
        job_list_file = self.config.job_list_file
        job_list_file.parent.mkdir(parents=True, exist_ok=True)

        with open(job_list_file, 'w') as f:
            for job in jobs:
                f.write(job + '\n')

        print(f"Created job list with {len(jobs)} jobs: {job_list_file}")
        return job_list_file

    def summary(self) -> Dict[str, Any]:
        expected = len(self.input_files())
        pending = len(self.pending_inputs())
        completed = expected - pending
        return {
            'run_name': self.config.run_name,
            'expected': expected,
            'completed': completed,
            'pending': pending,
            'pct': 100.0 * completed / expected if expected else 0.0,
        }
