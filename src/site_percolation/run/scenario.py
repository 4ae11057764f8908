"""
Scenario configuration and execution.

A ScenarioConfig loads a YAML file describing a grid size and the sites to
open, in order. run_scenario() applies it to a fresh Percolation grid and
summarizes the result.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Iterable, List, Tuple, Union

from ..percolation import Percolation


class ScenarioConfig:
    """
    Loads and validates a site-opening scenario.

    Example:
        config = ScenarioConfig.from_yaml('scenarios/column_one.yaml')
        print(config.size)
        print(config.open_sites)
    """

    def __init__(self, data: Dict[str, Any], default_name: str = 'scenario'):
        if not isinstance(data, dict):
            raise ValueError("Scenario config must be a mapping")
        self._data = data
        self._default_name = default_name
        self._validate()

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> 'ScenarioConfig':
        """Load scenario config from YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Scenario config not found: {path}")

        with open(path, 'r') as f:
            data = yaml.safe_load(f)

        return cls(data, default_name=path.stem)

    def _validate(self):
        """Validate required config sections."""
        required_sections = ['size', 'open_sites']
        for section in required_sections:
            if section not in self._data:
                raise ValueError(f"Missing required config section: '{section}'")

        size = self._data['size']
        if isinstance(size, bool) or not isinstance(size, int):
            raise ValueError(f"'size' must be an integer, got {size!r}")

        if not isinstance(self._data['open_sites'], list):
            raise ValueError("'open_sites' must be a list of [row, col] pairs")

        self._open_sites = self._parse_sites(self._data['open_sites'])

    @staticmethod
    def _parse_sites(entries: List[Any]) -> List[Tuple[int, int]]:
        sites = []
        for i, entry in enumerate(entries):
            if (not isinstance(entry, (list, tuple)) or len(entry) != 2
                    or not all(isinstance(v, int) and not isinstance(v, bool) for v in entry)):
                raise ValueError(
                    f"open_sites[{i}] must be a [row, col] pair of integers, got {entry!r}"
                )
            sites.append((entry[0], entry[1]))
        return sites

    # --- Properties ---

    @property
    def name(self) -> str:
        return self._data.get('name', self._default_name)

    @property
    def description(self) -> str:
        return self._data.get('description', '')

    @property
    def size(self) -> int:
        return self._data['size']

    @property
    def open_sites(self) -> List[Tuple[int, int]]:
        return list(self._open_sites)


def run_scenario(config: ScenarioConfig) -> Dict[str, Any]:
    """
    Open every site of a scenario on a fresh grid.

    Args:
        config: Scenario to run

    Returns:
        Dict with the outcome:
            {
                'name': str,
                'size': int,
                'open_sites': int,
                'percolates': bool,
                'full_sites': List[Tuple[int, int]],
            }
    """
    grid = Percolation(config.size)
    for row, col in config.open_sites:
        grid.open(row, col)

    return {
        'name': config.name,
        'size': grid.size,
        'open_sites': grid.number_of_open_sites(),
        'percolates': grid.percolates(),
        'full_sites': grid.full_sites(),
    }


def process_scenario_files(paths: Iterable[Union[str, Path]]) -> List[Dict[str, Any]]:
    """
    Run a batch of scenario files.

    Files that fail to load or run are reported and skipped.

    Args:
        paths: Scenario YAML files

    Returns:
        Summaries of the scenarios that ran, in input order
    """
    paths = [Path(p) for p in paths]
    print(f"Processing {len(paths)} scenario files...")

    results = []
    for path in paths:
        try:
            config = ScenarioConfig.from_yaml(path)
            results.append(run_scenario(config))
        except (FileNotFoundError, ValueError, IndexError, yaml.YAMLError) as e:
            print(f"  ERROR processing {path}: {e}")
            continue

    print(f"Processed {len(results)}/{len(paths)} scenarios")
    return results
