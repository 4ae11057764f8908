"""Scenario definition and execution."""

from .scenario import ScenarioConfig, run_scenario, process_scenario_files

__all__ = ['ScenarioConfig', 'run_scenario', 'process_scenario_files']
