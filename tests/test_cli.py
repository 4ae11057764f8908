"""Tests for the command-line interface."""

import pytest
import yaml
from click.testing import CliRunner

from site_percolation import __version__
from site_percolation.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


class TestInfo:
    """Tests for info and version output."""

    def test_info(self, runner):
        result = runner.invoke(cli, ['info'])

        assert result.exit_code == 0
        assert result.output.splitlines()[0] == "Percolation"

    def test_version(self, runner):
        result = runner.invoke(cli, ['--version'])

        assert result.exit_code == 0
        assert __version__ in result.output


class TestOpen:
    """Tests for the open command."""

    def test_percolating_column(self, runner):
        result = runner.invoke(cli, ['open', '--size', '2', '--site', '1,1', '--site', '2,1'])

        assert result.exit_code == 0
        assert "Open sites: 2" in result.output
        assert "Percolates: True" in result.output
        assert "Full sites: (1,1) (2,1)" in result.output

    def test_no_sites(self, runner):
        result = runner.invoke(cli, ['open', '-n', '3'])

        assert result.exit_code == 0
        assert "Open sites: 0" in result.output
        assert "Percolates: False" in result.output
        assert "Full sites: none" in result.output

    @pytest.mark.parametrize("site", ["1", "1-1", "a,b", "1,2,3"])
    def test_bad_site_syntax(self, runner, site):
        result = runner.invoke(cli, ['open', '--size', '2', '--site', site])

        assert result.exit_code == 2

    def test_out_of_range_site(self, runner):
        result = runner.invoke(cli, ['open', '--size', '2', '--site', '3,1'])

        assert result.exit_code == 2
        assert "outside the grid" in result.output

    def test_invalid_size(self, runner):
        result = runner.invoke(cli, ['open', '--size', '0'])

        assert result.exit_code == 2
        assert "n needs to be > 0" in result.output


class TestRun:
    """Tests for the run command."""

    def test_run_scenarios(self, runner, tmp_path):
        path = tmp_path / "column.yaml"
        path.write_text(yaml.safe_dump({'size': 2, 'open_sites': [[1, 2], [2, 2]]}))

        result = runner.invoke(cli, ['run', '--config', str(path)])

        assert result.exit_code == 0
        assert "column: n=2 open=2 percolates=True" in result.output

    def test_failed_scenario_exit_code(self, runner, tmp_path):
        good = tmp_path / "good.yaml"
        good.write_text(yaml.safe_dump({'size': 1, 'open_sites': []}))
        bad = tmp_path / "bad.yaml"
        bad.write_text(yaml.safe_dump({'size': 1}))

        result = runner.invoke(cli, ['run', '-c', str(good), '-c', str(bad)])

        assert result.exit_code == 1
        assert "good: n=1 open=0 percolates=False" in result.output
        assert "ERROR processing" in result.output
