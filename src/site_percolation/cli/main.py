"""
Command-line interface for site_percolation.

Commands:
    percolation info
    percolation open --size 3 --site 1,1 --site 2,1 --site 3,1
    percolation run  --config scenario.yaml [--config other.yaml ...]
"""

import click

from .. import __version__


def _parse_site(ctx, param, values):
    """Turn repeated 'ROW,COL' option values into (row, col) tuples."""
    sites = []
    for value in values:
        parts = value.split(',')
        try:
            row, col = (int(p.strip()) for p in parts)
        except ValueError:
            raise click.BadParameter(f"expected ROW,COL, got '{value}'", ctx=ctx, param=param)
        sites.append((row, col))
    return sites


def _echo_summary(summary):
    click.echo(f"{summary['name']}: n={summary['size']} "
               f"open={summary['open_sites']} "
               f"percolates={summary['percolates']}")


@click.group()
@click.version_option(version=__version__)
def cli():
    """Site Percolation - incremental connectivity for n-by-n grids."""
    pass


@cli.command('info')
def info():
    """Print the package name and version."""
    click.echo("Percolation")
    click.echo(f"site_percolation {__version__}")


@cli.command('open')
@click.option('--size', '-n', required=True, type=int, help='Grid side length')
@click.option('--site', '-s', 'sites', multiple=True, callback=_parse_site,
              help='Site to open as ROW,COL (1-indexed, repeatable)')
def open_sites(size, sites):
    """Open sites on a fresh grid and report percolation."""
    from ..percolation import Percolation

    try:
        grid = Percolation(size)
        for row, col in sites:
            grid.open(row, col)
    except (ValueError, IndexError) as e:
        raise click.UsageError(str(e))

    click.echo(f"Open sites: {grid.number_of_open_sites()}")
    click.echo(f"Percolates: {grid.percolates()}")
    full = ' '.join(f"({r},{c})" for r, c in grid.full_sites())
    click.echo(f"Full sites: {full or 'none'}")


@cli.command('run')
@click.option('--config', '-c', 'config_paths', required=True, multiple=True,
              type=click.Path(exists=True), help='Scenario YAML file (repeatable)')
def run(config_paths):
    """Run scenario files and print a summary line for each."""
    from ..run import process_scenario_files

    results = process_scenario_files(config_paths)
    for summary in results:
        _echo_summary(summary)

    if len(results) < len(config_paths):
        raise SystemExit(1)


if __name__ == '__main__':
    cli()
