"""CLI entrypoint for scriptcache."""

import logging
import sys

import click

from . import __version__


@click.group()
@click.version_option(__version__, prog_name="scriptcache")
@click.option("--verbose", is_flag=True, help="Log migration decisions to stderr")
def cli(verbose: bool) -> None:
    """scriptcache - inspect and migrate the script runner's cache directories."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command()
@click.option(
    "--json",
    "output_json",
    is_flag=True,
    help="Output results as JSON",
)
def dirs(output_json: bool) -> None:
    """Show where caches and configuration are kept."""
    from .commands.cache_cmd import run_dirs

    sys.exit(run_dirs(output_json=output_json))


@cli.command()
@click.option(
    "--dry-run",
    is_flag=True,
    help="Report what would be moved without touching anything",
)
@click.option(
    "--json",
    "output_json",
    is_flag=True,
    help="Output results as JSON",
)
def migrate(dry_run: bool, output_json: bool) -> None:
    """Move caches from the pre-0.2.0 layout into the current one.

    Safe to run repeatedly. A cache that already exists at its new location
    is never overwritten; both copies are left for you to reconcile.
    """
    from .commands.cache_cmd import run_migrate

    sys.exit(run_migrate(dry_run=dry_run, output_json=output_json))


def main() -> None:
    """Main entrypoint."""
    cli()


if __name__ == "__main__":
    main()
