"""
Click-based command line interface for the doctor directory.
"""
import logging
from pathlib import Path
from typing import Optional

import click

from docdirectory import __version__
from docdirectory.cli.commands.misc import info
from docdirectory.cli.commands.search import facets, search, show
from docdirectory.cli.commands.web import web
from docdirectory.core.store import JsonDoctorStore


class CLIContext:
    """Shared state passed to every command via ``ctx.obj``."""

    def __init__(self, verbose: bool = False, data_path: Optional[Path] = None):
        self.verbose = verbose
        self.data_path = data_path
        self._store: Optional[JsonDoctorStore] = None

    def get_store(self) -> JsonDoctorStore:
        """Get (or lazily create) the doctor store for this invocation."""
        if self._store is None:
            self._store = JsonDoctorStore(self.data_path)
        return self._store


@click.group()
@click.version_option(__version__, prog_name="docdirectory")
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.option(
    '--data-path',
    type=click.Path(dir_okay=False),
    envvar='DOCDIR_DATA_PATH',
    help='Path to directory data file (default: OS-specific location)'
)
@click.pass_context
def cli(ctx, verbose, data_path):
    """Search and browse the doctor directory."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = CLIContext(verbose=verbose, data_path=Path(data_path) if data_path else None)


cli.add_command(search)
cli.add_command(facets)
cli.add_command(show)
cli.add_command(info)
cli.add_command(web)


def main():
    """Console script entry point."""
    return cli(obj=None)
