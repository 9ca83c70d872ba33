"""
Miscellaneous CLI commands (info).
"""
import sys

import click

from docdirectory.core.search import get_filter_options


@click.command()
@click.pass_context
def info(ctx):
    """Show information about the data file and directory stats."""
    store = ctx.obj.get_store()
    data_file = store.data_path

    click.echo(f"Python: {sys.version}")
    click.echo(f"Platform: {sys.platform}")

    if not data_file.exists():
        click.echo(f"\nData file: {data_file} (not found)")
        click.echo("  Set DOCDIR_DATA_PATH or pass --data-path to point at doctors.json.")
        return

    click.echo(f"\nData file: {data_file}")
    click.echo(f"  Size: {data_file.stat().st_size / 1024:.1f} KB")

    try:
        doctors = store.list_doctors()
    except ValueError as e:
        click.secho(f"  Error reading data file: {e}", fg='yellow')
        return

    options = get_filter_options(doctors)
    click.echo("\nDirectory Statistics:")
    click.echo(f"  Doctors: {len(doctors)}")
    click.echo(f"  Specialties: {len(options.specialties)}")
    click.echo(f"  States: {len(options.states)}")
    if store.load_errors:
        click.secho(f"  Skipped invalid entries: {store.load_errors}", fg='yellow')
