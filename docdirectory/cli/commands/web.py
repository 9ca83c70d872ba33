"""
Web API server command.

Starts the FastAPI server with uvicorn and watches the data file for changes.
"""
import os

import click
import uvicorn


@click.command()
@click.option(
    '--host',
    default='127.0.0.1',
    help='Host to bind to (default: 127.0.0.1)'
)
@click.option(
    '--port',
    type=int,
    default=5000,
    help='Port to bind to (default: 5000)'
)
@click.option(
    '--reload',
    is_flag=True,
    help='Auto-reload on code changes'
)
@click.option(
    '--no-watch',
    is_flag=True,
    help='Disable reloading the data file when it changes'
)
@click.pass_context
def web(ctx, host, port, reload, no_watch):
    """
    Start the directory API server.

    Serves the doctor listing, search and filter endpoints under /api and
    reloads the data file whenever it changes on disk.
    """
    if ctx.obj.data_path:
        os.environ['DOCDIR_DATA_PATH'] = str(ctx.obj.data_path)

    os.environ['DOCDIR_WATCH'] = 'false' if no_watch else 'true'

    click.echo(f"Starting directory server on http://{host}:{port}")
    if reload:
        click.echo("  Auto-reload: enabled (server restarts on code changes)")
    if not no_watch:
        click.echo("  File watching: enabled (data file changes reloaded)")
    else:
        click.echo("  File watching: disabled")
    click.echo("\nPress Ctrl+C to stop\n")

    uvicorn.run(
        "docdirectory.api.main:app",
        host=host,
        port=port,
        reload=reload
    )
