"""Web server command."""

import click

from .base import ensure_initialized


@click.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to (default: 127.0.0.1)")
@click.option("--port", "-p", default=8000, type=int, help="Port to bind to (default: 8000)")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
@click.pass_context
def serve(ctx: click.Context, host: str, port: int, reload: bool):
    """Start the web server.

    Serves the JSON API under /api and the dashboard at /.

    Examples:

        fitlog serve

        fitlog serve --port 3000

        fitlog serve --reload
    """
    ensure_initialized(ctx)

    import uvicorn

    click.echo()
    click.echo(click.style("Starting fitlog web server...", fg="green"))
    click.echo(f"  Local:   http://{host}:{port}")
    click.echo("Press Ctrl+C to stop the server.")
    click.echo()

    if reload:
        uvicorn.run("fitlog.web:create_app", host=host, port=port, reload=True, factory=True)
    else:
        from ..web import create_app

        uvicorn.run(create_app(), host=host, port=port)
