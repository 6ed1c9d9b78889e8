"""API server command."""

import typer
import uvicorn
from rich.console import Console
from rich.panel import Panel

from src.bookstore.runtime.context import get_config

console = Console()


def serve(
    host: str | None = typer.Option(None, help="Host to bind (defaults to app.host)"),
    port: int | None = typer.Option(None, help="Port to bind (defaults to app.port)"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
) -> None:
    """🚀 Start the API server."""
    config = get_config()
    console.print(
        Panel.fit(
            f"[bold green]Starting {config.app.name}[/bold green]",
            border_style="green",
        )
    )
    uvicorn.run(
        "src.bookstore.api.http.app:app",
        host=host or config.app.host,
        port=port or config.app.port,
        reload=reload,
        access_log=False,  # Access logging happens in middleware
    )
