"""Database maintenance commands."""

import typer
from rich.console import Console

from src.bookstore.core.services import DbSessionService
from src.bookstore.runtime.context import get_config

console = Console()

db_app = typer.Typer(help="🗄️  Database commands")


@db_app.command("init")
def init_db() -> None:
    """Create every table that does not exist yet."""
    config = get_config()
    database_service = DbSessionService(config.database)
    try:
        database_service.create_all()
    finally:
        database_service.dispose()
    console.print(f"[green]✅ Tables created in {config.database.url}[/green]")
