"""Identity account CLI commands."""

import typer
from rich.console import Console
from rich.table import Table
from sqlalchemy.exc import IntegrityError

from src.bookstore.core.services import DbSessionService
from src.bookstore.core.services.auth.seed import create_identity, seed_identities
from src.bookstore.entities.core.identity import IdentityRepository
from src.bookstore.runtime.context import get_config

console = Console()

# Create the users subcommand app
users_app = typer.Typer(help="👤 Manage login accounts")


@users_app.command("add")
def add_user(
    username: str = typer.Argument(..., help="Username for the new account"),
    email: str = typer.Option(..., "--email", "-e", help="Email address (token subject)"),
    password: str = typer.Option(
        ..., "--password", "-p", prompt=True, hide_input=True, confirmation_prompt=True
    ),
    roles: list[str] = typer.Option(
        ["Customer"], "--role", "-r", help="Role to grant; repeat for several"
    ),
) -> None:
    """Add a new login account."""
    config = get_config()
    database_service = DbSessionService(config.database)
    try:
        with database_service.session_scope() as session:
            exists = IdentityRepository(session).find_by_username(username) is not None
            user = None if exists else create_identity(
                session,
                username=username,
                email=email,
                password=password,
                roles=roles,
                bcrypt_rounds=config.security.bcrypt_rounds,
            )
    except IntegrityError as e:
        console.print(f"[red]❌ Failed to add user: {type(e).__name__}[/red]")
        raise typer.Exit(code=1) from e
    finally:
        database_service.dispose()

    if user is None:
        console.print(f"[red]❌ User '{username}' already exists[/red]")
        raise typer.Exit(code=1)

    table = Table(title="Created account")
    table.add_column("ID", style="cyan")
    table.add_column("Username", style="green")
    table.add_column("Email", style="blue")
    table.add_column("Roles", style="magenta")
    table.add_row(user.id, user.username, user.email, ", ".join(user.roles))
    console.print(table)


@users_app.command("seed")
def seed_users() -> None:
    """Create the configured roles and administrator account."""
    config = get_config()
    database_service = DbSessionService(config.database)
    try:
        with database_service.session_scope() as session:
            created = seed_identities(
                session, config.seed, bcrypt_rounds=config.security.bcrypt_rounds
            )
    finally:
        database_service.dispose()

    if created:
        console.print(f"[green]✅ Seeded admin account {config.seed.admin_username}[/green]")
    else:
        console.print("[yellow]Roles ensured; no admin account created[/yellow]")
