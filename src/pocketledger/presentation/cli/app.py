"""PocketLedger CLI application using Typer.

Command-line utilities for operating the backend: secret generation,
database schema management and running the API server.
"""

import asyncio
import secrets
from typing import Optional

import typer
import uvicorn
from rich.console import Console

from pocketledger.infrastructure.persistence.sqlalchemy.init_db import (
    create_tables,
    drop_tables,
)
from pocketledger_config.settings import get_settings

app = typer.Typer(
    name="pocketledger",
    help="PocketLedger - personal finance tracking backend CLI",
    no_args_is_help=True,
)
console = Console()


secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)

db_app = typer.Typer(
    name="db",
    help="Database schema management",
    no_args_is_help=True,
)
app.add_typer(db_app)


def _database_display(database_url: str) -> str:
    """Strip credentials from a connection string."""
    return database_url.split("@")[-1] if "@" in database_url else database_url


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for PocketLedger configuration.

    Copy the output to your .env file.
    """
    console.print("\n[bold green]PocketLedger Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n",
    )

    # 64 bytes of entropy for HS256 signing
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={jwt_secret}")

    db_password = secrets.token_urlsafe(32)
    console.print(f"[cyan]POSTGRES_PASSWORD[/cyan]={db_password}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep these secrets secure and never commit them "
        "to version control![/yellow]",
    )
    console.print(
        "[dim]Copy the above values to your config/.env (Docker) or "
        "config/.env.dev (local) file.[/dim]\n",
    )


@db_app.command("init")
def db_init() -> None:
    """Create all missing tables (existing data is left untouched)."""
    settings = get_settings()
    console.print(f"Database: [cyan]{_database_display(settings.database_url)}[/cyan]")

    asyncio.run(create_tables())
    console.print("[green]Database initialized successfully![/green]")


@db_app.command("reset")
def db_reset(
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Skip the confirmation prompt",
    ),
) -> None:
    """Drop and recreate all tables (DELETES ALL DATA)."""
    settings = get_settings()
    console.print(f"Database: [cyan]{_database_display(settings.database_url)}[/cyan]")

    if not force:
        console.print("[bold red]WARNING: This will DELETE ALL DATA![/bold red]")
        typer.confirm("Continue?", abort=True)

    asyncio.run(drop_tables())
    asyncio.run(create_tables())
    console.print("[green]Database recreated successfully![/green]")


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (default: API_HOST)"),
    port: Optional[int] = typer.Option(None, help="Port (default: API_PORT)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the API server with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "pocketledger.presentation.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
