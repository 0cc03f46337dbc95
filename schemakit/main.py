"""schemakit CLI - Main entry point."""

import logging

import typer
from rich.console import Console
from .commands import schema, types
from .config import settings

app = typer.Typer(
    name="schemakit",
    help="Reflect database tables and generate DDL across SQL dialects",
    add_completion=False,
)

# Add subcommands
app.add_typer(schema.app, name="schema")
app.add_typer(types.app, name="type")

console = Console()


@app.command()
def config():
    """Show current configuration."""
    console.print("[bold]Current Configuration[/bold]")
    console.print(f"  Driver: {settings.driver}")
    console.print(f"  Database: {settings.database}")
    console.print(f"  Host: {settings.host or 'Not set'}")
    console.print(f"  Port: {settings.port or 'Not set'}")
    console.print(f"  User: {settings.username or 'Not set'}")
    console.print(f"  Password configured: {'Yes' if settings.password else 'No'}")
    console.print(f"  Schema: {settings.schema_name}")
    console.print(f"  Log level: {settings.log_level}")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log executed SQL"),
):
    """
    schemakit - Reflect database tables and generate DDL across SQL dialects.

    Examples:

        schemakit schema tables --driver sqlite --database app.db

        schemakit schema describe users

        schemakit schema ddl users --target mysql

        schemakit type convert "character varying(255)" --dialect postgres
    """
    level = logging.DEBUG if verbose else settings.log_level.upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


if __name__ == "__main__":
    app()
