"""Column type conversion commands."""

import typer
from rich.console import Console
from rich.table import Table

from ..database import get_driver
from ..errors import ParseError

app = typer.Typer(help="Inspect native to abstract type conversion")
console = Console()


@app.command("convert")
def convert_type(
    native: str = typer.Argument(..., help="Native column type, e.g. 'varchar(255)'"),
    dialect: str = typer.Option("postgres", "--dialect", "-d", help="Dialect that parses the type"),
):
    """Convert a native column type to its abstract definition."""
    try:
        field = get_driver(dialect).schema_dialect().convert_column(native)
    except (ParseError, ValueError) as e:
        console.print(f"[red]Error converting type: {e}[/red]")
        raise typer.Exit(1)

    table = Table(title=f"{native} ({dialect})")
    table.add_column("Attribute", style="cyan")
    table.add_column("Value", style="green")
    for key, value in field.items():
        table.add_row(key, str(value))
    console.print(table)
