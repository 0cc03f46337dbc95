"""Schema reflection commands."""

import typer
from typing import Optional
from rich.console import Console
from rich.table import Table as RichTable

from ..config import settings
from ..database import Connection, get_driver
from ..errors import SchemaError

app = typer.Typer(help="Reflect tables and generate DDL")
console = Console()

DriverOption = typer.Option(None, "--driver", "-d", help="Database driver (default: SCHEMAKIT_DRIVER)")
DatabaseOption = typer.Option(None, "--database", "-b", help="Database name or SQLite file (default: SCHEMAKIT_DATABASE)")


def _display(value) -> str:
    return "" if value is None else str(value)


@app.command("tables")
def list_tables(
    driver: Optional[str] = DriverOption,
    database: Optional[str] = DatabaseOption,
):
    """List tables in the database."""
    try:
        with Connection.from_settings(settings, driver, database) as connection:
            tables = connection.schema_collection().list_tables()
    except (SchemaError, ValueError, ImportError) as e:
        console.print(f"[red]Error listing tables: {e}[/red]")
        raise typer.Exit(1)

    if not tables:
        console.print("[yellow]No tables found.[/yellow]")
        return
    for name in tables:
        console.print(name)


@app.command("describe")
def describe_table(
    table_name: str = typer.Argument(..., help="Table to describe"),
    driver: Optional[str] = DriverOption,
    database: Optional[str] = DatabaseOption,
):
    """Show the abstract columns and indexes of a table."""
    try:
        with Connection.from_settings(settings, driver, database) as connection:
            table = connection.schema_collection().describe(table_name)
    except (SchemaError, ValueError, ImportError) as e:
        console.print(f"[red]Error describing table: {e}[/red]")
        raise typer.Exit(1)

    columns = RichTable(title=f"Columns of {table.name}")
    columns.add_column("Name", style="cyan")
    columns.add_column("Type", style="green")
    columns.add_column("Length")
    columns.add_column("Null")
    columns.add_column("Default")
    columns.add_column("Fixed")
    columns.add_column("Comment")
    for name in table.columns():
        data = table.column(name)
        columns.add_row(
            name,
            data["type"],
            _display(data["length"]),
            _display(data["null"]),
            _display(data["default"]),
            _display(data["fixed"]),
            _display(data["comment"]),
        )
    console.print(columns)

    if table.indexes():
        indexes = RichTable(title=f"Indexes of {table.name}")
        indexes.add_column("Name", style="cyan")
        indexes.add_column("Type", style="green")
        indexes.add_column("Columns")
        for name in table.indexes():
            data = table.index(name)
            indexes.add_row(name, data["type"], ", ".join(data["columns"]))
        console.print(indexes)


@app.command("ddl")
def table_ddl(
    table_name: str = typer.Argument(..., help="Table to reflect"),
    target: Optional[str] = typer.Option(
        None,
        "--target",
        "-t",
        help="Driver to generate SQL for (default: the source driver)"
    ),
    driver: Optional[str] = DriverOption,
    database: Optional[str] = DatabaseOption,
):
    """Reflect a table and print its CREATE TABLE statement."""
    try:
        with Connection.from_settings(settings, driver, database) as connection:
            table = connection.schema_collection().describe(table_name)
            output = connection
            if target:
                output = Connection(get_driver(target), connection.config)
                if output.driver.name != connection.driver.name:
                    # Collations and character sets are named per backend.
                    table.drop_column_attribute("collate").drop_column_attribute("charset")
            sql = table.create_table_sql(output)
    except (SchemaError, ValueError, ImportError) as e:
        console.print(f"[red]Error generating DDL: {e}[/red]")
        raise typer.Exit(1)

    console.print(sql, markup=False, highlight=False)
