"""Reflect tables from a live database into Table objects."""

import logging
from typing import List

from ..errors import ReflectionError
from .table import Table

logger = logging.getLogger(__name__)


class Collection:
    """Represents the tables of a database reached through a connection.

    The connection must expose ``driver.schema_dialect()``, ``config``
    and ``execute(sql, params)`` returning rows as dicts.
    """

    def __init__(self, connection):
        self._connection = connection
        self._dialect = connection.driver.schema_dialect()

    def list_tables(self) -> List[str]:
        """Get the names of the tables in the configured schema."""
        sql, params = self._dialect.list_tables_sql(self._connection.config)
        rows = self._connection.execute(sql, params)
        tables = [row['name'] for row in rows]
        logger.debug("Found %d tables", len(tables))
        return tables

    def describe(self, name: str) -> Table:
        """Reflect a single table.

        Args:
            name: The table name

        Returns:
            Table populated with the reflected columns and primary key

        Raises:
            ReflectionError: If the table has no columns (or does not exist)
        """
        sql, params = self._dialect.describe_table_sql(name, self._connection.config)
        rows = self._connection.execute(sql, params)
        if not rows:
            raise ReflectionError(
                f"Cannot describe {name}. It has 0 columns.",
                details={"table": name},
            )

        table = Table(name)
        field_params = self._dialect.extra_schema_columns()
        for row in rows:
            self._dialect.convert_field_description(table, row, field_params)
        self._dialect.order_primary_key(table, rows)
        logger.debug("Described %s with %d columns", name, len(table.columns()))
        return table

    def describe_all(self) -> List[Table]:
        """Reflect every table returned by list_tables."""
        return [self.describe(name) for name in self.list_tables()]
