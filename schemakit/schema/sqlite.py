"""SQLite schema dialect."""

from typing import Any, Dict, List, Tuple

from .base import SchemaDialect
from .column_types import ColumnType
from .table import Table


class SqliteSchema(SchemaDialect):
    """Schema dialect for SQLite.

    Columns are read through the ``pragma_table_info`` table-valued
    function so the table name can be bound as a parameter and the rows
    can be aliased to the shared describe row shape.
    """

    TYPE_MAP = {
        ColumnType.INTEGER.value: 'INTEGER',
        ColumnType.BIGINTEGER.value: 'BIGINT',
        ColumnType.TEXT.value: 'TEXT',
        ColumnType.DECIMAL.value: 'DECIMAL',
        ColumnType.FLOAT.value: 'FLOAT',
        ColumnType.BINARY.value: 'BLOB',
        ColumnType.DATE.value: 'DATE',
        ColumnType.TIME.value: 'TIME',
        ColumnType.DATETIME.value: 'DATETIME',
        ColumnType.BOOLEAN.value: 'BOOLEAN',
    }

    def list_tables_sql(self, config) -> Tuple[str, List[Any]]:
        sql = (
            "SELECT name FROM sqlite_master WHERE type = 'table' "
            "AND name NOT LIKE 'sqlite_%' ORDER BY name"
        )
        return sql, []

    def describe_table_sql(self, table: str, config) -> Tuple[str, List[Any]]:
        # Columns declared without a type have BLOB affinity.
        sql = """SELECT name, COALESCE(NULLIF(type, ''), 'BLOB') AS type,
    CASE WHEN "notnull" = 0 THEN 'YES' ELSE 'NO' END AS "null",
    dflt_value AS "default", cid + 1 AS position, pk
FROM pragma_table_info(?)
ORDER BY position"""
        return sql, [table]

    def convert_column(self, column: str) -> Dict[str, Any]:
        col, length, _ = self._parse_type(column)

        if col in ('bigint', 'unsigned big int'):
            return {'type': ColumnType.BIGINTEGER.value, 'length': length}
        if col == 'blob':
            return {'type': ColumnType.BINARY.value, 'length': None}
        if col in ('date', 'time'):
            return {'type': col, 'length': None}
        if col in ('timestamp', 'datetime'):
            return {'type': ColumnType.DATETIME.value, 'length': None}
        if 'decimal' in col or 'numeric' in col:
            return {'type': ColumnType.DECIMAL.value, 'length': None}
        if 'bool' in col:
            return {'type': ColumnType.BOOLEAN.value, 'length': None}
        if 'int' in col:
            return {'type': ColumnType.INTEGER.value, 'length': length}
        if col in ('char', 'character'):
            return {'type': ColumnType.STRING.value, 'fixed': True, 'length': length}
        if 'char' in col:
            return {'type': ColumnType.STRING.value, 'length': length}
        if col in ('float', 'real') or col.startswith('double'):
            return {'type': ColumnType.FLOAT.value, 'length': None}
        return {'type': ColumnType.TEXT.value, 'length': None}

    def index_sql(self, table: Table, name: str) -> str:
        data = table.index(name)
        if data['type'] == Table.INDEX_PRIMARY:
            return 'PRIMARY KEY ' + self._index_columns(data)
        if data['type'] == Table.INDEX_UNIQUE:
            return (
                f"CONSTRAINT {self._driver.quote_identifier(name)} UNIQUE "
                + self._index_columns(data)
            )
        raise self._unsupported_index(table, name, data)

    def _normalize_default(self, default: Any) -> Any:
        """dflt_value holds SQL text, so string literals keep their quotes."""
        if not isinstance(default, str):
            return default
        if default.upper() == 'NULL':
            return None
        if len(default) >= 2 and default[0] == default[-1] == "'":
            return default[1:-1].replace("''", "'")
        return super()._normalize_default(default)
