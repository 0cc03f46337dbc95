"""Backend independent table model and per-backend schema dialects.

Dialects reflect live table structure into ``Table`` objects and
render ``Table`` objects back into CREATE TABLE statements for
Postgres, MySQL and SQLite.
"""

from .column_types import ColumnType, IndexType, Expression, COLUMN_KEYS, INDEX_KEYS
from .table import Table
from .base import SchemaDialect
from .postgres import PostgresSchema
from .mysql import MysqlSchema
from .sqlite import SqliteSchema
from .collection import Collection

__all__ = [
    # Type registry
    "ColumnType",
    "IndexType",
    "Expression",
    "COLUMN_KEYS",
    "INDEX_KEYS",
    # Table model
    "Table",
    # Dialects
    "SchemaDialect",
    "PostgresSchema",
    "MysqlSchema",
    "SqliteSchema",
    # Reflection
    "Collection",
]
