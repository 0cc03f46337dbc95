"""Postgres schema dialect."""

import re
from typing import Any, Dict, List, Tuple

from ..errors import DialectError
from .base import SchemaDialect
from .column_types import ColumnType, Expression
from .table import Table

# 'value'::character varying  ->  value
CAST_PATTERN = re.compile(r"^'(.*)'::[a-z ]+(?:\[\])?$", re.IGNORECASE | re.DOTALL)

TRUE_VALUES = (True, 1, '1', 'true', 't')
FALSE_VALUES = (False, 0, '0', 'false', 'f')


class PostgresSchema(SchemaDialect):
    """Schema dialect for Postgres."""

    DEFAULT_SCHEMA = 'public'

    TYPE_MAP = {
        ColumnType.INTEGER.value: 'INTEGER',
        ColumnType.BIGINTEGER.value: 'BIGINT',
        ColumnType.TEXT.value: 'TEXT',
        ColumnType.DECIMAL.value: 'DECIMAL',
        ColumnType.FLOAT.value: 'FLOAT',
        ColumnType.BINARY.value: 'BYTEA',
        ColumnType.DATE.value: 'DATE',
        ColumnType.TIME.value: 'TIME',
        ColumnType.DATETIME.value: 'TIMESTAMP',
        ColumnType.BOOLEAN.value: 'BOOLEAN',
    }

    def list_tables_sql(self, config) -> Tuple[str, List[Any]]:
        sql = (
            "SELECT table_name AS name FROM information_schema.tables "
            "WHERE table_schema = ? ORDER BY name"
        )
        return sql, [self._schema(config)]

    def describe_table_sql(self, table: str, config) -> Tuple[str, List[Any]]:
        sql = """SELECT DISTINCT table_schema AS schema, column_name AS name, data_type AS type,
    is_nullable AS null, column_default AS default, ordinal_position AS position,
    character_maximum_length AS char_length, character_octet_length AS oct_length,
    d.description AS comment, i.indisprimary = 't' AS pk
FROM information_schema.columns c
INNER JOIN pg_catalog.pg_namespace ns ON (ns.nspname = table_schema)
INNER JOIN pg_catalog.pg_class cl ON (cl.relnamespace = ns.oid AND cl.relname = table_name)
LEFT JOIN pg_catalog.pg_index i ON (i.indrelid = cl.oid AND i.indkey[0] = c.ordinal_position)
LEFT JOIN pg_catalog.pg_description d ON (cl.oid = d.objoid AND d.objsubid = c.ordinal_position)
WHERE table_name = ? AND table_schema = ? ORDER BY position"""
        return sql, [table, self._schema(config)]

    def convert_column(self, column: str) -> Dict[str, Any]:
        col, length, _ = self._parse_type(column)

        if col in ('date', 'time', 'boolean'):
            return {'type': col, 'length': None}
        if col.startswith('time '):
            return {'type': ColumnType.TIME.value, 'length': None}
        if 'timestamp' in col:
            return {'type': ColumnType.DATETIME.value, 'length': None}
        if col in ('serial', 'integer'):
            return {'type': ColumnType.INTEGER.value, 'length': 10}
        if col in ('bigserial', 'bigint'):
            return {'type': ColumnType.BIGINTEGER.value, 'length': 20}
        if col == 'smallint':
            return {'type': ColumnType.INTEGER.value, 'length': 5}
        if col == 'inet':
            return {'type': ColumnType.STRING.value, 'length': 39}
        if col == 'uuid':
            return {'type': ColumnType.STRING.value, 'fixed': True, 'length': 36}
        if col in ('char', 'character'):
            return {'type': ColumnType.STRING.value, 'fixed': True, 'length': length}
        if 'char' in col:
            return {'type': ColumnType.STRING.value, 'length': length}
        if 'text' in col:
            return {'type': ColumnType.TEXT.value, 'length': None}
        if col == 'bytea':
            return {'type': ColumnType.BINARY.value, 'length': None}
        if col == 'real' or 'double' in col:
            return {'type': ColumnType.FLOAT.value, 'length': None}
        if any(name in col for name in ('numeric', 'money', 'decimal')):
            return {'type': ColumnType.DECIMAL.value, 'length': None}
        return {'type': ColumnType.TEXT.value, 'length': None}

    def extra_schema_columns(self) -> Dict[str, Dict[str, str]]:
        return {
            'comment': {
                'column': 'comment',
            },
        }

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

    def _schema(self, config) -> str:
        return getattr(config, 'schema', None) or self.DEFAULT_SCHEMA

    def _normalize_default(self, default: Any) -> Any:
        """Strip casts and sequence defaults from column_default values."""
        if not isinstance(default, str):
            return default
        if default.startswith('nextval(') or default.upper() == 'NULL' or default.upper().startswith('NULL::'):
            return None
        match = CAST_PATTERN.match(default)
        if match:
            return match.group(1).replace("''", "'")
        return super()._normalize_default(default)

    def _native_type(self, table: Table, name: str, data: Dict[str, Any]) -> str:
        if self._is_autoincrement(table, name, data):
            return 'BIGSERIAL' if data['type'] == ColumnType.BIGINTEGER.value else 'SERIAL'
        return super()._native_type(table, name, data)

    def _column_options(self, table: Table, name: str, data: Dict[str, Any]) -> List[str]:
        options = []
        if data['collate'] and data['type'] in (ColumnType.STRING.value, ColumnType.TEXT.value):
            options.append('COLLATE ' + self._driver.quote_name(data['collate']))
        if self._is_autoincrement(table, name, data):
            if data['null'] is False:
                options.append('NOT NULL')
            return options
        return options + super()._column_options(table, name, data)

    def _default_sql(self, data: Dict[str, Any]) -> str:
        default = data['default']
        if data['type'] != ColumnType.BOOLEAN.value or isinstance(default, Expression):
            return super()._default_sql(data)
        value = default.lower() if isinstance(default, str) else default
        if value in TRUE_VALUES:
            return 'TRUE'
        if value in FALSE_VALUES:
            return 'FALSE'
        raise DialectError(
            f"Invalid boolean default {default!r}",
            details={"type": data['type'], "default": default},
        )
