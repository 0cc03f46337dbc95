"""MySQL schema dialect."""

from typing import Any, Dict, List, Tuple

from .base import SchemaDialect
from .column_types import ColumnType
from .table import Table


class MysqlSchema(SchemaDialect):
    """Schema dialect for MySQL and MariaDB.

    Reflection reads ``information_schema`` so the describe rows have the
    same shape as the Postgres ones. In MySQL the schema is the database,
    so both queries filter on ``config.database``.
    """

    TYPE_MAP = {
        ColumnType.INTEGER.value: 'INTEGER',
        ColumnType.BIGINTEGER.value: 'BIGINT',
        ColumnType.TEXT.value: 'TEXT',
        ColumnType.DECIMAL.value: 'DECIMAL',
        ColumnType.FLOAT.value: 'FLOAT',
        ColumnType.BINARY.value: 'LONGBLOB',
        ColumnType.DATE.value: 'DATE',
        ColumnType.TIME.value: 'TIME',
        ColumnType.DATETIME.value: 'DATETIME',
        ColumnType.BOOLEAN.value: 'BOOLEAN',
    }

    INDEX_KEYWORDS = {
        Table.INDEX_UNIQUE: 'UNIQUE KEY',
        Table.INDEX_INDEX: 'KEY',
        Table.INDEX_FULLTEXT: 'FULLTEXT KEY',
    }

    def list_tables_sql(self, config) -> Tuple[str, List[Any]]:
        sql = (
            "SELECT table_name AS name FROM information_schema.tables "
            "WHERE table_schema = ? ORDER BY name"
        )
        return sql, [config.database]

    def describe_table_sql(self, table: str, config) -> Tuple[str, List[Any]]:
        sql = """SELECT table_schema AS `schema`, column_name AS name, column_type AS type,
    is_nullable AS `null`, column_default AS `default`, ordinal_position AS position,
    column_comment AS comment, collation_name AS `collate`, character_set_name AS charset,
    column_key = 'PRI' AS pk
FROM information_schema.columns
WHERE table_name = ? AND table_schema = ?
ORDER BY position"""
        return sql, [table, config.database]

    def convert_column(self, column: str) -> Dict[str, Any]:
        keyword, length, _ = self._parse_type(column)
        # Drop attributes such as "unsigned" or "zerofill".
        col = keyword.split()[0]

        if col in ('date', 'time'):
            return {'type': col, 'length': None}
        if col in ('datetime', 'timestamp'):
            return {'type': ColumnType.DATETIME.value, 'length': None}
        if (col == 'tinyint' and length == 1) or col in ('boolean', 'bool'):
            return {'type': ColumnType.BOOLEAN.value, 'length': None}
        if col == 'bigint':
            return {'type': ColumnType.BIGINTEGER.value, 'length': length or 20}
        if col in ('int', 'integer', 'tinyint', 'smallint', 'mediumint'):
            return {'type': ColumnType.INTEGER.value, 'length': length or 11}
        if col == 'char' and length == 36:
            return {'type': ColumnType.STRING.value, 'fixed': True, 'length': 36}
        if col == 'char':
            return {'type': ColumnType.STRING.value, 'fixed': True, 'length': length}
        if 'char' in col:
            return {'type': ColumnType.STRING.value, 'length': length}
        if 'text' in col:
            return {'type': ColumnType.TEXT.value, 'length': None}
        if 'blob' in col or col in ('binary', 'varbinary'):
            return {'type': ColumnType.BINARY.value, 'length': None}
        if col in ('float', 'double', 'real'):
            return {'type': ColumnType.FLOAT.value, 'length': None}
        if col in ('decimal', 'numeric'):
            return {'type': ColumnType.DECIMAL.value, 'length': None}
        return {'type': ColumnType.TEXT.value, 'length': None}

    def extra_schema_columns(self) -> Dict[str, Dict[str, str]]:
        return {
            'comment': {'column': 'comment'},
            'collate': {'column': 'collate'},
            'charset': {'column': 'charset'},
        }

    def index_sql(self, table: Table, name: str) -> str:
        data = table.index(name)
        if data['type'] == Table.INDEX_PRIMARY:
            return 'PRIMARY KEY ' + self._index_columns(data, with_length=True)
        if data['type'] in self.INDEX_KEYWORDS:
            return (
                f"{self.INDEX_KEYWORDS[data['type']]} {self._driver.quote_identifier(name)} "
                + self._index_columns(data, with_length=True)
            )
        raise self._unsupported_index(table, name, data)

    def _native_type(self, table: Table, name: str, data: Dict[str, Any]) -> str:
        out = super()._native_type(table, name, data)
        if data['type'] in (ColumnType.INTEGER.value, ColumnType.BIGINTEGER.value) and data['length']:
            out += f"({int(data['length'])})"
        return out

    def _column_options(self, table: Table, name: str, data: Dict[str, Any]) -> List[str]:
        options = []
        if data['type'] in (ColumnType.STRING.value, ColumnType.TEXT.value):
            if data['charset']:
                options.append('CHARACTER SET ' + data['charset'])
            if data['collate']:
                options.append('COLLATE ' + data['collate'])

        if self._is_autoincrement(table, name, data):
            if data['null'] is False:
                options.append('NOT NULL')
            options.append('AUTO_INCREMENT')
        else:
            options.extend(super()._column_options(table, name, data))

        if data['comment']:
            options.append('COMMENT ' + self._driver.schema_value(data['comment']))
        return options
