"""Abstract base class for schema dialects."""

import re
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple

from ..errors import DialectError, ParseError
from .column_types import ColumnType, Expression
from .table import Table

# Type keyword (letters, digits, spaces) followed by an optional (size[,scale]).
TYPE_PATTERN = re.compile(r'\s*([a-z][a-z0-9_\s]*)(?:\(\s*([0-9]+)\s*(?:,\s*([0-9]+)\s*)?\))?', re.IGNORECASE)

INTEGER_TYPES = (ColumnType.INTEGER.value, ColumnType.BIGINTEGER.value)

# Defaults every backend accepts without parentheses.
DEFAULT_KEYWORDS = frozenset([
    'CURRENT_TIMESTAMP', 'CURRENT_DATE', 'CURRENT_TIME', 'LOCALTIME', 'LOCALTIMESTAMP',
])

FUNCTION_PATTERN = re.compile(r'^[a-z_][a-z0-9_.]*\s*\(.*\)$', re.IGNORECASE | re.DOTALL)


class SchemaDialect(ABC):
    """Translates between a backend's SQL and the abstract ``Table`` model.

    Subclasses provide the reflection queries, the native type parser and
    the index clauses for one backend. Identifier and value quoting is
    delegated to the driver the dialect was created for.
    """

    # Native DDL keyword for every abstract type except ``string``.
    TYPE_MAP: Dict[str, str] = {}

    def __init__(self, driver):
        self._driver = driver

    @property
    def driver(self):
        return self._driver

    @abstractmethod
    def list_tables_sql(self, config) -> Tuple[str, List[Any]]:
        """Get the SQL to list the tables.

        Args:
            config: ConnectionConfig naming the database/schema to read

        Returns:
            Tuple of (sql, params) to execute
        """
        pass

    @abstractmethod
    def describe_table_sql(self, table: str, config) -> Tuple[str, List[Any]]:
        """Get the SQL to describe the columns of a table.

        Result rows carry ``name``, ``type``, ``null``, ``default`` and
        ``position``, optionally ``char_length``, ``pk`` and any columns
        named by ``extra_schema_columns``. Rows are ordered by position.

        Args:
            table: Table name
            config: ConnectionConfig naming the database/schema to read

        Returns:
            Tuple of (sql, params) to execute
        """
        pass

    @abstractmethod
    def convert_column(self, column: str) -> Dict[str, Any]:
        """Convert a native column type to an abstract column definition.

        Args:
            column: Native type declaration such as ``varchar(255)``

        Returns:
            Dict with at least ``type`` and ``length``

        Raises:
            ParseError: When the declaration cannot be parsed
        """
        pass

    @abstractmethod
    def index_sql(self, table: Table, name: str) -> str:
        """Render the clause declaring one index inside CREATE TABLE."""
        pass

    def extra_schema_columns(self) -> Dict[str, Dict[str, str]]:
        """Get additional column metadata populated during reflection.

        Returns:
            Mapping of column attribute to ``{'column': result_column}``
        """
        return {}

    def convert_field_description(
        self,
        table: Table,
        row: Dict[str, Any],
        field_params: Optional[Dict[str, Dict[str, str]]] = None,
    ) -> None:
        """Convert one describe_table_sql row into a column on ``table``.

        Args:
            table: The table to add the column to
            row: Row from the describe query
            field_params: Extra metadata to copy, see extra_schema_columns
        """
        field = self.convert_column(row['type'])
        default = self._normalize_default(row.get('default'))

        if field['type'] == ColumnType.BOOLEAN.value and isinstance(default, str):
            if default.lower() in ('true', 't', '1'):
                default = 1
            elif default.lower() in ('false', 'f', '0'):
                default = 0

        field.setdefault('null', row.get('null') == 'YES')
        field.setdefault('default', default)
        field['length'] = row.get('char_length') or field.get('length')

        for key, metadata in (field_params or {}).items():
            value = row.get(metadata['column'])
            if value:
                field[key] = value

        table.add_column(row['name'], field)
        if row.get('pk'):
            self._add_primary_key_column(table, row['name'])

    def column_sql(self, table: Table, name: str) -> str:
        """Render the definition of one column for CREATE TABLE."""
        data = table.column(name)
        if data is None:
            raise DialectError(
                f"Column '{name}' does not exist on table '{table.name}'",
                details={"table": table.name, "column": name},
            )
        parts = [self._driver.quote_identifier(name), self._native_type(table, name, data)]
        parts.extend(self._column_options(table, name, data))
        return ' '.join(part for part in parts if part)

    def create_table_sql(self, table_name: str, lines: List[str]) -> str:
        """Wrap column and index clauses in a CREATE TABLE statement."""
        content = ",\n".join(lines)
        return f"CREATE TABLE {self._driver.quote_identifier(table_name)} (\n{content}\n)"

    def _parse_type(self, column: str) -> Tuple[str, Optional[int], Optional[int]]:
        """Split a native type into (keyword, length, scale)."""
        match = TYPE_PATTERN.match(column or '')
        if not match:
            raise ParseError(column)
        keyword = ' '.join(match.group(1).lower().split())
        length = int(match.group(2)) if match.group(2) else None
        scale = int(match.group(3)) if match.group(3) else None
        return keyword, length, scale

    def order_primary_key(self, table: Table, rows: List[Dict[str, Any]]) -> None:
        """Sort the reflected primary key by the key ordinal in ``pk``.

        Backends reporting ``pk`` as a flag leave the key in column order.
        """
        ordinals = {}
        for row in rows:
            pk = row.get('pk')
            if isinstance(pk, int) and not isinstance(pk, bool) and pk > 0:
                ordinals[row['name']] = pk
        primary = table.index(Table.INDEX_PRIMARY)
        if not primary or len(set(ordinals.values())) < 2:
            return
        table.add_index(Table.INDEX_PRIMARY, {
            'type': primary['type'],
            'columns': sorted(primary['columns'], key=lambda column: ordinals.get(column, 0)),
            'length': primary['length'],
        })

    def _normalize_default(self, default: Any) -> Any:
        if isinstance(default, str):
            return self._expression_default(default) or default
        return default

    def _expression_default(self, default: str) -> Optional[Expression]:
        """Recognize an unquoted default as SQL text, or return None."""
        text = default.strip()
        if text.startswith('(') and text.endswith(')'):
            text = text[1:-1].strip()
        if text.upper() in DEFAULT_KEYWORDS:
            return Expression(text.upper())
        if text.lower() in ('now()', 'current_timestamp()'):
            return Expression('CURRENT_TIMESTAMP')
        if FUNCTION_PATTERN.match(text):
            return Expression(text)
        return None

    def _add_primary_key_column(self, table: Table, column: str) -> None:
        existing = table.index(Table.INDEX_PRIMARY)
        columns = [column]
        if existing and existing['type'] == Table.INDEX_PRIMARY:
            columns = existing['columns'] + [c for c in columns if c not in existing['columns']]
        table.add_index(Table.INDEX_PRIMARY, {
            'type': Table.INDEX_PRIMARY,
            'columns': columns,
        })

    def _native_type(self, table: Table, name: str, data: Dict[str, Any]) -> str:
        column_type = data['type']
        if column_type == ColumnType.STRING.value:
            keyword = 'CHAR' if data['fixed'] else 'VARCHAR'
            return f"{keyword}({int(data['length'] or 255)})"
        if column_type not in self.TYPE_MAP:
            raise DialectError(
                f"Unknown column type '{column_type}'",
                details={"table": table.name, "column": name, "type": column_type},
            )
        return self.TYPE_MAP[column_type]

    def _column_options(self, table: Table, name: str, data: Dict[str, Any]) -> List[str]:
        options = []
        if data['null'] is False:
            options.append('NOT NULL')
        if data['default'] is not None:
            options.append('DEFAULT ' + self._default_sql(data))
        elif data['null'] is True:
            options.append('DEFAULT NULL')
        return options

    def _default_sql(self, data: Dict[str, Any]) -> str:
        default = data['default']
        if isinstance(default, Expression):
            return default if default.upper() in DEFAULT_KEYWORDS else f"({default})"
        return self._driver.schema_value(default)

    def _is_autoincrement(self, table: Table, name: str, data: Dict[str, Any]) -> bool:
        """Single integer primary key columns are generated by the database."""
        return data['type'] in INTEGER_TYPES and table.primary_key() == [name]

    def _index_columns(self, data: Dict[str, Any], with_length: bool = False) -> str:
        """Quote index columns as ``(a, b)``, with prefix lengths if asked."""
        lengths = data.get('length') or []
        quoted = []
        for position, column in enumerate(data['columns']):
            out = self._driver.quote_identifier(column)
            if isinstance(lengths, dict):
                length = lengths.get(column)
            else:
                length = lengths[position] if position < len(lengths) else None
            if with_length and length:
                out += f"({int(length)})"
            quoted.append(out)
        return '(' + ', '.join(quoted) + ')'

    def _unsupported_index(self, table: Table, name: str, data: Dict[str, Any]) -> DialectError:
        return DialectError(
            f"Index type '{data['type']}' cannot be declared in CREATE TABLE by {self._driver.name}",
            details={"table": table.name, "index": name, "type": data['type']},
        )
