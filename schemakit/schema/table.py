"""In-memory representation of a single database table."""

from typing import Any, Dict, List, Mapping, Optional

from ..errors import ValidationError
from .column_types import COLUMN_KEYS, INDEX_KEYS, INDEX_TYPES, IndexType, merge_attributes


class Table:
    """Represents a single table in a database schema.

    Can either be populated by reflection (see ``Collection.describe``)
    or built incrementally with ``add_column`` and ``add_index``.
    Column and index definitions are plain dicts restricted to the
    keys in ``COLUMN_KEYS`` and ``INDEX_KEYS``.
    """

    INDEX_PRIMARY = IndexType.PRIMARY.value
    INDEX_INDEX = IndexType.INDEX.value
    INDEX_UNIQUE = IndexType.UNIQUE.value
    INDEX_FOREIGN = IndexType.FOREIGN.value
    INDEX_FULLTEXT = IndexType.FULLTEXT.value

    def __init__(self, name: str, columns: Optional[Mapping[str, Any]] = None):
        """Initialize a table.

        Args:
            name: The table name
            columns: Optional mapping of column name to definition
        """
        self._name = name
        self._columns: Dict[str, Dict[str, Any]] = {}
        self._indexes: Dict[str, Dict[str, Any]] = {}
        for column_name, definition in (columns or {}).items():
            self.add_column(column_name, definition)

    @property
    def name(self) -> str:
        return self._name

    def add_column(self, name: str, attrs: Any) -> "Table":
        """Add a column to the table.

        Recognized attributes are ``type``, ``length``, ``null``,
        ``default`` and ``fixed``. ``comment``, ``charset`` and
        ``collate`` are honoured by some dialects only. Anything
        else is discarded. Adding a column twice replaces it.

        Args:
            name: The column name
            attrs: Attribute mapping, or a bare type name

        Returns:
            The table, for chaining
        """
        self._columns[name] = merge_attributes(attrs, COLUMN_KEYS)
        return self

    def drop_column_attribute(self, key: str) -> "Table":
        """Reset one attribute to its default on every column.

        Used to drop backend specific settings such as ``collate`` and
        ``charset`` before rendering for a different backend.
        """
        if key not in COLUMN_KEYS or key == 'type':
            raise ValidationError(f"Unknown column attribute '{key}'", details={"attribute": key})
        for data in self._columns.values():
            data[key] = COLUMN_KEYS[key]
        return self

    def columns(self) -> List[str]:
        """Get the column names in insertion order."""
        return list(self._columns)

    def column(self, name: str) -> Optional[Dict[str, Any]]:
        """Get a column definition, or None if it does not exist."""
        return self._columns.get(name)

    def add_index(self, name: str, attrs: Any) -> "Table":
        """Add an index or key.

        Args:
            name: The index name
            attrs: Attribute mapping with ``type``, ``columns`` and
                optionally ``length``; a bare string is the type

        Returns:
            The table, for chaining

        Raises:
            ValidationError: If the type is unknown or a column in
                the index is not on the table
        """
        attrs = merge_attributes(attrs, INDEX_KEYS)
        columns = attrs['columns'] or []
        attrs['columns'] = [columns] if isinstance(columns, str) else list(columns)

        if attrs['type'] not in INDEX_TYPES:
            raise ValidationError(
                f"Invalid index type '{attrs['type']}'",
                details={"index": name, "type": attrs['type']},
            )
        for column in attrs['columns']:
            if column not in self._columns:
                raise ValidationError(
                    "Columns used in indexes must already exist.",
                    details={"index": name, "column": column},
                )
        self._indexes[name] = attrs
        return self

    def indexes(self) -> List[str]:
        """Get the index names in insertion order."""
        return list(self._indexes)

    def index(self, name: str) -> Optional[Dict[str, Any]]:
        """Get an index definition, or None if it does not exist."""
        return self._indexes.get(name)

    def primary_key(self) -> Optional[List[str]]:
        """Get the column(s) of the first primary index.

        Returns:
            Column names, or None if the table has no primary key
        """
        for data in self._indexes.values():
            if data['type'] == self.INDEX_PRIMARY:
                return data['columns']
        return None

    def create_table_sql(self, connection) -> str:
        """Generate the CREATE TABLE statement for this table.

        Args:
            connection: Object exposing ``driver.schema_dialect()``

        Returns:
            SQL statement creating the table
        """
        dialect = connection.driver.schema_dialect()
        lines = [dialect.column_sql(self, name) for name in self._columns]
        lines.extend(dialect.index_sql(self, name) for name in self._indexes)
        return dialect.create_table_sql(self._name, lines)

    def __repr__(self) -> str:
        return f"Table(name={self._name!r}, columns={self.columns()!r}, indexes={self.indexes()!r})"
