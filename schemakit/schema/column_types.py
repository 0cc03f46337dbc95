"""Abstract column and index types shared by every dialect."""

from enum import Enum
from typing import Any, Dict


class ColumnType(str, Enum):
    """Backend independent column types."""
    INTEGER = "integer"
    BIGINTEGER = "biginteger"
    STRING = "string"
    TEXT = "text"
    DECIMAL = "decimal"
    FLOAT = "float"
    BINARY = "binary"
    DATE = "date"
    TIME = "time"
    DATETIME = "datetime"
    BOOLEAN = "boolean"


class IndexType(str, Enum):
    """Kinds of indexes and keys a table can declare."""
    PRIMARY = "primary"
    INDEX = "index"
    UNIQUE = "unique"
    FOREIGN = "foreign"
    FULLTEXT = "fulltext"


COLUMN_TYPES = frozenset(t.value for t in ColumnType)
INDEX_TYPES = frozenset(t.value for t in IndexType)

# Recognized column attributes and the value used when one is not given.
COLUMN_KEYS: Dict[str, Any] = {
    'type': None,
    'length': None,
    'null': None,
    'default': None,
    'fixed': None,
    'comment': None,
    'collate': None,
    'charset': None,
}

# Recognized index attributes. List defaults are copied per index.
INDEX_KEYS: Dict[str, Any] = {
    'type': None,
    'columns': [],
    'length': [],
}


def merge_attributes(attrs: Any, defaults: Dict[str, Any]) -> Dict[str, Any]:
    """Project ``attrs`` onto the recognized keys in ``defaults``.

    A bare string is shorthand for ``{'type': attrs}``. Unknown keys are
    dropped and missing keys take their default value.

    Args:
        attrs: Attribute mapping or type name
        defaults: Recognized keys mapped to their defaults

    Returns:
        New dict holding exactly the keys of ``defaults``
    """
    if isinstance(attrs, str):
        attrs = {'type': attrs}
    merged = {}
    for key, default in defaults.items():
        if key in attrs:
            merged[key] = attrs[key]
        elif isinstance(default, list):
            merged[key] = list(default)
        else:
            merged[key] = default
    if isinstance(merged.get('type'), Enum):
        merged['type'] = merged['type'].value
    return merged


class Expression(str):
    """Column default holding SQL text, such as ``CURRENT_TIMESTAMP``.

    Plain strings are rendered as quoted literals. An Expression is
    rendered as-is, or wrapped in parentheses when it is not one of the
    keywords every backend accepts bare.
    """

    def __repr__(self) -> str:
        return f"Expression({str.__repr__(self)})"
