"""Database drivers: quoting rules, DB-API connections and schema dialects."""

import re
import sqlite3
from abc import ABC, abstractmethod
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Type

from ..config import ConnectionConfig
from ..schema.base import SchemaDialect
from ..schema.mysql import MysqlSchema
from ..schema.postgres import PostgresSchema
from ..schema.sqlite import SqliteSchema

ALIAS_PATTERN = re.compile(r'^(.+?)\s+AS\s+(.+)$', re.IGNORECASE)


class DriverName(str, Enum):
    """Supported database drivers."""
    SQLITE = "sqlite"
    POSTGRES = "postgres"
    MYSQL = "mysql"


class Driver(ABC):
    """Backend specific behaviour needed by the schema layer.

    A driver knows how to quote identifiers and literal values for its
    backend, which placeholder style its DB-API module expects, and
    which schema dialect translates its tables.
    """

    name: str = ""

    # String used to start a database identifier quoting to make it safe
    start_quote: str = '"'

    # String used to end a database identifier quoting to make it safe
    end_quote: str = '"'

    # Placeholder expected by the DB-API module ("?" or "%s")
    placeholder: str = "?"

    dialect_class: Type[SchemaDialect]

    def schema_dialect(self) -> SchemaDialect:
        """Get the schema dialect used to reflect and generate tables."""
        return self.dialect_class(self)

    @abstractmethod
    def dbapi(self):
        """Return the DB-API module used by this driver."""
        pass

    @abstractmethod
    def connect(self, config: ConnectionConfig):
        """Open a DB-API connection.

        Args:
            config: Connection parameters

        Returns:
            DB-API connection object
        """
        pass

    def quote_identifier(self, identifier: str) -> str:
        """Quote a table or column name.

        Handles ``*``, dotted ``schema.table`` names and ``expr AS alias``.
        Embedded end quotes are doubled.
        """
        identifier = identifier.strip()
        if identifier in ("", "*"):
            return identifier

        match = ALIAS_PATTERN.match(identifier)
        if match:
            return f"{self.quote_identifier(match.group(1))} AS {self.quote_identifier(match.group(2))}"

        if "." in identifier:
            return ".".join(
                part if part == "*" else self._quote(part)
                for part in identifier.split(".")
            )
        return self._quote(identifier)

    def quote_name(self, name: str) -> str:
        """Quote a single name such as a collation, keeping any dots."""
        return self._quote(name.strip())

    def schema_value(self, value: Any) -> str:
        """Render a Python value as a SQL literal for DDL."""
        if value is None:
            return "NULL"
        if isinstance(value, bool):
            return "TRUE" if value else "FALSE"
        if isinstance(value, (int, float, Decimal)):
            return str(value)
        return "'" + str(value).replace("'", "''") + "'"

    def _quote(self, part: str) -> str:
        escaped = part.replace(self.end_quote, self.end_quote * 2)
        return f"{self.start_quote}{escaped}{self.end_quote}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Sqlite(Driver):
    """Driver for SQLite using the standard library module."""

    name = DriverName.SQLITE.value
    dialect_class = SqliteSchema

    def dbapi(self):
        return sqlite3

    def connect(self, config: ConnectionConfig):
        return sqlite3.connect(config.database, **config.options)

    def schema_value(self, value: Any) -> str:
        if isinstance(value, bool):
            return "1" if value else "0"
        return super().schema_value(value)


class Postgres(Driver):
    """Driver for Postgres using psycopg2."""

    name = DriverName.POSTGRES.value
    placeholder = "%s"
    dialect_class = PostgresSchema

    def dbapi(self):
        try:
            import psycopg2
        except ImportError:
            raise ImportError(
                "psycopg2 is required for Postgres connections. "
                "Install it with: pip install psycopg2-binary"
            )
        return psycopg2

    def connect(self, config: ConnectionConfig):
        params = _without_none({
            "host": config.host or "localhost",
            "port": config.port,
            "dbname": config.database,
            "user": config.username,
            "password": config.password,
        })
        params.update(config.options)
        return self.dbapi().connect(**params)


class Mysql(Driver):
    """Driver for MySQL and MariaDB using PyMySQL."""

    name = DriverName.MYSQL.value
    start_quote = "`"
    end_quote = "`"
    placeholder = "%s"
    dialect_class = MysqlSchema

    def dbapi(self):
        try:
            import pymysql
        except ImportError:
            raise ImportError(
                "PyMySQL is required for MySQL connections. "
                "Install it with: pip install pymysql"
            )
        return pymysql

    def connect(self, config: ConnectionConfig):
        params = _without_none({
            "host": config.host or "localhost",
            "port": config.port,
            "database": config.database,
            "user": config.username,
            "password": config.password,
        })
        params.update(config.options)
        return self.dbapi().connect(**params)

    def schema_value(self, value: Any) -> str:
        if isinstance(value, bool):
            return "1" if value else "0"
        if isinstance(value, str):
            return "'" + value.replace("\\", "\\\\").replace("'", "''") + "'"
        return super().schema_value(value)


DRIVERS: Dict[DriverName, Type[Driver]] = {
    DriverName.SQLITE: Sqlite,
    DriverName.POSTGRES: Postgres,
    DriverName.MYSQL: Mysql,
}


def get_driver(name: str) -> Driver:
    """Create a driver by name.

    Args:
        name: One of the DriverName values (case insensitive)

    Raises:
        ValueError: If the driver is not supported
    """
    try:
        driver_name = DriverName(name.lower())
    except ValueError:
        supported = ", ".join(d.value for d in DriverName)
        raise ValueError(f"Unsupported driver '{name}'. Supported drivers: {supported}")
    return DRIVERS[driver_name]()


def _without_none(params: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in params.items() if value is not None}
