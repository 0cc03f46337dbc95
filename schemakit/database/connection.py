"""Thin DB-API connection wrapper used by schema reflection."""

import logging
import re
from typing import Any, Dict, List, Optional, Sequence

from ..config import ConnectionConfig
from ..errors import DatabaseError
from .driver import Driver, get_driver

logger = logging.getLogger(__name__)

# "?" placeholders outside of single quoted literals.
QMARK_PATTERN = re.compile(r"'(?:[^']|'')*'|\?")


class Connection:
    """Pairs a driver with a DB-API connection.

    The raw connection is opened lazily on first use unless one is
    passed in. Statements use ``?`` placeholders and are translated to
    the driver's placeholder style before execution.
    """

    def __init__(self, driver: Driver, config: Optional[ConnectionConfig] = None, raw=None):
        self._driver = driver
        self._config = config or ConnectionConfig()
        self._raw = raw

    @classmethod
    def from_settings(cls, settings, driver: Optional[str] = None, database: Optional[str] = None) -> "Connection":
        """Build a connection from Settings, with optional overrides."""
        return cls(
            get_driver(driver or settings.driver),
            settings.connection_config(database=database),
        )

    @property
    def driver(self) -> Driver:
        return self._driver

    @property
    def config(self) -> ConnectionConfig:
        return self._config

    def connect(self):
        """Open the DB-API connection if it is not open yet."""
        if self._raw is None:
            logger.debug("Connecting with %s driver to %s", self._driver.name, self._config.database)
            self._raw = self._driver.connect(self._config)
        return self._raw

    def close(self):
        """Close the DB-API connection."""
        if self._raw is not None:
            self._raw.close()
            self._raw = None

    def execute(self, sql: str, params: Optional[Sequence[Any]] = None) -> List[Dict[str, Any]]:
        """Execute a statement and return the rows as dicts.

        Args:
            sql: SQL text using ``?`` placeholders
            params: Bound parameter values

        Returns:
            List of rows keyed by result column name

        Raises:
            DatabaseError: If the driver rejects the statement
        """
        raw = self.connect()
        statement = self._translate_placeholders(sql)
        logger.debug("Executing %s with %s", statement, params)

        cursor = raw.cursor()
        try:
            cursor.execute(statement, tuple(params or ()))
            if cursor.description is None:
                return []
            names = [column[0] for column in cursor.description]
            return [dict(zip(names, row)) for row in cursor.fetchall()]
        except self._driver.dbapi().Error as e:
            raise DatabaseError(str(e), details={"sql": sql, "params": list(params or [])}) from e
        finally:
            cursor.close()

    def schema_collection(self):
        """Get a schema Collection reading through this connection."""
        from ..schema.collection import Collection
        return Collection(self)

    def _translate_placeholders(self, sql: str) -> str:
        if self._driver.placeholder == "?":
            return sql
        return QMARK_PATTERN.sub(
            lambda m: self._driver.placeholder if m.group(0) == "?" else m.group(0),
            sql,
        )

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
