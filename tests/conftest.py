"""Shared pytest fixtures for schemakit tests."""

import sqlite3

import pytest

from schemakit.config import ConnectionConfig
from schemakit.database import Connection, Mysql, Postgres, Sqlite
from schemakit.schema import Table


@pytest.fixture
def postgres_driver():
    return Postgres()


@pytest.fixture
def mysql_driver():
    return Mysql()


@pytest.fixture
def sqlite_driver():
    return Sqlite()


@pytest.fixture
def articles_table():
    """Create a table with an integer id, a short name and a primary key."""
    table = Table("articles")
    table.add_column("id", {"type": "integer", "null": False})
    table.add_column("name", {"type": "string", "length": 50})
    table.add_index("primary", {"type": "primary", "columns": ["id"]})
    return table


@pytest.fixture
def sqlite_connection():
    """In-memory SQLite connection with a small sample schema."""
    raw = sqlite3.connect(":memory:")
    raw.executescript("""
        CREATE TABLE users (
            id INTEGER NOT NULL,
            email VARCHAR(255) NOT NULL,
            nickname CHAR(10),
            bio TEXT DEFAULT 'n/a',
            active BOOLEAN DEFAULT 'true',
            balance DECIMAL(10,2),
            avatar BLOB,
            created DATETIME,
            PRIMARY KEY (id)
        );
        CREATE TABLE memberships (
            user_id INTEGER NOT NULL,
            group_id BIGINT NOT NULL,
            joined DATE,
            PRIMARY KEY (user_id, group_id)
        );
        CREATE TABLE notes (body);
    """)
    connection = Connection(Sqlite(), ConnectionConfig(database=":memory:"), raw=raw)
    yield connection
    connection.close()


@pytest.fixture
def sqlite_file(tmp_path):
    """SQLite database file with one table, for CLI tests."""
    path = tmp_path / "app.db"
    raw = sqlite3.connect(str(path))
    raw.execute("CREATE TABLE posts (id INTEGER NOT NULL, title VARCHAR(100), PRIMARY KEY (id))")
    raw.commit()
    raw.close()
    return str(path)
