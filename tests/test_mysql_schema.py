"""Tests for the MySQL schema dialect."""

import pytest

from schemakit.config import ConnectionConfig
from schemakit.database import Connection
from schemakit.errors import DialectError, ParseError
from schemakit.schema import Collection, Expression, MysqlSchema, Table

from .fixtures import MockConnection


@pytest.fixture
def dialect(mysql_driver):
    return mysql_driver.schema_dialect()


class TestReflectionSql:
    """Test the reflection query builders."""

    def test_driver_gives_mysql_dialect(self, dialect):
        assert isinstance(dialect, MysqlSchema)

    def test_list_tables_filters_on_database(self, dialect):
        sql, params = dialect.list_tables_sql(ConnectionConfig(database="shop"))
        assert "information_schema.tables" in sql
        assert params == ["shop"]

    def test_describe_table(self, dialect):
        sql, params = dialect.describe_table_sql("orders", ConnectionConfig(database="shop"))
        assert params == ["orders", "shop"]
        assert "AS `null`" in sql
        assert "AS `default`" in sql
        assert "column_key = 'PRI' AS pk" in sql
        assert "ORDER BY position" in sql


class TestConvertColumn:
    """Test native type parsing."""

    @pytest.mark.parametrize("native,expected", [
        ("int(11)", {"type": "integer", "length": 11}),
        ("int(10) unsigned", {"type": "integer", "length": 10}),
        ("int unsigned", {"type": "integer", "length": 11}),
        ("smallint(6)", {"type": "integer", "length": 6}),
        ("tinyint(4)", {"type": "integer", "length": 4}),
        ("tinyint(1)", {"type": "boolean", "length": None}),
        ("boolean", {"type": "boolean", "length": None}),
        ("bigint(20)", {"type": "biginteger", "length": 20}),
        ("bigint", {"type": "biginteger", "length": 20}),
        ("varchar(255)", {"type": "string", "length": 255}),
        ("char(36)", {"type": "string", "fixed": True, "length": 36}),
        ("char(2)", {"type": "string", "fixed": True, "length": 2}),
        ("text", {"type": "text", "length": None}),
        ("mediumtext", {"type": "text", "length": None}),
        ("longblob", {"type": "binary", "length": None}),
        ("varbinary(16)", {"type": "binary", "length": None}),
        ("float", {"type": "float", "length": None}),
        ("double", {"type": "float", "length": None}),
        ("decimal(10,2)", {"type": "decimal", "length": None}),
        ("datetime", {"type": "datetime", "length": None}),
        ("timestamp", {"type": "datetime", "length": None}),
        ("date", {"type": "date", "length": None}),
        ("time", {"type": "time", "length": None}),
        ("enum('a','b')", {"type": "text", "length": None}),
    ])
    def test_conversion(self, dialect, native, expected):
        assert dialect.convert_column(native) == expected

    def test_unparseable(self, dialect):
        with pytest.raises(ParseError):
            dialect.convert_column("")


class TestConvertFieldDescription:
    """Test describe rows becoming columns."""

    def test_extra_metadata(self, dialect):
        table = Table("posts")
        row = {
            "name": "title",
            "type": "varchar(100)",
            "null": "NO",
            "default": None,
            "comment": "Title",
            "collate": "utf8mb4_general_ci",
            "charset": "utf8mb4",
            "pk": 0,
        }
        dialect.convert_field_description(table, row, dialect.extra_schema_columns())

        assert table.column("title") == {
            "type": "string",
            "length": 100,
            "null": False,
            "default": None,
            "fixed": None,
            "comment": "Title",
            "collate": "utf8mb4_general_ci",
            "charset": "utf8mb4",
        }
        assert table.primary_key() is None

    def test_tinyint_boolean_default(self, dialect):
        table = Table("posts")
        row = {"name": "visible", "type": "tinyint(1)", "null": "NO", "default": "1", "comment": "", "pk": 0}
        dialect.convert_field_description(table, row, dialect.extra_schema_columns())

        assert table.column("visible")["type"] == "boolean"
        assert table.column("visible")["default"] == 1
        assert table.column("visible")["comment"] is None

    def test_current_timestamp_default_stays_bare(self, dialect):
        table = Table("posts")
        row = {"name": "created", "type": "timestamp", "null": "NO", "default": "CURRENT_TIMESTAMP", "pk": 0}
        dialect.convert_field_description(table, row)

        assert isinstance(table.column("created")["default"], Expression)
        assert dialect.column_sql(table, "created") == "`created` DATETIME NOT NULL DEFAULT CURRENT_TIMESTAMP"

    def test_literal_default_is_quoted(self, dialect):
        table = Table("posts")
        row = {"name": "state", "type": "varchar(10)", "null": "YES", "default": "draft", "pk": 0}
        dialect.convert_field_description(table, row)

        assert dialect.column_sql(table, "state") == "`state` VARCHAR(10) DEFAULT 'draft'"


class TestColumnSql:
    """Test rendering column definitions."""

    def test_string_with_charset_and_comment(self, dialect):
        table = Table("posts")
        table.add_column("title", {
            "type": "string",
            "length": 100,
            "null": False,
            "comment": "Title",
            "collate": "utf8mb4_general_ci",
            "charset": "utf8mb4",
        })
        assert dialect.column_sql(table, "title") == (
            "`title` VARCHAR(100) CHARACTER SET utf8mb4 COLLATE utf8mb4_general_ci "
            "NOT NULL COMMENT 'Title'"
        )

    @pytest.mark.parametrize("attrs,expected", [
        ({"type": "integer", "length": 11, "default": 0}, "`field` INTEGER(11) DEFAULT 0"),
        ({"type": "biginteger", "length": 20}, "`field` BIGINT(20)"),
        ({"type": "integer"}, "`field` INTEGER"),
        ({"type": "string", "fixed": True, "length": 2}, "`field` CHAR(2)"),
        ({"type": "boolean", "default": 1}, "`field` BOOLEAN DEFAULT 1"),
        ({"type": "binary"}, "`field` LONGBLOB"),
        ({"type": "datetime", "null": True}, "`field` DATETIME DEFAULT NULL"),
        ({"type": "text", "comment": "a\\b"}, "`field` TEXT COMMENT 'a\\\\b'"),
    ])
    def test_column(self, dialect, attrs, expected):
        table = Table("things")
        table.add_column("field", attrs)
        assert dialect.column_sql(table, "field") == expected

    def test_auto_increment(self, dialect):
        table = Table("things")
        table.add_column("id", {"type": "integer", "length": 11, "null": False})
        table.add_index("primary", {"type": "primary", "columns": ["id"]})
        assert dialect.column_sql(table, "id") == "`id` INTEGER(11) NOT NULL AUTO_INCREMENT"


class TestIndexSql:
    """Test rendering index clauses."""

    @pytest.fixture
    def table(self):
        table = Table("posts", {"id": "integer", "slug": "string", "body": "text"})
        table.add_index("primary", {"type": "primary", "columns": ["id"]})
        return table

    def test_primary(self, dialect, table):
        assert dialect.index_sql(table, "primary") == "PRIMARY KEY (`id`)"

    def test_unique(self, dialect, table):
        table.add_index("slug_idx", {"type": "unique", "columns": ["slug"]})
        assert dialect.index_sql(table, "slug_idx") == "UNIQUE KEY `slug_idx` (`slug`)"

    def test_index_with_prefix_length(self, dialect, table):
        table.add_index("slug_body", {"type": "index", "columns": ["slug", "body"], "length": {"body": 10}})
        assert dialect.index_sql(table, "slug_body") == "KEY `slug_body` (`slug`, `body`(10))"

    def test_fulltext(self, dialect, table):
        table.add_index("body_ft", {"type": "fulltext", "columns": ["body"]})
        assert dialect.index_sql(table, "body_ft") == "FULLTEXT KEY `body_ft` (`body`)"

    def test_foreign_not_supported(self, dialect, table):
        table.add_index("slug_fk", {"type": "foreign", "columns": ["slug"]})
        with pytest.raises(DialectError):
            dialect.index_sql(table, "slug_fk")


class TestReflection:
    """Test reflecting through a Collection."""

    def test_describe_and_regenerate(self, mysql_driver):
        connection = MockConnection(mysql_driver, ConnectionConfig(database="shop"))
        connection.add_rows(r"information_schema\.columns", [
            {"schema": "shop", "name": "id", "type": "int(10) unsigned", "null": "NO", "default": None,
             "position": 1, "comment": "", "collate": None, "charset": None, "pk": 1},
            {"schema": "shop", "name": "sku", "type": "char(12)", "null": "NO", "default": None,
             "position": 2, "comment": "", "collate": "ascii_bin", "charset": "ascii", "pk": 0},
        ])

        table = Collection(connection).describe("products")
        assert table.columns() == ["id", "sku"]
        assert table.primary_key() == ["id"]

        sql = table.create_table_sql(Connection(mysql_driver))
        assert sql == (
            "CREATE TABLE `products` (\n"
            "`id` INTEGER(10) NOT NULL AUTO_INCREMENT,\n"
            "`sku` CHAR(12) CHARACTER SET ascii COLLATE ascii_bin NOT NULL,\n"
            "PRIMARY KEY (`id`)\n"
            ")"
        )
