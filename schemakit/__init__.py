"""schemakit - reflect database tables and generate DDL across SQL dialects."""

__version__ = "0.1.0"
