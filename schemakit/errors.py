"""Error types for schemakit."""

from typing import Optional, Dict, Any


class SchemaError(Exception):
    """Base exception for schema errors."""

    def __init__(self, message: str, code: str = "SCHEMA_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for structured output."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(SchemaError):
    """Invalid column or index definition."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="VALIDATION_ERROR", details=details)


class ParseError(SchemaError):
    """Native column type could not be parsed.

    Raised when a type declaration does not match the
    ``keyword [(size[,scale])]`` grammar at all.
    """

    def __init__(self, column: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            f'Unable to parse column type from "{column}"',
            code="PARSE_ERROR",
            details=details or {"column": column},
        )
        self.column = column


class DialectError(SchemaError):
    """A definition cannot be rendered by the target dialect."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="DIALECT_ERROR", details=details)


class DatabaseError(SchemaError):
    """Error raised by the database driver while executing a statement."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="DATABASE_ERROR", details=details)


class ReflectionError(SchemaError):
    """Error during schema reflection."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="REFLECTION_ERROR", details=details)
