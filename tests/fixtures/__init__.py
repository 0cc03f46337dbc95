"""Test fixtures package."""

from .mock_connection import MockConnection

__all__ = [
    "MockConnection",
]
