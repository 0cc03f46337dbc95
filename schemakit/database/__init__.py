"""Drivers and connections consumed by the schema layer."""

from .driver import Driver, DriverName, Sqlite, Postgres, Mysql, get_driver
from .connection import Connection

__all__ = [
    "Driver",
    "DriverName",
    "Sqlite",
    "Postgres",
    "Mysql",
    "get_driver",
    "Connection",
]
