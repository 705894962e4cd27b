"""Database contract and implementations."""

from .http import HttpKeyValueDatabase
from .protocol import Database
from .registry import BUILTIN_BACKENDS, create_database, load_backend_class


__all__ = ["BUILTIN_BACKENDS", "Database", "HttpKeyValueDatabase", "create_database", "load_backend_class"]
