"""kv-bench - pluggable key-value database access for benchmarking harnesses"""

from ._version import version as __version__
from .backends import Database, HttpKeyValueDatabase, create_database
from .config import ConfigError, ConnectionSettings, MalformedSettingError, MissingSettingError
from .models import DatabaseResult, OperationOutcome, Query


__all__ = [
    "ConfigError",
    "ConnectionSettings",
    "Database",
    "DatabaseResult",
    "HttpKeyValueDatabase",
    "MalformedSettingError",
    "MissingSettingError",
    "OperationOutcome",
    "Query",
    "__version__",
    "create_database",
]
