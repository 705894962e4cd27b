"""Lookup of database backends by alias or import path."""

from __future__ import annotations

import importlib
from typing import Any

from .protocol import Database


BUILTIN_BACKENDS: dict[str, str] = {
    "http": "kv_bench.backends.http:HttpKeyValueDatabase",
    "rocksdb": "kv_bench.backends.http:HttpKeyValueDatabase",
}


def _split_path(path: str) -> tuple[str, str]:
    if ":" in path:
        module_name, _, attribute = path.partition(":")
    else:
        module_name, _, attribute = path.rpartition(".")
    if not module_name or not attribute:
        msg = f"backend must be an alias or a 'module:Class' path, got {path!r}"
        raise ValueError(msg)
    return module_name, attribute


def load_backend_class(name: str) -> type[Database]:
    """Return the ``Database`` subclass registered as name or importable at name.

    Raises
    ------
    ValueError
        When name is neither an alias nor a module path.
    TypeError
        When the resolved object is not a ``Database`` subclass.
    """
    module_name, attribute = _split_path(BUILTIN_BACKENDS.get(name, name))
    module = importlib.import_module(module_name)
    backend_class = getattr(module, attribute)
    if not isinstance(backend_class, type) or not issubclass(backend_class, Database):
        msg = f"{name!r} does not name a Database implementation"
        raise TypeError(msg)
    return backend_class


def create_database(name: str, **kwargs: Any) -> Database:
    """Instantiate the backend found by ``load_backend_class``."""
    return load_backend_class(name)(**kwargs)
