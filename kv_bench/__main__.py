"""Interface for ``python -m kv_bench``."""

from __future__ import annotations

import logging
from argparse import ArgumentParser, Namespace
from typing import TYPE_CHECKING, Any

from .backends import HttpKeyValueDatabase, create_database
from .config import HTTP_DB_NAME_KEY, JOB_NAME_KEY, WORK_HOST_KEY, WORK_PORT_KEY
from .models import DatabaseResult, Query


if TYPE_CHECKING:
    from collections.abc import Sequence

    import httpx

    from .backends import Database

from ._version import version


__all__ = ["main"]


def _build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="kv-bench", description="Issue single operations against a key-value backend.")
    _ = parser.add_argument("-v", "--version", action="version", version=version)
    _ = parser.add_argument("--log-level", default="WARNING", help="logging level (default: %(default)s)")
    _ = parser.add_argument("--backend", default="http", help="backend alias or module:Class path")
    _ = parser.add_argument("--host", default="localhost")
    _ = parser.add_argument("--port", default="8080", help="backend port")
    _ = parser.add_argument("--db", help="database name on the backend host")
    _ = parser.add_argument("--job", default="kv-bench", help="job name reported in diagnostics")
    _ = parser.add_argument("--timeout", type=float, default=None, help="request timeout in seconds")

    commands = parser.add_subparsers(dest="command", required=True)
    put = commands.add_parser("put", help="store VALUE under KEY")
    _ = put.add_argument("key")
    _ = put.add_argument("value")
    get = commands.add_parser("get", help="read the value under KEY")
    _ = get.add_argument("key")
    delete = commands.add_parser("delete", help="remove the value under KEY")
    _ = delete.add_argument("key")
    return parser


def _properties(options: Namespace) -> tuple[dict[str, str], dict[str, str]]:
    work_plan = {WORK_HOST_KEY: options.host, WORK_PORT_KEY: options.port}
    job = {JOB_NAME_KEY: options.job}
    if options.db is not None:
        job[HTTP_DB_NAME_KEY] = options.db
    return work_plan, job


def _run_command(database: Database, options: Namespace) -> DatabaseResult:
    if options.command == "put":
        return database.insert(Query(options.key, options.value.encode()))
    if options.command == "delete":
        return database.delete(Query(options.key))
    if isinstance(database, HttpKeyValueDatabase):
        outcome = database.fetch(Query(options.key))
        if outcome.ok and outcome.payload is not None:
            print(outcome.payload.decode(errors="replace"))
        return outcome.result
    return database.read(Query(options.key))


def main(args: Sequence[str] | None = None, *, client: httpx.Client | None = None) -> int:
    """Run one operation and return the process exit status."""
    options = _build_parser().parse_args(args)
    logging.basicConfig(level=options.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    kwargs: dict[str, Any] = {"timeout": options.timeout} if client is None else {"client": client}
    database = create_database(options.backend, **kwargs)
    try:
        result = database.init(*_properties(options))
        if result is DatabaseResult.OK:
            result = _run_command(database, options)
    finally:
        _ = database.close()

    print(result.name)
    return 0 if result is DatabaseResult.OK else 1


if __name__ == "__main__":
    raise SystemExit(main())
