from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import pytest

from kv_bench.backends.http import HttpKeyValueDatabase
from kv_bench.config import HTTP_DB_NAME_KEY, JOB_NAME_KEY, WORK_HOST_KEY, WORK_PORT_KEY
from kv_bench.models import DatabaseResult


if TYPE_CHECKING:
    from collections.abc import Generator


WORK_PLAN = {WORK_HOST_KEY: "localhost", WORK_PORT_KEY: "8080"}
JOB = {JOB_NAME_KEY: "job1", HTTP_DB_NAME_KEY: "mydb"}


class FakeKVServer:
    """Key-value HTTP server answering through ``httpx.MockTransport``."""

    def __init__(self) -> None:
        super().__init__()
        self.store: dict[str, bytes] = {}
        self.requests: list[httpx.Request] = []
        self.status_override: int | None = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.status_override is not None:
            return httpx.Response(self.status_override, content=b"overridden")

        path = request.url.path
        if request.method == "PUT":
            created = path not in self.store
            self.store[path] = request.content
            return httpx.Response(201 if created else 200)
        if request.method == "GET":
            if path not in self.store:
                return httpx.Response(404, content=b"not found")
            return httpx.Response(200, content=self.store[path])
        if request.method == "DELETE":
            if self.store.pop(path, None) is None:
                return httpx.Response(404)
            return httpx.Response(204)
        return httpx.Response(405)

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self))


@pytest.fixture
def server() -> FakeKVServer:
    return FakeKVServer()


@pytest.fixture
def database(server: FakeKVServer) -> Generator[HttpKeyValueDatabase]:
    test_database = HttpKeyValueDatabase(client=server.client())
    assert test_database.init(WORK_PLAN, JOB) is DatabaseResult.OK
    try:
        yield test_database
    finally:
        _ = test_database.close()
