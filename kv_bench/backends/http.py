"""Key-value database reached over a REST-like HTTP protocol."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, override

import httpx

from kv_bench.config import HTTP_DB_NAME_KEY, ConfigError, ConnectionSettings
from kv_bench.models import DatabaseResult, OperationOutcome, is_success_status

from .protocol import Database


if TYPE_CHECKING:
    from collections.abc import Mapping

    from kv_bench.models import Query


logger = logging.getLogger(__name__)

OCTET_STREAM = "application/octet-stream"
DEFAULT_MAX_CONNECTIONS = 2

# RuntimeError covers requests on a closed client and httpx.StreamError.
_TRANSPORT_ERRORS = (httpx.HTTPError, httpx.InvalidURL, RuntimeError)


def build_client(*, timeout: float | None = None, max_connections: int = DEFAULT_MAX_CONNECTIONS) -> httpx.Client:
    """Create the pooled client a database instance owns.

    Requests beyond ``max_connections`` wait for a free connection. With
    ``timeout=None`` neither requests nor the pool wait ever time out.
    """
    if max_connections < 1:
        msg = "max_connections must be at least 1"
        raise ValueError(msg)
    return httpx.Client(
        timeout=httpx.Timeout(timeout),
        limits=httpx.Limits(max_connections=max_connections, max_keepalive_connections=max_connections),
    )


class HttpKeyValueDatabase(Database):
    """Database backend speaking PUT/GET/DELETE to ``http://host:port/db/<key>``.

    Every instance owns a single pooled ``httpx.Client``; nothing else may use
    it. Any non-2xx status or transport fault is logged and reported as
    ``DatabaseResult.FAIL``. No retries are attempted.
    """

    def __init__(
        self,
        *,
        timeout: float | None = None,
        max_connections: int = DEFAULT_MAX_CONNECTIONS,
        db_name_key: str = HTTP_DB_NAME_KEY,
        client: httpx.Client | None = None,
    ) -> None:
        """Create an uninitialized database.

        Parameters
        ----------
        timeout
            Request timeout in seconds, also bounding the wait for a pooled
            connection. ``None`` waits forever.
        max_connections
            Cap on concurrent connections held by the pool.
        db_name_key
            Job property naming the database on the backend host.
        client
            Optional injected client; ``timeout`` and ``max_connections``
            are ignored when given.
        """
        super().__init__()
        self._db_name_key = db_name_key
        self._client = client if client is not None else build_client(timeout=timeout, max_connections=max_connections)
        self._settings: ConnectionSettings | None = None
        self._base_url: str | None = None

    @property
    def settings(self) -> ConnectionSettings | None:
        """Settings applied by the last successful ``init``."""
        return self._settings

    @property
    def base_url(self) -> str | None:
        """Return ``http://<host>:<port>/<db>/``, or None before ``init``."""
        return self._base_url

    def url_for(self, key: str) -> str:
        """Return the resource URL for key; the key is not escaped."""
        if self._base_url is None:
            msg = "database is not initialized"
            raise RuntimeError(msg)
        return self._base_url + key

    @override
    def init(self, work_plan: Mapping[str, str], job: Mapping[str, str]) -> DatabaseResult:
        """Resolve host, port and database name; FAIL when any is missing."""
        try:
            settings = ConnectionSettings.from_properties(work_plan, job, db_name_key=self._db_name_key)
        except ConfigError as error:
            logger.critical("%s", error)
            return DatabaseResult.FAIL
        return self._apply(settings)

    def init_connection(self, host_name: str, host_port: int, db_name: str, *, job_name: str = "") -> DatabaseResult:
        """Initialize directly from connection values instead of properties."""
        return self._apply(
            ConnectionSettings(job_name=job_name, host_name=host_name, host_port=host_port, db_name=db_name)
        )

    def _apply(self, settings: ConnectionSettings) -> DatabaseResult:
        self._settings = settings
        self._base_url = settings.base_url
        logger.debug("Job %r using %s", settings.job_name, self._base_url)
        return DatabaseResult.OK

    @override
    def insert(self, query: Query) -> DatabaseResult:
        return self._send("insert", "PUT", query).result

    @override
    def update(self, query: Query) -> DatabaseResult:
        return self._send("update", "PUT", query).result

    @override
    def read(self, query: Query) -> DatabaseResult:
        return self._send("read", "GET", query).result

    @override
    def delete(self, query: Query) -> DatabaseResult:
        return self._send("delete", "DELETE", query).result

    def fetch(self, query: Query) -> OperationOutcome:
        """Read the value for ``query.key`` and return it with the outcome.

        Same request and classification as ``read``; the response body is
        available as ``outcome.payload``.
        """
        return self._send("fetch", "GET", query)

    def _send(self, operation: str, method: str, query: Query) -> OperationOutcome:
        if self._base_url is None:
            logger.error("Cannot execute %s on key %r: database is not initialized", operation, query.key)
            return OperationOutcome(DatabaseResult.FAIL, error="database is not initialized")

        url = self._base_url + query.key
        content: bytes | None = None
        headers: dict[str, str] | None = None
        if method == "PUT":
            content = query.value if query.value is not None else b""
            headers = {"Content-Type": OCTET_STREAM}

        try:
            response = self._client.request(method, url, content=content, headers=headers)
        except _TRANSPORT_ERRORS as error:
            logger.exception("Error in executing %s: %s %s", operation, method, url)
            return OperationOutcome(DatabaseResult.FAIL, error=str(error) or error.__class__.__name__)

        if not is_success_status(response.status_code):
            logger.error("Error in executing %s: %s %s returned %d", operation, method, url, response.status_code)
            return OperationOutcome(
                DatabaseResult.FAIL,
                status_code=response.status_code,
                payload=response.content,
                error=f"unexpected status {response.status_code}",
            )

        logger.debug("%s response: %r", operation.capitalize(), response.content)
        return OperationOutcome(DatabaseResult.OK, status_code=response.status_code, payload=response.content)

    @override
    def close(self) -> DatabaseResult:
        """Close the pooled client and every connection it holds."""
        try:
            self._client.close()
        except Exception:
            logger.exception("Error closing HTTP client")
            return DatabaseResult.FAIL
        return DatabaseResult.OK
