"""Request and result types shared by every database backend."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DatabaseResult(Enum):
    """Two-valued outcome returned by every ``Database`` operation."""

    OK = "ok"
    FAIL = "fail"


@dataclass(frozen=True, slots=True)
class Query:
    """A single key-value request issued by the benchmarking harness.

    ``value`` is only meaningful for writes and is left as ``None`` for reads
    and deletes.
    """

    key: str
    value: bytes | None = None


@dataclass(frozen=True, slots=True)
class OperationOutcome:
    """Detailed outcome of one operation, alongside the plain result.

    Parameters
    ----------
    result
        The ``DatabaseResult`` the harness sees.
    status_code
        HTTP status of the response, or None when no response arrived.
    payload
        Response body, when one was read.
    error
        Short description of the failure cause.
    """

    result: DatabaseResult
    status_code: int | None = None
    payload: bytes | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.result is DatabaseResult.OK


def is_success_status(status_code: int) -> bool:
    """Return True for 2xx status codes."""
    return 200 <= status_code < 300  # noqa: PLR2004
