"""Database interface definitions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Self


if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import TracebackType

    from kv_bench.models import DatabaseResult, Query


class Database(ABC):
    """Synchronous key-value database driven by the benchmarking harness.

    Every operation blocks until the backend answers and reports its outcome
    as a ``DatabaseResult``; implementations never raise across this
    interface.
    """

    @abstractmethod
    def init(self, work_plan: Mapping[str, str], job: Mapping[str, str]) -> DatabaseResult:
        """Read required settings from the work-plan and job properties."""

    @abstractmethod
    def insert(self, query: Query) -> DatabaseResult:
        """Store ``query.value`` under ``query.key``."""

    @abstractmethod
    def update(self, query: Query) -> DatabaseResult:
        """Overwrite the value under ``query.key``."""

    @abstractmethod
    def read(self, query: Query) -> DatabaseResult:
        """Fetch the value under ``query.key``."""

    @abstractmethod
    def delete(self, query: Query) -> DatabaseResult:
        """Remove the value under ``query.key``."""

    @abstractmethod
    def close(self) -> DatabaseResult:
        """Release backend resources. Must be called at most once."""

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        _ = self.close()
