"""Connection settings resolved from the harness configuration mappings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Mapping


JOB_NAME_KEY = "job.name"
WORK_HOST_KEY = "work.host"
WORK_PORT_KEY = "work.port"
HTTP_DB_NAME_KEY = "rocksdb.dbName"

_MAX_PORT = 65535


class ConfigError(ValueError):
    """Base class for configuration lookup failures."""

    def __init__(self, key: str, message: str) -> None:
        super().__init__(message)
        self.key = key


class MissingSettingError(ConfigError):
    """Raised when a required setting is absent."""

    def __init__(self, key: str, message: str | None = None) -> None:
        super().__init__(key, message or f"{key} is not specified")


class MalformedSettingError(ConfigError):
    """Raised when a setting is present but cannot be interpreted."""

    def __init__(self, key: str, value: str, expected: str) -> None:
        super().__init__(key, f"{key}={value!r} is not {expected}")
        self.value = value


def get_str(properties: Mapping[str, str], key: str, description: str | None = None) -> str:
    """Return the string value for key, raising ``MissingSettingError`` if absent."""
    value = properties.get(key)
    if value is None:
        raise MissingSettingError(key, f"{description} is not specified" if description else None)
    return value


def get_int(properties: Mapping[str, str], key: str, description: str | None = None) -> int:
    """Return the value for key parsed as a base-10 integer."""
    raw = get_str(properties, key, description)
    try:
        return int(raw.strip(), 10)
    except ValueError as error:
        raise MalformedSettingError(key, raw, "an integer") from error


def _get_port(properties: Mapping[str, str]) -> int:
    port = get_int(properties, WORK_PORT_KEY, "Host port")
    if not 0 < port <= _MAX_PORT:
        raise MalformedSettingError(WORK_PORT_KEY, str(port), f"a port in 1..{_MAX_PORT}")
    return port


@dataclass(frozen=True, slots=True)
class ConnectionSettings:
    """Everything needed to address one database on one backend host."""

    job_name: str
    host_name: str
    host_port: int
    db_name: str

    @property
    def base_url(self) -> str:
        """Return ``http://<host>:<port>/<db>/``; keys are appended verbatim."""
        return f"http://{self.host_name}:{self.host_port}/{self.db_name}/"

    @classmethod
    def from_properties(
        cls,
        work_plan: Mapping[str, str],
        job: Mapping[str, str],
        *,
        db_name_key: str = HTTP_DB_NAME_KEY,
    ) -> ConnectionSettings:
        """Resolve the four required settings, stopping at the first failure.

        Parameters
        ----------
        work_plan
            Work-plan properties holding the host name and port.
        job
            Job properties holding the job name and the database name.
        db_name_key
            Backend-specific key naming the database in ``job``.

        Raises
        ------
        MissingSettingError
            When any setting is absent.
        MalformedSettingError
            When the port is not an integer in the valid port range.
        """
        job_name = get_str(job, JOB_NAME_KEY, "Job name")
        host_name = get_str(work_plan, WORK_HOST_KEY, "Hostname")
        host_port = _get_port(work_plan)
        db_name = job.get(db_name_key)
        if db_name is None:
            msg = f"Database name ({db_name_key}) is not specified for job {job_name}"
            raise MissingSettingError(db_name_key, msg)
        return cls(job_name=job_name, host_name=host_name, host_port=host_port, db_name=db_name)
