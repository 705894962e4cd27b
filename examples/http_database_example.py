"""Minimal example driving HttpKeyValueDatabase the way a benchmark harness does."""

from kv_bench import DatabaseResult, Query, create_database
from kv_bench.config import HTTP_DB_NAME_KEY, JOB_NAME_KEY, WORK_HOST_KEY, WORK_PORT_KEY


def main() -> None:
    """Run insert/read/update/delete against a backend on localhost:8080."""
    work_plan = {WORK_HOST_KEY: "localhost", WORK_PORT_KEY: "8080"}
    job = {JOB_NAME_KEY: "example", HTTP_DB_NAME_KEY: "mydb"}

    database = create_database("http", timeout=5.0)
    try:
        if database.init(work_plan, job) is not DatabaseResult.OK:
            print("init failed")
            return
        print("insert:", database.insert(Query("k1", b"AB")).name)
        print("read:", database.read(Query("k1")).name)
        print("update:", database.update(Query("k1", b"CD")).name)
        print("delete:", database.delete(Query("k1")).name)
        print("read after delete:", database.read(Query("k1")).name)
    finally:
        _ = database.close()


if __name__ == "__main__":
    main()
