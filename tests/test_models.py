import dataclasses

import pytest
from hypothesis import given
from hypothesis import strategies as st

from kv_bench.models import DatabaseResult, OperationOutcome, Query, is_success_status


def test_query_is_immutable() -> None:
    query = Query("k1", b"AB")
    with pytest.raises(dataclasses.FrozenInstanceError):
        query.key = "k2"  # type: ignore[misc]


def test_query_value_defaults_to_none_for_reads() -> None:
    assert Query("k1").value is None


def test_outcome_ok_follows_result() -> None:
    assert OperationOutcome(DatabaseResult.OK, status_code=200).ok is True
    assert OperationOutcome(DatabaseResult.FAIL, error="boom").ok is False


@pytest.mark.parametrize(
    ("status_code", "expected"),
    [(199, False), (200, True), (201, True), (204, True), (299, True), (300, False), (404, False), (500, False)],
)
def test_status_classification_boundaries(status_code: int, expected: bool) -> None:
    assert is_success_status(status_code) is expected


@given(status_code=st.integers(min_value=100, max_value=599))
def test_only_2xx_is_success(status_code: int) -> None:
    assert is_success_status(status_code) is (status_code // 100 == 2)  # noqa: PLR2004
