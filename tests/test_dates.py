# tests/test_dates.py

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta, timezone

import pytest

from taskpulse.due.dates import DueValueShape, classify_due_value, end_of_day, normalize_due_date

from .fakes import US_EASTERN, BrokenStamp, DatetimeStamp, JsStyleStamp, StoreTimestamp


@pytest.mark.parametrize(
    ("raw", "shape"),
    [
        ("2024-01-01", DueValueShape.TEXT),
        ("", DueValueShape.TEXT),
        ({"seconds": 1700000000, "nanoseconds": 0}, DueValueShape.EPOCH_SECONDS),
        (StoreTimestamp(seconds=1700000000), DueValueShape.EPOCH_SECONDS),
        (DatetimeStamp(datetime(2024, 1, 1)), DueValueShape.CONVERTIBLE),
        (JsStyleStamp(datetime(2024, 1, 1)), DueValueShape.CONVERTIBLE),
        (datetime(2024, 1, 1), DueValueShape.OTHER),
        (1700000000000, DueValueShape.OTHER),
        ({"seconds": "1700000000"}, DueValueShape.OTHER),
        ({"seconds": True}, DueValueShape.OTHER),
    ],
)
def test_classify_due_value(raw, shape) -> None:
    assert classify_due_value(raw) is shape


def test_iso_date_is_local_midnight() -> None:
    assert normalize_due_date("2024-01-01") == datetime(2024, 1, 1).astimezone()


def test_iso_datetime_with_zulu_suffix() -> None:
    got = normalize_due_date("2023-11-14T22:13:20Z")
    assert got is not None
    assert got.timestamp() == 1700000000


def test_epoch_seconds_record_becomes_millisecond_epoch() -> None:
    for raw in ({"seconds": 1700000000}, StoreTimestamp(seconds=1700000000, nanoseconds=5)):
        got = normalize_due_date(raw)
        assert got is not None
        assert round(got.timestamp() * 1000) == 1700000000 * 1000


def test_epoch_seconds_matches_equivalent_string() -> None:
    assert normalize_due_date({"seconds": 1700000000}) == normalize_due_date("2023-11-14T22:13:20+00:00")


def test_conversion_hooks() -> None:
    aware = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)
    assert normalize_due_date(DatetimeStamp(aware)) == aware
    assert normalize_due_date(JsStyleStamp(aware)) == aware
    assert normalize_due_date(DatetimeStamp(date(2024, 3, 1))) == datetime(2024, 3, 1).astimezone()


def test_conversion_returning_garbage_is_unrepresentable() -> None:
    assert normalize_due_date(JsStyleStamp("tomorrow")) is None


def test_failing_conversion_is_logged_not_raised(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="taskpulse.due.dates"):
        assert normalize_due_date(BrokenStamp()) is None
    assert any("Error resolving due date" in r.getMessage() for r in caplog.records)


def test_best_effort_values() -> None:
    naive = datetime(2024, 5, 2, 8, 15)
    assert normalize_due_date(naive) == naive.astimezone()
    assert normalize_due_date(date(2024, 5, 2)) == datetime(2024, 5, 2).astimezone()
    got = normalize_due_date(1700000000000)
    assert got is not None and got.timestamp() == 1700000000


@pytest.mark.parametrize(
    "raw",
    [
        None,
        "",
        "   ",
        "not-a-date",
        "2024-13-45",
        {"seconds": 10**20},
        10**20,
        float("nan"),
        float("inf"),
        True,
        [2024, 1, 1],
        {"when": "2024-01-01"},
        object(),
    ],
)
def test_unrepresentable_values_return_none(raw) -> None:
    assert normalize_due_date(raw) is None


def test_end_of_day_is_last_millisecond_of_local_day() -> None:
    instant = datetime(2024, 6, 15, 10, 30).astimezone()
    eod = end_of_day(instant)
    assert (eod.year, eod.month, eod.day) == (2024, 6, 15)
    assert (eod.hour, eod.minute, eod.second, eod.microsecond) == (23, 59, 59, 999000)
    assert end_of_day(eod) == eod


def test_end_of_day_uses_the_evening_offset_on_dst_days(local_tz) -> None:
    local_tz(US_EASTERN)

    # 2024-03-10: clocks jump from EST (-5) to EDT (-4) at 02:00.
    eod = end_of_day(datetime(2024, 3, 10, 1, 0))
    assert (eod.month, eod.day, eod.hour, eod.minute) == (3, 10, 23, 59)
    assert eod.utcoffset() == timedelta(hours=-4)

    # 2024-11-03: back from EDT to EST.
    eod = end_of_day(datetime(2024, 11, 3, 0, 30))
    assert (eod.month, eod.day, eod.hour, eod.minute) == (11, 3, 23, 59)
    assert eod.utcoffset() == timedelta(hours=-5)


@pytest.mark.parametrize("raw", ["2024/06/01", "06/01/2024", "June 1, 2024", "tomorrow"])
def test_only_iso_text_is_parsed(raw) -> None:
    assert classify_due_value(raw) is DueValueShape.TEXT
    assert normalize_due_date(raw) is None
