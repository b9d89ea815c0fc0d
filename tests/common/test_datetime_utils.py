from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from src.application_system.application_system.common.datetime_utils import parse_iso_datetime, to_naive_local
from src.application_system.application_system.core.exceptions import ValidationError


def test_parse_plain_date_and_datetime():
    assert parse_iso_datetime("2024-06-03") == datetime(2024, 6, 3)
    assert parse_iso_datetime("2024-06-03T09:30") == datetime(2024, 6, 3, 9, 30)


def test_parse_offset_datetime_returns_naive_local_time():
    parsed = parse_iso_datetime("2024-06-03T09:00:00+07:00")

    expected = datetime(2024, 6, 3, 2, 0, tzinfo=timezone.utc).astimezone().replace(tzinfo=None)
    assert parsed.tzinfo is None
    assert parsed == expected


def test_naive_values_are_left_alone():
    value = datetime(2024, 6, 3, 9, 0)
    assert to_naive_local(value) is value


def test_aware_values_can_be_subtracted_from_naive_ones():
    start = to_naive_local(datetime(2024, 6, 3, 9, 0, tzinfo=timezone(timedelta(hours=7))))
    end = to_naive_local(datetime(2024, 6, 3, 2, 0, tzinfo=timezone.utc)) + timedelta(hours=9)
    assert end - start == timedelta(hours=9)


def test_parse_rejects_garbage():
    with pytest.raises(ValidationError):
        parse_iso_datetime("03/06/2024")
