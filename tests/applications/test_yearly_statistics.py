from __future__ import annotations

from datetime import datetime

from src.application_system.application_system.applications.model import YearlyStatistics
from src.application_system.application_system.applications.statistics import (
    format_day_count,
    overtime_criteria,
)
from src.application_system.application_system.core.enums import ApplicationStatus, ApplicationType

LEAVE = ApplicationType.LEAVE
OVERTIME = ApplicationType.OVERTIME
REMOTE = ApplicationType.REMOTE
REQUESTED = ApplicationStatus.REQUESTED
APPROVED = ApplicationStatus.APPROVED


def _overtime(seed, *, status, employee_id=1, day=datetime(2024, 1, 1), hours=9):
    seed(
        employee_id=employee_id,
        type=OVERTIME,
        status=status,
        start_date=day.replace(hour=9),
        end_date=day.replace(hour=9 + hours),
        created_date=day,
    )


def test_empty_year_returns_zero_defaults(service):
    stats = service.get_yearly_statistics(employee_id=1, year=2024)

    assert stats == YearlyStatistics()
    assert stats.count_annual_leave == 0
    assert stats.detail_leave_applications == []
    assert stats.detail_overtime_applications == []
    assert stats.overtime == "0.00h/0.00h"
    assert stats.count_remote_days == 0


def test_one_day_approved_leave(service, seed):
    seed(type=LEAVE, status=APPROVED, start_date=datetime(2024, 1, 1), end_date=datetime(2024, 1, 2))

    stats = service.get_yearly_statistics(employee_id=1, year=2024)

    assert stats.count_annual_leave == 1
    assert stats.detail_leave_applications == ["2024/01/01 - 2024/01/02 - 1 Day"]


def test_leave_labels_use_raw_day_count(service, seed):
    seed(type=LEAVE, status=APPROVED, start_date=datetime(2024, 3, 1, 8), end_date=datetime(2024, 3, 1, 12))
    seed(type=LEAVE, status=APPROVED, start_date=datetime(2024, 4, 1), end_date=datetime(2024, 4, 3))
    seed(type=LEAVE, status=APPROVED, start_date=datetime(2024, 5, 1), end_date=datetime(2024, 5, 2, 12))

    stats = service.get_yearly_statistics(employee_id=1, year=2024)

    assert stats.detail_leave_applications == [
        "2024/03/01 - 2024/03/01 - 1 Day",
        "2024/04/01 - 2024/04/03 - 2 Days",
        "2024/05/01 - 2024/05/02 - 1.5 Days",
    ]


def test_leave_counts_only_approved_for_employee_and_creation_year(service, seed):
    seed(type=LEAVE, status=REQUESTED)
    seed(type=LEAVE, status=APPROVED, employee_id=2)
    seed(type=LEAVE, status=APPROVED, created_date=datetime(2023, 12, 30))
    # Created in December, taken in January: counts for the creation year.
    seed(
        type=LEAVE,
        status=APPROVED,
        start_date=datetime(2025, 1, 2),
        end_date=datetime(2025, 1, 3),
        created_date=datetime(2024, 12, 20),
    )

    stats = service.get_yearly_statistics(employee_id=1, year=2024)

    assert stats.count_annual_leave == 1
    assert stats.detail_leave_applications == ["2025/01/02 - 2025/01/03 - 1 Day"]


def test_overtime_month_with_requested_and_approved(service, seed):
    _overtime(seed, status=REQUESTED)
    _overtime(seed, status=APPROVED)

    stats = service.get_yearly_statistics(employee_id=1, year=2024)

    assert stats.detail_overtime_applications == ["2024/1 9.00h/9.00h"]
    assert stats.overtime == "9.00h/9.00h"


def test_overtime_month_without_approved_is_skipped(service, seed):
    _overtime(seed, status=REQUESTED, day=datetime(2024, 2, 1))
    _overtime(seed, status=APPROVED, day=datetime(2024, 3, 1))
    _overtime(seed, status=REQUESTED, day=datetime(2024, 4, 1), hours=2)
    _overtime(seed, status=APPROVED, day=datetime(2024, 4, 2), hours=1)

    stats = service.get_yearly_statistics(employee_id=1, year=2024)

    assert stats.detail_overtime_applications == ["2024/4 2.00h/1.00h"]
    assert stats.overtime == "2.00h/1.00h"


def test_overtime_sums_months_and_formats_two_decimals(service, seed):
    seed(
        type=OVERTIME,
        status=REQUESTED,
        start_date=datetime(2024, 11, 5, 18, 0),
        end_date=datetime(2024, 11, 5, 19, 20),
        created_date=datetime(2024, 11, 5),
    )
    _overtime(seed, status=APPROVED, day=datetime(2024, 11, 6), hours=1)
    _overtime(seed, status=REQUESTED, day=datetime(2024, 12, 1), hours=3)
    _overtime(seed, status=APPROVED, day=datetime(2024, 12, 1), hours=3)

    stats = service.get_yearly_statistics(employee_id=1, year=2024)

    assert stats.detail_overtime_applications == ["2024/11 1.33h/1.00h", "2024/12 3.00h/3.00h"]
    assert stats.overtime == "4.33h/4.00h"


def test_overtime_covers_every_employee(service, seed):
    _overtime(seed, status=REQUESTED, employee_id=7)
    _overtime(seed, status=APPROVED, employee_id=8)

    stats = service.get_yearly_statistics(employee_id=1, year=2024)

    assert stats.overtime == "9.00h/9.00h"


def test_overtime_criteria_ignores_employee():
    criteria = overtime_criteria(employee_id=5, year=2024, month=3, status=APPROVED)

    assert criteria.employee_id is None
    assert criteria.type == OVERTIME
    assert (criteria.created_year, criteria.created_month) == (2024, 3)


def test_remote_days_any_status(service, seed):
    seed(type=REMOTE, status=ApplicationStatus.REJECTED, start_date=datetime(2024, 1, 1), end_date=datetime(2024, 1, 2))

    stats = service.get_yearly_statistics(employee_id=1, year=2024)

    assert stats.count_remote_days == 1


def test_remote_days_truncate_summed_duration(service, seed):
    seed(type=REMOTE, start_date=datetime(2024, 1, 1), end_date=datetime(2024, 1, 2, 12))
    seed(type=REMOTE, status=APPROVED, start_date=datetime(2024, 2, 1), end_date=datetime(2024, 2, 2, 6))
    seed(type=REMOTE, employee_id=2, start_date=datetime(2024, 3, 1), end_date=datetime(2024, 3, 9))

    stats = service.get_yearly_statistics(employee_id=1, year=2024)

    assert stats.count_remote_days == 2


def test_statistics_are_repeatable(service, seed):
    seed(type=LEAVE, status=APPROVED)
    _overtime(seed, status=REQUESTED)
    _overtime(seed, status=APPROVED)
    seed(type=REMOTE)

    first = service.get_yearly_statistics(employee_id=1, year=2024)
    second = service.get_yearly_statistics(employee_id=1, year=2024)

    assert first == second


def test_format_day_count():
    assert format_day_count(2.0) == "2"
    assert format_day_count(1.25) == "1.25"

