from __future__ import annotations

from datetime import timedelta
from typing import Iterable, List, Tuple

from ..common.datetime_utils import total_days, total_hours, whole_days
from ..core.constants import DETAIL_DATE_FORMAT
from ..core.enums import ApplicationStatus, ApplicationType
from .model import Application, YearlyStatistics
from .repository import ApplicationCriteria, ApplicationRepository


def overtime_criteria(
    *, employee_id: int, year: int, month: int, status: ApplicationStatus
) -> ApplicationCriteria:
    """Criteria for one month of overtime.

    ``employee_id`` is accepted but not applied: overtime totals cover every
    employee.
    """
    return ApplicationCriteria(
        type=ApplicationType.OVERTIME,
        status=status,
        created_year=year,
        created_month=month,
    )


def total_span(applications: Iterable[Application]) -> timedelta:
    return sum((a.end_date - a.start_date for a in applications), timedelta())


def format_day_count(days: float) -> str:
    # Shortest round-trip text; whole numbers lose the trailing ".0".
    if float(days).is_integer():
        return str(int(days))
    return repr(float(days))


def leave_duration_label(app: Application) -> str:
    days = total_days(app.end_date - app.start_date)
    if days < 1:
        return "1 Day"
    return f"{format_day_count(days)} Days"


def format_hours_pair(requested: float, approved: float) -> str:
    return f"{requested:.2f}h/{approved:.2f}h"


class YearlyStatisticsAggregator:
    def __init__(self, applications: ApplicationRepository):
        self._applications = applications

    def _annual_leave(self, employee_id: int, year: int) -> List[str]:
        leaves = self._applications.find_by_condition(
            ApplicationCriteria(
                employee_id=int(employee_id),
                type=ApplicationType.LEAVE,
                status=ApplicationStatus.APPROVED,
                created_year=int(year),
            )
        ).all()

        return [
            f"{a.start_date.strftime(DETAIL_DATE_FORMAT)} - {a.end_date.strftime(DETAIL_DATE_FORMAT)}"
            f" - {leave_duration_label(a)}"
            for a in leaves
        ]

    def _overtime(self, employee_id: int, year: int) -> Tuple[List[str], str]:
        details: List[str] = []
        requested_in_year = 0.0
        approved_in_year = 0.0

        for month in range(1, 13):
            requested = self._applications.find_by_condition(
                overtime_criteria(
                    employee_id=employee_id, year=year, month=month, status=ApplicationStatus.REQUESTED
                )
            ).all()
            approved = self._applications.find_by_condition(
                overtime_criteria(
                    employee_id=employee_id, year=year, month=month, status=ApplicationStatus.APPROVED
                )
            ).all()

            # A month counts only when it has both requested and approved overtime.
            if not requested or not approved:
                continue

            requested_hours = total_hours(total_span(requested))
            approved_hours = total_hours(total_span(approved))
            details.append(f"{year}/{month} {format_hours_pair(requested_hours, approved_hours)}")
            requested_in_year += requested_hours
            approved_in_year += approved_hours

        return details, format_hours_pair(requested_in_year, approved_in_year)

    def _remote_days(self, employee_id: int, year: int) -> int:
        remotes = self._applications.find_by_condition(
            ApplicationCriteria(
                employee_id=int(employee_id),
                type=ApplicationType.REMOTE,
                created_year=int(year),
            )
        ).all()
        if not remotes:
            return 0
        return whole_days(total_span(remotes))

    def yearly_statistics(self, employee_id: int, year: int) -> YearlyStatistics:
        leave_details = self._annual_leave(employee_id, year)
        overtime_details, overtime = self._overtime(employee_id, year)

        return YearlyStatistics(
            count_annual_leave=len(leave_details),
            detail_leave_applications=leave_details,
            detail_overtime_applications=overtime_details,
            overtime=overtime,
            count_remote_days=self._remote_days(employee_id, year),
        )
