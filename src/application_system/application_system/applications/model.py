from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from ..core.enums import ApplicationStatus, ApplicationType


@dataclass(frozen=True)
class Application:
    employee_id: int
    type: ApplicationType
    name: str
    note: Optional[str]
    start_date: datetime
    end_date: datetime
    status: ApplicationStatus = ApplicationStatus.REQUESTED
    id: Optional[int] = None
    created_date: Optional[datetime] = None


@dataclass(frozen=True)
class NewApplication:
    """Input for creating an application; status is always REQUESTED."""

    title: str
    employee_id: int
    type: ApplicationType
    start_date: datetime
    end_date: datetime
    note: Optional[str] = None


@dataclass(frozen=True)
class ApplicationView:
    id: int
    title: str
    reason: Optional[str]
    type: ApplicationType
    started_date: str
    ended_date: str
    created_date: str
    status: ApplicationStatus

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "reason": self.reason,
            "type": self.type.value,
            "started_date": self.started_date,
            "ended_date": self.ended_date,
            "created_date": self.created_date,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class ApplicationList:
    applications: List[ApplicationView] = field(default_factory=list)
    page_number: int = 0
    page_size: int = 0
    total_records: int = 0
    total_pages: int = 0

    def to_dict(self) -> dict:
        return {
            "applications": [a.to_dict() for a in self.applications],
            "page_number": self.page_number,
            "page_size": self.page_size,
            "total_records": self.total_records,
            "total_pages": self.total_pages,
        }


@dataclass(frozen=True)
class YearlyStatistics:
    count_annual_leave: int = 0
    detail_leave_applications: List[str] = field(default_factory=list)
    detail_overtime_applications: List[str] = field(default_factory=list)
    overtime: str = "0.00h/0.00h"
    count_remote_days: int = 0

    def to_dict(self) -> dict:
        return {
            "count_annual_leave": self.count_annual_leave,
            "detail_leave_applications": list(self.detail_leave_applications),
            "detail_overtime_applications": list(self.detail_overtime_applications),
            "overtime": self.overtime,
            "count_remote_days": self.count_remote_days,
        }
