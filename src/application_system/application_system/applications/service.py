from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import is_unset, to_naive_local
from ..common.pagination import paginate
from ..common.validators import require_enum, require_non_empty
from ..core.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, DISPLAY_DATETIME_FORMAT
from ..core.enums import ApplicationStatus, ApplicationType
from ..core.exceptions import ConflictError, NotFoundError
from .model import Application, ApplicationList, ApplicationView, NewApplication, YearlyStatistics
from .repository import ApplicationCriteria, ApplicationRepository
from .statistics import YearlyStatisticsAggregator
from .transitions import is_transition_forbidden

logger = logging.getLogger(__name__)


def to_view(app: Application) -> ApplicationView:
    return ApplicationView(
        id=int(app.id),
        title=app.name,
        reason=app.note,
        type=app.type,
        started_date=app.start_date.strftime(DISPLAY_DATETIME_FORMAT),
        ended_date=app.end_date.strftime(DISPLAY_DATETIME_FORMAT),
        created_date=app.created_date.strftime(DISPLAY_DATETIME_FORMAT) if app.created_date else "",
        status=app.status,
    )


class ApplicationService:
    def __init__(
        self,
        applications: ApplicationRepository,
        *,
        default_page: int = DEFAULT_PAGE,
        default_page_size: int = DEFAULT_PAGE_SIZE,
    ):
        self._applications = applications
        self._default_page = int(default_page)
        self._default_page_size = int(default_page_size)
        self._statistics = YearlyStatisticsAggregator(applications)

    def create_application(self, new_application: NewApplication) -> bool:
        """Create a REQUESTED application.

        Any failure, invalid input or store error alike, is logged and
        reported as ``False``.
        """
        try:
            application = Application(
                employee_id=int(new_application.employee_id),
                type=require_enum(ApplicationType, new_application.type, "Application type"),
                name=require_non_empty(new_application.title, "Title"),
                note=new_application.note,
                start_date=to_naive_local(new_application.start_date),
                end_date=to_naive_local(new_application.end_date),
                status=ApplicationStatus.REQUESTED,
            )
            created = self._applications.create(application)
            self._applications.save()
        except Exception:
            logger.exception("Failed to create application for employee %s", new_application.employee_id)
            return False

        logger.info("Created application %s for employee %s", created.id, created.employee_id)
        return True

    def list_applications(
        self,
        *,
        employee_id: int,
        application_type: ApplicationType,
        page: int,
        size: int,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
    ) -> ApplicationList:
        page = page if page > 0 else self._default_page
        size = size if size > 0 else self._default_page_size

        query = self._applications.find_all().where(
            ApplicationCriteria(employee_id=int(employee_id), type=application_type)
        )

        # Both bounds are required for the period filter.
        if not is_unset(date_from) and not is_unset(date_to):
            query = query.where(
                ApplicationCriteria(start_from=to_naive_local(date_from), end_to=to_naive_local(date_to))
            )

        result = paginate(query.order_by_id_desc(), page, size)

        return ApplicationList(
            applications=[to_view(a) for a in result.items],
            page_number=result.page_number,
            page_size=result.page_size,
            total_records=result.total_records,
            total_pages=result.total_pages,
        )

    def update_application_status(self, *, application_id: int, status: ApplicationStatus) -> None:
        application = self._applications.find_by_condition(
            ApplicationCriteria(application_id=int(application_id))
        ).first()
        if application is None:
            raise NotFoundError(f"Application {application_id} does not exist")

        if is_transition_forbidden(application.status, status):
            logger.warning(
                "Rejected status change of application %s: %s -> %s",
                application_id,
                application.status.value,
                status.value,
            )
            raise ConflictError(
                f"Application {application_id} cannot move from {application.status.value} to {status.value}"
            )

        self._applications.update(replace(application, status=status))
        self._applications.save()
        logger.info("Application %s status: %s -> %s", application_id, application.status.value, status.value)

    def get_yearly_statistics(self, *, employee_id: int, year: int) -> YearlyStatistics:
        return self._statistics.yearly_statistics(int(employee_id), int(year))
