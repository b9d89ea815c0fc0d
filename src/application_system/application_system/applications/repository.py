from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Protocol, Sequence

from ..core.enums import ApplicationStatus, ApplicationType
from .model import Application


@dataclass(frozen=True)
class ApplicationCriteria:
    """AND-combined filter over application records.

    Fields left as None do not take part in the filter. ``start_from`` keeps
    records with ``start_date >= start_from``; ``end_to`` keeps records with
    ``end_date <= end_to``. Year and month are matched on ``created_date``.
    """

    application_id: Optional[int] = None
    employee_id: Optional[int] = None
    type: Optional[ApplicationType] = None
    status: Optional[ApplicationStatus] = None
    created_year: Optional[int] = None
    created_month: Optional[int] = None
    start_from: Optional[datetime] = None
    end_to: Optional[datetime] = None

    def matches(self, app: Application) -> bool:
        if self.application_id is not None and app.id != self.application_id:
            return False
        if self.employee_id is not None and app.employee_id != self.employee_id:
            return False
        if self.type is not None and app.type != self.type:
            return False
        if self.status is not None and app.status != self.status:
            return False
        created = app.created_date
        if self.created_year is not None and (created is None or created.year != self.created_year):
            return False
        if self.created_month is not None and (created is None or created.month != self.created_month):
            return False
        if self.start_from is not None and app.start_date < self.start_from:
            return False
        if self.end_to is not None and app.end_date > self.end_to:
            return False
        return True


class ApplicationQuery(Protocol):
    """Lazy, chainable query; nothing hits the store until a terminal call."""

    def where(self, criteria: ApplicationCriteria) -> "ApplicationQuery":
        raise NotImplementedError

    def order_by_id_desc(self) -> "ApplicationQuery":
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError

    def fetch(self, *, offset: int = 0, limit: Optional[int] = None) -> Sequence[Application]:
        raise NotImplementedError

    def first(self) -> Optional[Application]:
        raise NotImplementedError

    def all(self) -> List[Application]:
        raise NotImplementedError


class ApplicationRepository(Protocol):
    def create(self, application: Application) -> Application:
        """Stage a new record and return it with its store-assigned id."""

        raise NotImplementedError

    def find_all(self) -> ApplicationQuery:
        raise NotImplementedError

    def find_by_condition(self, criteria: ApplicationCriteria) -> ApplicationQuery:
        raise NotImplementedError

    def update(self, application: Application) -> None:
        raise NotImplementedError

    def save(self) -> None:
        """Commit pending writes."""

        raise NotImplementedError
