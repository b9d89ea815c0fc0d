from __future__ import annotations

from datetime import datetime
from typing import Optional

import pytest

from src.application_system.application_system.applications.memory_repository import InMemoryApplicationRepository
from src.application_system.application_system.applications.model import Application
from src.application_system.application_system.applications.service import ApplicationService
from src.application_system.application_system.core.enums import ApplicationStatus, ApplicationType


@pytest.fixture
def repo():
    return InMemoryApplicationRepository(clock=lambda: datetime(2024, 6, 1, 9, 0))


@pytest.fixture
def service(repo):
    return ApplicationService(repo, default_page=1, default_page_size=10)


@pytest.fixture
def seed(repo):
    def _seed(
        *,
        employee_id: int = 1,
        type: ApplicationType = ApplicationType.LEAVE,
        status: ApplicationStatus = ApplicationStatus.REQUESTED,
        start_date: datetime = datetime(2024, 1, 1),
        end_date: datetime = datetime(2024, 1, 2),
        created_date: Optional[datetime] = datetime(2024, 1, 1),
        name: str = "Application",
        note: Optional[str] = "Note",
    ) -> Application:
        app = repo.create(
            Application(
                employee_id=employee_id,
                type=type,
                name=name,
                note=note,
                start_date=start_date,
                end_date=end_date,
                status=status,
                created_date=created_date,
            )
        )
        repo.save()
        return app

    return _seed
