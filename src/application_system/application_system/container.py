from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .applications.memory_repository import InMemoryApplicationRepository
from .applications.mysql_application_repository import MySQLApplicationRepository
from .applications.repository import ApplicationRepository
from .applications.service import ApplicationService
from .core.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from .database.connection import DBConfig, DatabaseConnection


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    applications_repo: ApplicationRepository

    application_service: ApplicationService


def build_container(
    *,
    db_config: dict,
    store_backend: str = "mysql",
    default_page: int = DEFAULT_PAGE,
    default_page_size: int = DEFAULT_PAGE_SIZE,
) -> Container:
    backend = (store_backend or "mysql").strip().lower()

    conn: Optional[DatabaseConnection] = None
    if backend == "memory":
        applications_repo: ApplicationRepository = InMemoryApplicationRepository()
    elif backend == "mysql":
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
        applications_repo = MySQLApplicationRepository(conn)
    else:
        raise ValueError(f"Unsupported STORE_BACKEND: {store_backend!r}")

    application_service = ApplicationService(
        applications_repo,
        default_page=default_page,
        default_page_size=default_page_size,
    )

    return Container(
        conn=conn,
        applications_repo=applications_repo,
        application_service=application_service,
    )
