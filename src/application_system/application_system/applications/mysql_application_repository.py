from __future__ import annotations

import threading
from dataclasses import replace
from typing import List, Optional, Sequence, Tuple

import mysql.connector

from ..common.datetime_utils import now_local
from ..core.enums import ApplicationStatus, ApplicationType
from ..core.exceptions import StoreError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, open_connection
from .model import Application
from .repository import ApplicationCriteria, ApplicationRepository

_COLUMNS = "id, employee_id, name, note, type, status, start_date, end_date, created_date"

# MySQL has no OFFSET without LIMIT.
_NO_LIMIT = 18446744073709551615


def _row_to_application(r: dict) -> Application:
    return Application(
        id=int(r["id"]),
        employee_id=int(r["employee_id"]),
        type=ApplicationType(r["type"]),
        status=ApplicationStatus(r["status"]),
        name=r["name"],
        note=r.get("note"),
        start_date=r["start_date"],
        end_date=r["end_date"],
        created_date=r.get("created_date"),
    )


def build_where(criteria: Sequence[ApplicationCriteria]) -> Tuple[str, list]:
    clauses = ["1=1"]
    params: list[object] = []

    for c in criteria:
        if c.application_id is not None:
            clauses.append("id=%s")
            params.append(int(c.application_id))
        if c.employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(int(c.employee_id))
        if c.type is not None:
            clauses.append("type=%s")
            params.append(c.type.value)
        if c.status is not None:
            clauses.append("status=%s")
            params.append(c.status.value)
        if c.created_year is not None:
            clauses.append("YEAR(created_date)=%s")
            params.append(int(c.created_year))
        if c.created_month is not None:
            clauses.append("MONTH(created_date)=%s")
            params.append(int(c.created_month))
        if c.start_from is not None:
            clauses.append("start_date>=%s")
            params.append(c.start_from)
        if c.end_to is not None:
            clauses.append("end_date<=%s")
            params.append(c.end_to)

    return " AND ".join(clauses), params


class MySQLApplicationQuery:
    def __init__(
        self,
        conn_factory: DatabaseConnection,
        criteria: Tuple[ApplicationCriteria, ...] = (),
        newest_first: bool = False,
    ):
        self._conn_factory = conn_factory
        self._criteria = criteria
        self._newest_first = newest_first

    def where(self, criteria: ApplicationCriteria) -> "MySQLApplicationQuery":
        return MySQLApplicationQuery(self._conn_factory, self._criteria + (criteria,), self._newest_first)

    def order_by_id_desc(self) -> "MySQLApplicationQuery":
        return MySQLApplicationQuery(self._conn_factory, self._criteria, True)

    def count(self) -> int:
        where, params = build_where(self._criteria)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT COUNT(*) AS total FROM applications WHERE {where}", tuple(params))
            r = fetchone(cur)
            return int(r["total"]) if r else 0

    def fetch(self, *, offset: int = 0, limit: Optional[int] = None) -> Sequence[Application]:
        where, params = build_where(self._criteria)
        order = "ORDER BY id DESC" if self._newest_first else "ORDER BY id"
        paging = ""
        if limit is not None or offset:
            paging = "LIMIT %s OFFSET %s"
            params = params + [int(limit) if limit is not None else _NO_LIMIT, int(offset)]

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM applications WHERE {where} {order} {paging}".strip(),
                tuple(params),
            )
            return [_row_to_application(r) for r in fetchall(cur)]

    def first(self) -> Optional[Application]:
        rows = self.fetch(limit=1)
        return rows[0] if rows else None

    def all(self) -> List[Application]:
        return list(self.fetch())


class MySQLApplicationRepository(ApplicationRepository):
    """Reads use short-lived connections; writes share one transaction per
    thread that stays open until save()."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory
        self._local = threading.local()

    def _write(self, sql: str, params: tuple):
        tx = getattr(self._local, "tx", None)
        if tx is None:
            conn = open_connection(self._conn_factory)
            tx = (conn, conn.cursor())
            self._local.tx = tx
        _, cur = tx
        try:
            cur.execute(sql, params)
        except mysql.connector.Error as e:
            self._discard(rollback=True)
            raise StoreError(str(e)) from e
        return cur

    def _discard(self, *, rollback: bool) -> None:
        conn, cur = self._local.tx
        self._local.tx = None
        try:
            if rollback:
                conn.rollback()
        finally:
            cur.close()
            conn.close()

    def create(self, application: Application) -> Application:
        created_date = application.created_date or now_local()
        cur = self._write(
            """
            INSERT INTO applications(employee_id, name, note, type, status, start_date, end_date, created_date)
            VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
            """,
            (
                int(application.employee_id),
                application.name,
                application.note,
                application.type.value,
                application.status.value,
                application.start_date,
                application.end_date,
                created_date,
            ),
        )
        return replace(application, id=int(cur.lastrowid), created_date=created_date)

    def find_all(self) -> MySQLApplicationQuery:
        return MySQLApplicationQuery(self._conn_factory)

    def find_by_condition(self, criteria: ApplicationCriteria) -> MySQLApplicationQuery:
        return self.find_all().where(criteria)

    def update(self, application: Application) -> None:
        if application.id is None:
            raise StoreError("Cannot update an application without id")
        self._write(
            """
            UPDATE applications
            SET name=%s, note=%s, status=%s, start_date=%s, end_date=%s
            WHERE id=%s
            """,
            (
                application.name,
                application.note,
                application.status.value,
                application.start_date,
                application.end_date,
                int(application.id),
            ),
        )

    def save(self) -> None:
        if getattr(self._local, "tx", None) is None:
            return
        conn, _ = self._local.tx
        try:
            conn.commit()
        except mysql.connector.Error as e:
            self._discard(rollback=True)
            raise StoreError(str(e)) from e
        self._discard(rollback=False)
