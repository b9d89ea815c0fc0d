from __future__ import annotations

import threading
from dataclasses import replace
from datetime import datetime
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ..common.datetime_utils import now_local
from ..core.exceptions import StoreError
from .model import Application
from .repository import ApplicationCriteria, ApplicationRepository


class InMemoryApplicationQuery:
    def __init__(
        self,
        source: Callable[[], List[Application]],
        criteria: Tuple[ApplicationCriteria, ...] = (),
        newest_first: bool = False,
    ):
        self._source = source
        self._criteria = criteria
        self._newest_first = newest_first

    def where(self, criteria: ApplicationCriteria) -> "InMemoryApplicationQuery":
        return InMemoryApplicationQuery(self._source, self._criteria + (criteria,), self._newest_first)

    def order_by_id_desc(self) -> "InMemoryApplicationQuery":
        return InMemoryApplicationQuery(self._source, self._criteria, True)

    def _run(self) -> List[Application]:
        rows = [a for a in self._source() if all(c.matches(a) for c in self._criteria)]
        if self._newest_first:
            rows.sort(key=lambda a: a.id or 0, reverse=True)
        return rows

    def count(self) -> int:
        return len(self._run())

    def fetch(self, *, offset: int = 0, limit: Optional[int] = None) -> Sequence[Application]:
        rows = self._run()
        end = None if limit is None else offset + limit
        return rows[offset:end]

    def first(self) -> Optional[Application]:
        rows = self.fetch(limit=1)
        return rows[0] if rows else None

    def all(self) -> List[Application]:
        return self._run()


class InMemoryApplicationRepository(ApplicationRepository):
    """Process-local store used by the testing settings and unit tests.

    Writes are staged per thread and become visible to queries on save().
    """

    def __init__(self, *, clock: Callable[[], datetime] = now_local):
        self._clock = clock
        self._lock = threading.Lock()
        self._records: Dict[int, Application] = {}
        self._next_id = 1
        self._local = threading.local()

    def _pending(self) -> List[Application]:
        pending = getattr(self._local, "pending", None)
        if pending is None:
            pending = []
            self._local.pending = pending
        return pending

    def _snapshot(self) -> List[Application]:
        with self._lock:
            return [self._records[k] for k in sorted(self._records)]

    def create(self, application: Application) -> Application:
        with self._lock:
            new_id = self._next_id
            self._next_id += 1
        created = replace(
            application,
            id=new_id,
            created_date=application.created_date or self._clock(),
        )
        self._pending().append(created)
        return created

    def find_all(self) -> InMemoryApplicationQuery:
        return InMemoryApplicationQuery(self._snapshot)

    def find_by_condition(self, criteria: ApplicationCriteria) -> InMemoryApplicationQuery:
        return self.find_all().where(criteria)

    def update(self, application: Application) -> None:
        if application.id is None:
            raise StoreError("Cannot update an application without id")
        self._pending().append(application)

    def save(self) -> None:
        pending = self._pending()
        with self._lock:
            for app in pending:
                if app.id is None:
                    raise StoreError("Cannot save an application without id")
                self._records[app.id] = app
        pending.clear()
