from __future__ import annotations

import importlib
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.application_system.application_system.applications.model import NewApplication
from src.application_system.application_system.container import build_container
from src.application_system.application_system.core.enums import ApplicationType

DEMO_APPLICATIONS = [
    NewApplication(
        title="Nghỉ phép năm",
        employee_id=1,
        type=ApplicationType.LEAVE,
        start_date=datetime(2024, 3, 4, 8, 0),
        end_date=datetime(2024, 3, 6, 8, 0),
        note="Việc gia đình",
    ),
    NewApplication(
        title="Tăng ca cuối tháng",
        employee_id=1,
        type=ApplicationType.OVERTIME,
        start_date=datetime(2024, 3, 29, 18, 0),
        end_date=datetime(2024, 3, 29, 21, 30),
        note="Chốt báo cáo",
    ),
    NewApplication(
        title="Làm việc từ xa",
        employee_id=2,
        type=ApplicationType.REMOTE,
        start_date=datetime(2024, 4, 1, 8, 0),
        end_date=datetime(2024, 4, 3, 8, 0),
        note=None,
    ),
]


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)
    container = build_container(db_config=db_config, store_backend=getattr(settings, "STORE_BACKEND", "mysql"))

    created = sum(1 for a in DEMO_APPLICATIONS if container.application_service.create_application(a))
    print(
        f"OK: Seeded {created}/{len(DEMO_APPLICATIONS)} applications -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
    )


if __name__ == "__main__":
    main()
