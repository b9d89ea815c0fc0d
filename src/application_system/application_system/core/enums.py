from __future__ import annotations

from enum import Enum


class ApplicationType(str, Enum):
    """Loại đơn (nghỉ phép/tăng ca/làm từ xa...)."""

    LEAVE = "LEAVE"
    HOLIDAY = "HOLIDAY"
    OVERTIME = "OVERTIME"
    EARLYLEAVE = "EARLYLEAVE"
    GOINGOUT = "GOINGOUT"
    REMOTE = "REMOTE"


class ApplicationStatus(str, Enum):
    """Trạng thái luồng duyệt đơn."""

    REQUESTED = "REQUESTED"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    CANCELLED = "CANCELLED"
