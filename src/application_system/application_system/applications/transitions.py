from __future__ import annotations

from ..core.enums import ApplicationStatus


def is_transition_forbidden(current: ApplicationStatus, requested: ApplicationStatus) -> bool:
    """Only two edges are blocked: anything out of REJECTED, and APPROVED back
    to REQUESTED. Everything else (re-approving, cancelling an approved
    application, leaving CANCELLED) is allowed.
    """
    return current == ApplicationStatus.REJECTED or (
        current == ApplicationStatus.APPROVED and requested == ApplicationStatus.REQUESTED
    )
