import pytest

from src.application_system.application_system.applications.transitions import is_transition_forbidden
from src.application_system.application_system.core.enums import ApplicationStatus as S


@pytest.mark.parametrize("requested", list(S))
def test_nothing_leaves_rejected(requested):
    assert is_transition_forbidden(S.REJECTED, requested)


def test_approved_cannot_go_back_to_requested():
    assert is_transition_forbidden(S.APPROVED, S.REQUESTED)


@pytest.mark.parametrize("requested", [S.APPROVED, S.REJECTED, S.CANCELLED])
def test_approved_can_be_reapproved_rejected_or_cancelled(requested):
    assert not is_transition_forbidden(S.APPROVED, requested)


@pytest.mark.parametrize("current", [S.REQUESTED, S.CANCELLED])
@pytest.mark.parametrize("requested", list(S))
def test_requested_and_cancelled_can_move_anywhere(current, requested):
    assert not is_transition_forbidden(current, requested)
