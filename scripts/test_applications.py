"""
Application Lifecycle Tests

Tests:
1. Applying: duplicates, closed drives, ineligible students
2. State machine transitions
3. Student tracker (timeline, fallbacks, ordering)
4. TPO status updates
"""
import pytest

from placementpro.core.exceptions import (
    DriveClosedError,
    DuplicateApplicationError,
    IneligibleError,
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
)
from placementpro.db.repository import applications_repo
from placementpro.schemas.schemas import ApplicationStatus, DriveStatus, StepState
from placementpro.services.application_service import (
    UNKNOWN_COMPANY,
    ApplicationService,
    can_transition,
    is_terminal,
    timeline,
    transition,
)
from placementpro.services.drive_service import DriveService

S = ApplicationStatus


# ============================================================
# [1] APPLY
# ============================================================

def test_apply_creates_applied_record(store):
    service = ApplicationService(store)
    application = service.apply("std3", "drive2")
    assert application.status == S.applied
    assert application.interview_slot is None
    assert application.id.startswith("app")
    assert service.find("std3", "drive2").id == application.id


def test_duplicate_apply_rejected_without_change(store):
    service = ApplicationService(store)
    before = len(applications_repo(store).all())
    with pytest.raises(DuplicateApplicationError) as exc:
        service.apply("std1", "drive1")
    assert exc.value.detail == "You have already applied to this drive"
    assert len(applications_repo(store).all()) == before


def test_apply_to_completed_drive(store):
    DriveService(store).set_status("drive2", DriveStatus.completed)
    with pytest.raises(DriveClosedError):
        ApplicationService(store).apply("std3", "drive2")


def test_apply_when_ineligible(store):
    with pytest.raises(IneligibleError) as exc:
        ApplicationService(store).apply("std4", "drive1")
    assert "cgpa" in exc.value.detail
    assert "backlogs" in exc.value.detail


def test_apply_to_missing_drive(store):
    with pytest.raises(NotFoundError):
        ApplicationService(store).apply("std1", "nope")


# ============================================================
# [2] STATE MACHINE
# ============================================================

@pytest.mark.parametrize("current,target", [
    (S.applied, S.shortlisted),
    (S.applied, S.rejected),
    (S.shortlisted, S.interview_scheduled),
    (S.interview_scheduled, S.selected),
    (S.interview_scheduled, S.shortlisted),
])
def test_allowed_transitions(current, target):
    assert can_transition(current, target)


@pytest.mark.parametrize("current,target", [
    (S.selected, S.rejected),
    (S.rejected, S.applied),
    (S.shortlisted, S.applied),
    (S.applied, S.selected),
])
def test_forbidden_transitions(current, target):
    assert not can_transition(current, target)


def test_terminal_states():
    assert is_terminal(S.selected)
    assert is_terminal(S.rejected)
    assert not is_terminal(S.applied)


def test_transition_returns_copy(store):
    original = applications_repo(store).get("app1")
    moved = transition(original, S.shortlisted)
    assert moved.status == S.shortlisted
    assert original.status == S.applied


def test_transition_out_of_terminal_raises(store):
    application = transition(applications_repo(store).get("app1"), S.rejected)
    with pytest.raises(InvalidTransitionError):
        transition(application, S.shortlisted)


# ============================================================
# [3] STUDENT TRACKER
# ============================================================

def test_timeline_for_shortlisted():
    states = [step.state for step in timeline(S.shortlisted)]
    assert states == [StepState.completed, StepState.current, StepState.pending, StepState.pending]


def test_timeline_for_rejected_is_all_pending():
    assert all(step.state == StepState.pending for step in timeline(S.rejected))


def test_list_for_student_joins_drive(store):
    views = ApplicationService(store).list_for_student("std1")
    companies = {v.company_name for v in views}
    assert companies == {"TCS Digital", "Amazon"}


def test_deleted_drive_shows_unknown_company(store):
    DriveService(store).delete("drive1")
    views = ApplicationService(store).list_for_student("std2")
    assert len(views) == 1
    assert views[0].company_name == UNKNOWN_COMPANY
    assert views[0].position is None


def test_most_recent_first(store):
    service = ApplicationService(store)
    new = service.apply("std1", "drive2")
    assert service.list_for_student("std1")[0].id == new.id


def test_status_counts(store):
    counts = ApplicationService(store).status_counts("std1")
    assert counts["applied"] == 1
    assert counts["shortlisted"] == 1
    assert counts["selected"] == 0


# ============================================================
# [4] TPO UPDATES
# ============================================================

def test_list_for_drive_has_student_names(store):
    views = ApplicationService(store).list_for_drive("drive1")
    assert [v.student_name for v in views] == ["Priya Sharma", "Arjun Patel"]


def test_shortlist_then_reject(store):
    service = ApplicationService(store)
    assert service.update_status("app1", S.shortlisted).status == S.shortlisted
    assert service.update_status("app1", S.rejected).status == S.rejected
    assert applications_repo(store).get("app1").status == S.rejected


def test_select_after_interview(store):
    assert ApplicationService(store).update_status("app4", S.selected).status == S.selected


def test_update_rejects_invalid_move(store):
    with pytest.raises(InvalidTransitionError):
        ApplicationService(store).update_status("app1", S.selected)
    assert applications_repo(store).get("app1").status == S.applied


def test_interview_status_goes_through_scheduler(store):
    with pytest.raises(ValidationError):
        ApplicationService(store).update_status("app1", S.interview_scheduled)
    with pytest.raises(ValidationError):
        ApplicationService(store).update_status("app4", S.shortlisted)
