"""
Interview Scheduling Tests

Tests:
1. Slot grid generation
2. Grid occupancy from stored applications
3. Assign / remove slot and the status they imply
4. Double booking is allowed and reported
"""
from datetime import datetime

import pytest
from pydantic import ValidationError as PydanticValidationError

from placementpro.core.config import Settings
from placementpro.core.exceptions import InvalidTransitionError, NotFoundError, ValidationError
from placementpro.db.repository import applications_repo, drives_repo
from placementpro.schemas.schemas import ApplicationStatus
from placementpro.services.application_service import ApplicationService
from placementpro.services.scheduling_service import InterviewScheduler, generate_slot_times


def app_for(store, student_id, drive_id):
    return ApplicationService(store).find(student_id, drive_id)


# ============================================================
# [1] GRID
# ============================================================

def test_default_day_has_17_slots():
    times = generate_slot_times()
    assert len(times) == 17
    assert times[0] == "09:00"
    assert times[1] == "09:30"
    assert times[-1] == "17:00"


def test_custom_interval():
    assert generate_slot_times("10:00", "11:00", 20) == ["10:00", "10:20", "10:40", "11:00"]


def test_interval_must_be_positive():
    with pytest.raises(ValueError):
        generate_slot_times(interval_minutes=0)


def test_scheduler_reads_settings(store):
    settings = Settings(interview_day_start="13:00", interview_day_end="14:00", interview_slot_minutes=60)
    assert InterviewScheduler(store, settings).slot_times == ["13:00", "14:00"]


@pytest.mark.parametrize("overrides", [
    {"interview_slot_minutes": 0},
    {"interview_day_start": "9am"},
    {"interview_day_end": "24:00"},
    {"interview_day_start": "17:00", "interview_day_end": "09:00"},
])
def test_bad_interview_settings_fail_at_load(overrides):
    with pytest.raises(PydanticValidationError):
        Settings(**overrides)


def test_bad_interview_env_var_fails_at_load(monkeypatch):
    monkeypatch.setenv("PLACEMENT_INTERVIEW_SLOT_MINUTES", "-15")
    with pytest.raises(PydanticValidationError):
        Settings()


# ============================================================
# [2] OCCUPANCY
# ============================================================

def test_grid_shows_seeded_slots(store):
    grid = {slot.time: slot.student_id for slot in InterviewScheduler(store).build_grid("drive3")}
    assert grid["10:00"] == "std1"
    assert grid["11:00"] == "std3"
    assert grid["09:00"] is None


def test_grid_is_idempotent(store):
    scheduler = InterviewScheduler(store)
    assert scheduler.build_grid("drive1") == scheduler.build_grid("drive1")


def test_rejected_applications_free_their_slot(store):
    ApplicationService(store).update_status("app4", ApplicationStatus.rejected)
    scheduler = InterviewScheduler(store)
    assert "11:00" in scheduler.free_times("drive3")


def test_unscheduled_applications(store):
    unscheduled = InterviewScheduler(store).unscheduled_applications("drive1")
    assert {a.student_id for a in unscheduled} == {"std1", "std2"}


# ============================================================
# [3] ASSIGN / REMOVE
# ============================================================

def test_assign_slot(store):
    application = InterviewScheduler(store).assign_slot("drive1", "10:00", "std2")
    assert application.status == ApplicationStatus.interview_scheduled
    assert application.interview_slot == datetime(2026, 3, 15, 10, 0, 0)

    stored = app_for(store, "std2", "drive1")
    assert stored.status == ApplicationStatus.interview_scheduled
    assert stored.interview_slot == datetime(2026, 3, 15, 10, 0, 0)


def test_slot_stored_as_local_iso_string(store):
    InterviewScheduler(store).assign_slot("drive1", "10:00", "std2")
    raw = next(r for r in store.load("applications") if r["studentId"] == "std2")
    assert raw["interviewSlot"] == "2026-03-15T10:00:00"


def test_assign_then_remove_returns_to_shortlisted(store):
    scheduler = InterviewScheduler(store)
    scheduler.assign_slot("drive1", "10:00", "std2")
    application = scheduler.remove_slot("drive1", "std2")
    assert application.status == ApplicationStatus.shortlisted
    assert application.interview_slot is None
    assert "10:00" in scheduler.free_times("drive1")


def test_reschedule_moves_the_slot(store):
    scheduler = InterviewScheduler(store)
    scheduler.assign_slot("drive3", "15:00", "std3")
    grid = {slot.time: slot.student_id for slot in scheduler.build_grid("drive3")}
    assert grid["15:00"] == "std3"
    assert grid["11:00"] is None


def test_assign_time_off_grid(store):
    with pytest.raises(ValidationError):
        InterviewScheduler(store).assign_slot("drive1", "10:15", "std2")


def test_assign_without_application(store):
    with pytest.raises(NotFoundError):
        InterviewScheduler(store).assign_slot("drive1", "10:00", "std4")


def test_assign_on_drive_without_date(store):
    repo = drives_repo(store)
    drive = repo.get("drive1")
    drive.drive_date = None
    repo.replace(drive)
    with pytest.raises(ValidationError):
        InterviewScheduler(store).assign_slot("drive1", "10:00", "std2")


def test_assign_after_selection_is_refused(store):
    ApplicationService(store).update_status("app4", ApplicationStatus.selected)
    with pytest.raises(InvalidTransitionError):
        InterviewScheduler(store).assign_slot("drive3", "12:00", "std3")
    assert applications_repo(store).get("app4").status == ApplicationStatus.selected


# ============================================================
# [4] DOUBLE BOOKING
# ============================================================

def test_same_time_for_two_students_both_succeed(store):
    scheduler = InterviewScheduler(store)
    scheduler.assign_slot("drive1", "10:00", "std1")
    scheduler.assign_slot("drive1", "10:00", "std2")

    assert app_for(store, "std1", "drive1").status == ApplicationStatus.interview_scheduled
    assert app_for(store, "std2", "drive1").status == ApplicationStatus.interview_scheduled

    # first in store order is shown on the grid
    grid = {slot.time: slot.student_id for slot in scheduler.build_grid("drive1")}
    assert grid["10:00"] == "std1"

    conflicts = scheduler.slot_conflicts("drive1")
    assert len(conflicts) == 1
    assert conflicts[0].time == "10:00"
    assert conflicts[0].student_ids == ["std1", "std2"]


def test_no_conflicts_on_seed(store):
    assert InterviewScheduler(store).slot_conflicts("drive3") == []
