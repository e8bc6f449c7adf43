"""
Drive & Notification Tests

Tests:
1. Create drive validation
2. Status changes and deletion
3. Eligibility preview and eligible-student list
4. Notify-all report
"""
import logging

import pytest

from placementpro.core.exceptions import NotFoundError, ValidationError
from placementpro.schemas.schemas import DraftCriteria, DriveCreate, DriveStatus
from placementpro.services.drive_service import DriveService
from placementpro.services.notification_service import NotificationService


def drive_form(**overrides):
    body = {
        "companyName": "Wipro",
        "position": "Project Engineer",
        "package": "5 LPA",
        "minCGPA": 6.0,
        "maxBacklogs": 2,
        "eligibleBranches": ["MCA", "MCA", "IT"],
        "driveDate": "2026-05-01",
        "requirements": "Aptitude\n\nCommunication\n",
    }
    body.update(overrides)
    return DriveCreate.model_validate(body)


# ============================================================
# [1] CREATE
# ============================================================

def test_create_drive(store):
    drive = DriveService(store).create(drive_form(), created_by="tpo1")
    assert drive.id.startswith("drive")
    assert drive.status == DriveStatus.active
    assert drive.eligible_branches == ["MCA", "IT"]
    assert drive.requirements == ["Aptitude", "Communication"]
    assert drive.created_by == "tpo1"
    assert len(DriveService(store).list()) == 4


@pytest.mark.parametrize("overrides", [
    {"companyName": "  "},
    {"minCGPA": None},
    {"maxBacklogs": None},
    {"eligibleBranches": []},
])
def test_create_requires_fields(store, overrides):
    with pytest.raises(ValidationError) as exc:
        DriveService(store).create(drive_form(**overrides))
    assert exc.value.detail == "Please fill all required fields"
    assert len(DriveService(store).list()) == 3


# ============================================================
# [2] STATUS / DELETE
# ============================================================

def test_complete_and_filter(store):
    service = DriveService(store)
    service.set_status("drive2", DriveStatus.completed)
    assert [d.id for d in service.list(DriveStatus.active)] == ["drive1", "drive3"]
    assert [d.id for d in service.list(DriveStatus.completed)] == ["drive2"]


def test_delete_missing_drive(store):
    with pytest.raises(NotFoundError):
        DriveService(store).delete("nope")


# ============================================================
# [3] ELIGIBILITY VIEWS
# ============================================================

def test_eligible_students_for_drive(store):
    students = DriveService(store).eligible_students("drive1")
    assert [s.id for s in students] == ["std1", "std2", "std3"]


def test_preview_empty_form_counts_everyone(store):
    assert DriveService(store).preview(DraftCriteria()).eligible_count == 4


def test_preview_with_criteria(store):
    draft = DraftCriteria.model_validate({"minCGPA": 8.0, "eligibleBranches": ["MCA"]})
    preview = DriveService(store).preview(draft)
    assert preview.eligible_count == 1
    assert preview.student_ids == ["std1"]


def test_drives_for_student(store):
    service = DriveService(store)
    weak = service.user_service.get_student("std4")
    assert [d.id for d in service.drives_for_student(weak)] == ["drive2"]


def test_drive_views_mark_applied(store):
    service = DriveService(store)
    student = service.user_service.get_student("std1")
    views = service.drive_views_for_student(student)
    assert {v.id: v.applied for v in views} == {"drive1": True, "drive2": False, "drive3": True}
    assert [v.id for v in service.drive_views_for_student(student, applied=False)] == ["drive2"]
    assert [v.id for v in service.drive_views_for_student(student, applied=True)] == ["drive1", "drive3"]


# ============================================================
# [4] NOTIFY ALL
# ============================================================

def test_notify_reports_count(store, caplog):
    with caplog.at_level(logging.INFO):
        report = NotificationService(store).notify_eligible("drive3")
    assert report.eligible_count == 2
    assert report.student_ids == ["std1", "std3"]
    assert report.message == "Notification sent to 2 eligible students for Amazon"
    assert "[DEMO MODE]" in caplog.text


def test_notify_missing_drive(store):
    with pytest.raises(NotFoundError):
        NotificationService(store).notify_eligible("nope")
