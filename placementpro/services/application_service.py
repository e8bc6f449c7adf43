"""
Application Service - student applications and their status lifecycle.

STATE MACHINE:
    applied -> shortlisted -> interview_scheduled -> selected
    rejected is terminal and reachable from every non-terminal state.

Extra edges used by the interview scheduler:
- applied -> interview_scheduled      (slot assigned straight from the pool)
- interview_scheduled -> shortlisted  (slot removed)
- interview_scheduled -> interview_scheduled (rescheduled)

Nothing times out; every change is a student or TPO action.
"""

import logging
from datetime import datetime
from typing import Dict, List

from placementpro.core.exceptions import (
    DriveClosedError,
    DuplicateApplicationError,
    IneligibleError,
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
)
from placementpro.db.repository import applications_repo, drives_repo, new_id
from placementpro.db.store import RecordStore
from placementpro.schemas.schemas import (
    ApplicantView,
    Application,
    ApplicationStatus,
    ApplicationView,
    DriveStatus,
    StepState,
    TimelineStep,
)
from placementpro.services.eligibility_service import check_eligibility, criteria_for_drive
from placementpro.services.user_service import UserService

logger = logging.getLogger(__name__)

S = ApplicationStatus

TRANSITIONS: Dict[ApplicationStatus, set] = {
    S.applied: {S.shortlisted, S.interview_scheduled, S.rejected},
    S.shortlisted: {S.interview_scheduled, S.rejected},
    S.interview_scheduled: {S.interview_scheduled, S.shortlisted, S.selected, S.rejected},
    S.selected: set(),
    S.rejected: set(),
}

# Progression shown on the student's tracker
STATUS_STEPS = [S.applied, S.shortlisted, S.interview_scheduled, S.selected]

UNKNOWN_COMPANY = "Unknown Company"


def is_terminal(status: ApplicationStatus) -> bool:
    return not TRANSITIONS[status]


def can_transition(current: ApplicationStatus, target: ApplicationStatus) -> bool:
    return target in TRANSITIONS[current]


def transition(application: Application, target: ApplicationStatus) -> Application:
    """Return a copy of the application in the target state or raise."""
    if not can_transition(application.status, target):
        raise InvalidTransitionError(application.status.value, target.value)
    return application.model_copy(update={"status": target})


def timeline(status: ApplicationStatus) -> List[TimelineStep]:
    """
    Step states for the tracker. A rejected application is off the track,
    so every step reads pending.
    """
    if status == S.rejected:
        return [TimelineStep(status=step, state=StepState.pending) for step in STATUS_STEPS]

    current = STATUS_STEPS.index(status)
    steps = []
    for i, step in enumerate(STATUS_STEPS):
        if i < current:
            state = StepState.completed
        elif i == current:
            state = StepState.current
        else:
            state = StepState.pending
        steps.append(TimelineStep(status=step, state=state))
    return steps


class ApplicationService:

    def __init__(self, store: RecordStore):
        self.applications = applications_repo(store)
        self.drives = drives_repo(store)
        self.user_service = UserService(store)

    def get(self, application_id: str) -> Application:
        application = self.applications.get(application_id)
        if application is None:
            raise NotFoundError("Application", application_id)
        return application

    def find(self, student_id: str, drive_id: str):
        return self.applications.find_one(
            lambda a: a.student_id == student_id and a.drive_id == drive_id
        )

    # --------------------------------------------------------
    # Student actions
    # --------------------------------------------------------

    def apply(self, student_id: str, drive_id: str) -> Application:
        """
        Submit an application to an active drive the student qualifies for.
        At most one application per (student, drive).
        """
        drive = self.drives.get(drive_id)
        if drive is None:
            raise NotFoundError("Drive", drive_id)

        if self.find(student_id, drive_id):
            raise DuplicateApplicationError(student_id, drive_id)

        if drive.status != DriveStatus.active:
            raise DriveClosedError("Drive is not accepting applications")

        student = self.user_service.get_student(student_id)
        result = check_eligibility(student, criteria_for_drive(drive))
        if not result.eligible:
            raise IneligibleError(
                f"Not eligible for this drive ({', '.join(result.failed_checks)})"
            )

        application = Application(
            id=new_id("app"),
            student_id=student_id,
            drive_id=drive_id,
            status=S.applied,
            applied_at=datetime.utcnow(),
            interview_slot=None,
        )
        self.applications.add(application)
        logger.info("Student %s applied to %s", student_id, drive_id)
        return application

    def applied_drive_ids(self, student_id: str) -> List[str]:
        return [a.drive_id for a in self.applications.find(lambda a: a.student_id == student_id)]

    def list_for_student(self, student_id: str) -> List[ApplicationView]:
        """Most recent first, joined with the drive. Deleted drives still render."""
        drives = {d.id: d for d in self.drives.all()}
        mine = self.applications.find(lambda a: a.student_id == student_id)
        mine.sort(key=lambda a: a.applied_at, reverse=True)

        views = []
        for app in mine:
            drive = drives.get(app.drive_id)
            views.append(ApplicationView(
                id=app.id,
                drive_id=app.drive_id,
                company_name=drive.company_name if drive else UNKNOWN_COMPANY,
                position=drive.position if drive else None,
                package=drive.package if drive else None,
                drive_date=drive.drive_date if drive else None,
                status=app.status,
                applied_at=app.applied_at,
                interview_slot=app.interview_slot,
                timeline=timeline(app.status),
            ))
        return views

    def status_counts(self, student_id: str) -> Dict[str, int]:
        counts = {status.value: 0 for status in ApplicationStatus}
        for app in self.applications.find(lambda a: a.student_id == student_id):
            counts[app.status.value] += 1
        return counts

    # --------------------------------------------------------
    # TPO actions
    # --------------------------------------------------------

    def list_for_drive(self, drive_id: str) -> List[ApplicantView]:
        """Applicants in insertion order, with a fallback for missing students."""
        views = []
        for app in self.applications.find(lambda a: a.drive_id == drive_id):
            student = self.user_service.find_student(app.student_id)
            views.append(ApplicantView(
                id=app.id,
                student_id=app.student_id,
                student_name=student.name if student else "Unknown",
                roll_number=student.roll_number if student else None,
                branch=student.branch if student else None,
                cgpa=student.cgpa if student else None,
                status=app.status,
                applied_at=app.applied_at,
                interview_slot=app.interview_slot,
            ))
        return views

    def update_status(self, application_id: str, status: ApplicationStatus) -> Application:
        """Shortlist, select or reject. Slot changes go through the scheduler."""
        if status == S.interview_scheduled:
            raise ValidationError("Assign an interview slot to schedule an interview")
        application = self.get(application_id)
        if application.status == S.interview_scheduled and status == S.shortlisted:
            raise ValidationError("Remove the interview slot to move back to shortlisted")
        application = transition(application, status)
        self.applications.replace(application)
        logger.info("Application %s -> %s", application_id, status.value)
        return application
