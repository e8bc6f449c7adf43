"""
Interview Scheduling Service

Each drive gets one interview day laid out as a fixed grid of slots
(09:00 to 17:00 inclusive, every 30 minutes by default). A slot is taken
when a non-rejected application for the drive has an interviewSlot whose
time of day equals the slot time.

Assigning a slot writes "<driveDate>T<HH:MM>:00" onto the application and
moves it to interview_scheduled; removing it clears the slot and moves the
application back to shortlisted.

Slots are NOT exclusive: assigning a taken time succeeds and both
applications hold it. slot_conflicts() lists such times so the TPO can see
them; the grid shows the first application (store order) per time.
"""

import logging
from datetime import datetime, timedelta
from typing import Dict, List, Optional

from placementpro.core.config import Settings, get_settings
from placementpro.core.exceptions import NotFoundError, ValidationError
from placementpro.db.repository import applications_repo, drives_repo
from placementpro.db.store import RecordStore
from placementpro.schemas.schemas import (
    Application,
    ApplicationStatus,
    Drive,
    GridSlot,
    SlotConflict,
)
from placementpro.services.application_service import transition

logger = logging.getLogger(__name__)


def generate_slot_times(start: str = "09:00", end: str = "17:00", interval_minutes: int = 30) -> List[str]:
    """All HH:MM slot starts from start to end, both inclusive."""
    if interval_minutes <= 0:
        raise ValueError("interval_minutes must be positive")
    current = datetime.strptime(start, "%H:%M")
    last = datetime.strptime(end, "%H:%M")
    times = []
    while current <= last:
        times.append(current.strftime("%H:%M"))
        current += timedelta(minutes=interval_minutes)
    return times


def slot_time_of(application: Application) -> Optional[str]:
    if application.interview_slot is None:
        return None
    return application.interview_slot.strftime("%H:%M")


class InterviewScheduler:

    def __init__(self, store: RecordStore, settings: Settings = None):
        settings = settings or get_settings()
        self.applications = applications_repo(store)
        self.drives = drives_repo(store)
        self.slot_times = generate_slot_times(
            settings.interview_day_start,
            settings.interview_day_end,
            settings.interview_slot_minutes
        )

    def _get_drive(self, drive_id: str) -> Drive:
        drive = self.drives.get(drive_id)
        if drive is None:
            raise NotFoundError("Drive", drive_id)
        return drive

    def _drive_applications(self, drive_id: str) -> List[Application]:
        """Non-rejected applications for the drive, store order."""
        return self.applications.find(
            lambda a: a.drive_id == drive_id and a.status != ApplicationStatus.rejected
        )

    # --------------------------------------------------------
    # Reads
    # --------------------------------------------------------

    def build_grid(self, drive_id: str) -> List[GridSlot]:
        """The day's slots in chronological order with who holds each one."""
        holders: Dict[str, str] = {}
        for app in self._drive_applications(drive_id):
            time = slot_time_of(app)
            if time is not None and time not in holders:
                holders[time] = app.student_id
        return [GridSlot(time=t, student_id=holders.get(t)) for t in self.slot_times]

    def free_times(self, drive_id: str) -> List[str]:
        return [slot.time for slot in self.build_grid(drive_id) if slot.student_id is None]

    def unscheduled_applications(self, drive_id: str) -> List[Application]:
        return [a for a in self._drive_applications(drive_id) if a.interview_slot is None]

    def slot_conflicts(self, drive_id: str) -> List[SlotConflict]:
        """Times held by more than one application. Reported, not prevented."""
        by_time: Dict[str, List[str]] = {}
        for app in self._drive_applications(drive_id):
            time = slot_time_of(app)
            if time is not None:
                by_time.setdefault(time, []).append(app.student_id)
        return [
            SlotConflict(time=t, student_ids=ids)
            for t, ids in sorted(by_time.items())
            if len(ids) > 1
        ]

    # --------------------------------------------------------
    # Writes
    # --------------------------------------------------------

    def _find_application(self, drive_id: str, student_id: str) -> Application:
        application = self.applications.find_one(
            lambda a: a.student_id == student_id and a.drive_id == drive_id
        )
        if application is None:
            raise NotFoundError("Application", f"{student_id}/{drive_id}")
        return application

    def assign_slot(self, drive_id: str, time: str, student_id: str) -> Application:
        """
        Put the student's application for this drive at `time` on the drive
        date. Does not check whether another student already holds the time.
        """
        if time not in self.slot_times:
            raise ValidationError(f"{time} is not an interview slot")

        drive = self._get_drive(drive_id)
        if drive.drive_date is None:
            raise ValidationError("Drive has no drive date to schedule interviews on")

        application = self._find_application(drive_id, student_id)
        application = transition(application, ApplicationStatus.interview_scheduled)
        application.interview_slot = datetime.strptime(
            f"{drive.drive_date.isoformat()}T{time}:00", "%Y-%m-%dT%H:%M:%S"
        )
        self.applications.replace(application)

        logger.info("Interview slot %s on %s assigned to %s", time, drive_id, student_id)
        return application

    def remove_slot(self, drive_id: str, student_id: str) -> Application:
        """Clear the slot and send the application back to shortlisted."""
        application = self._find_application(drive_id, student_id)
        if application.status != ApplicationStatus.shortlisted:
            application = transition(application, ApplicationStatus.shortlisted)
        application.interview_slot = None
        self.applications.replace(application)

        logger.info("Interview slot on %s removed for %s", drive_id, student_id)
        return application
