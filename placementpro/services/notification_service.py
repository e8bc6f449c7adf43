"""
Notification Service

"Notify All Eligible" on a drive. Nothing is delivered: the eligible set is
computed, logged and reported back so the TPO sees how many students would
have been reached.
"""

import logging
from typing import List

from placementpro.db.store import RecordStore
from placementpro.schemas.schemas import Drive, NotificationReport, StudentUser
from placementpro.services.drive_service import DriveService
from placementpro.services.eligibility_service import criteria_for_drive, eligible_students
from placementpro.services.user_service import UserService

logger = logging.getLogger(__name__)


class NotificationService:

    def __init__(self, store: RecordStore):
        self.drive_service = DriveService(store)
        self.user_service = UserService(store)

    def compute_eligible_set(self, drive: Drive) -> List[StudentUser]:
        return eligible_students(self.user_service.list_students(), criteria_for_drive(drive))

    def notify_eligible(self, drive_id: str) -> NotificationReport:
        drive = self.drive_service.get(drive_id)
        students = self.compute_eligible_set(drive)
        message = (
            f"Notification sent to {len(students)} eligible students for {drive.company_name}"
        )
        logger.info("[DEMO MODE] %s: %s", drive.id, message)
        return NotificationReport(
            drive_id=drive.id,
            company_name=drive.company_name,
            eligible_count=len(students),
            student_ids=[s.id for s in students],
            message=message,
        )
