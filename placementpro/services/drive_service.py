"""
Drive Service - placement drives posted by the TPO.

Deleting a drive leaves its applications in place; views that join an
application to a missing drive fall back to "Unknown Company".
"""

import logging
from datetime import datetime
from typing import List, Optional

from placementpro.core.exceptions import NotFoundError, ValidationError
from placementpro.db.repository import drives_repo, new_id
from placementpro.db.store import RecordStore
from placementpro.schemas.schemas import (
    DraftCriteria,
    Drive,
    DriveCreate,
    DriveStatus,
    EligibilityPreview,
    EligibleDriveView,
    StudentUser,
)
from placementpro.services.application_service import ApplicationService
from placementpro.services.eligibility_service import (
    criteria_for_draft,
    criteria_for_drive,
    eligible_drives,
    eligible_students,
)
from placementpro.services.user_service import UserService

logger = logging.getLogger(__name__)


class DriveService:

    def __init__(self, store: RecordStore):
        self.store = store
        self.drives = drives_repo(store)
        self.user_service = UserService(store)

    def get(self, drive_id: str) -> Drive:
        drive = self.drives.get(drive_id)
        if drive is None:
            raise NotFoundError("Drive", drive_id)
        return drive

    def list(self, status: Optional[DriveStatus] = None) -> List[Drive]:
        drives = self.drives.all()
        if status is None:
            return drives
        return [d for d in drives if d.status == status]

    def create(self, data: DriveCreate, created_by: str = None) -> Drive:
        """
        Required: company, position, package, min CGPA, max backlogs and at
        least one eligible branch. Nothing is saved if any is missing.
        """
        if (
            not data.company_name.strip()
            or not data.position.strip()
            or not data.package.strip()
            or data.min_cgpa is None
            or data.max_backlogs is None
            or not data.eligible_branches
        ):
            raise ValidationError("Please fill all required fields")

        drive = Drive(
            id=new_id("drive"),
            company_name=data.company_name.strip(),
            position=data.position.strip(),
            package=data.package.strip(),
            min_cgpa=data.min_cgpa,
            max_backlogs=data.max_backlogs,
            eligible_branches=list(dict.fromkeys(data.eligible_branches)),
            drive_date=data.drive_date,
            application_deadline=data.application_deadline,
            description=data.description,
            requirements=data.requirements,
            status=DriveStatus.active,
            created_by=created_by,
            created_at=datetime.utcnow(),
        )
        self.drives.add(drive)
        logger.info("Drive %s created for %s", drive.id, drive.company_name)
        return drive

    def set_status(self, drive_id: str, status: DriveStatus) -> Drive:
        """Mark completed or reactivate."""
        drive = self.get(drive_id)
        drive.status = status
        self.drives.replace(drive)
        return drive

    def delete(self, drive_id: str) -> None:
        if not self.drives.remove(drive_id):
            raise NotFoundError("Drive", drive_id)
        logger.info("Drive %s deleted (applications kept)", drive_id)

    # --------------------------------------------------------
    # Eligibility views
    # --------------------------------------------------------

    def eligible_students(self, drive_id: str) -> List[StudentUser]:
        drive = self.get(drive_id)
        return eligible_students(self.user_service.list_students(), criteria_for_drive(drive))

    def preview(self, draft: DraftCriteria) -> EligibilityPreview:
        """How many students a drive with these criteria would reach."""
        students = eligible_students(self.user_service.list_students(), criteria_for_draft(draft))
        return EligibilityPreview(
            eligible_count=len(students),
            student_ids=[s.id for s in students]
        )

    def drives_for_student(self, student: StudentUser) -> List[Drive]:
        return eligible_drives(student, self.drives.all())

    def drive_views_for_student(
        self,
        student: StudentUser,
        applied: Optional[bool] = None
    ) -> List[EligibleDriveView]:
        """
        Eligible active drives marked with whether the student has applied.
        `applied` keeps only applied (True) or not-applied (False) drives.
        """
        applied_ids = set(ApplicationService(self.store).applied_drive_ids(student.id))
        views = [
            EligibleDriveView(**d.model_dump(), applied=d.id in applied_ids)
            for d in self.drives_for_student(student)
        ]
        if applied is None:
            return views
        return [v for v in views if v.applied == applied]
