"""
Drive Routes (TPO)

POST /drives - Create drive
GET /drives - List drives (optional status filter)
GET /drives/{drive_id} - Drive details
PATCH /drives/{drive_id}/status - Mark completed / reactivate
DELETE /drives/{drive_id} - Delete drive (applications are kept)
POST /drives/preview - Eligible-student count for draft criteria
GET /drives/{drive_id}/eligible-students - Students meeting the criteria
POST /drives/{drive_id}/notify - Notify all eligible students
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from placementpro.core.auth import get_current_tpo, get_current_user
from placementpro.db.store import RecordStore, get_record_store
from placementpro.schemas.schemas import (
    DraftCriteria, Drive, DriveCreate, DriveStatus, DriveStatusUpdate,
    EligibilityPreview, MessageResponse, NotificationReport, StudentResponse
)
from placementpro.services.drive_service import DriveService
from placementpro.services.notification_service import NotificationService

router = APIRouter(prefix="/drives", tags=["Drives"])


@router.post("", response_model=Drive, status_code=201)
async def create_drive(
    data: DriveCreate,
    tpo=Depends(get_current_tpo),
    store: RecordStore = Depends(get_record_store)
):
    """Create a placement drive. Needs at least one eligible branch."""
    return DriveService(store).create(data, created_by=tpo.id)


@router.get("", response_model=List[Drive])
async def list_drives(
    status: Optional[DriveStatus] = Query(None),
    user=Depends(get_current_user),
    store: RecordStore = Depends(get_record_store)
):
    return DriveService(store).list(status)


@router.post("/preview", response_model=EligibilityPreview)
async def preview_criteria(
    draft: DraftCriteria,
    tpo=Depends(get_current_tpo),
    store: RecordStore = Depends(get_record_store)
):
    """Live count while the TPO fills in the create-drive form."""
    return DriveService(store).preview(draft)


@router.get("/{drive_id}", response_model=Drive)
async def get_drive(
    drive_id: str,
    user=Depends(get_current_user),
    store: RecordStore = Depends(get_record_store)
):
    return DriveService(store).get(drive_id)


@router.patch("/{drive_id}/status", response_model=Drive)
async def update_drive_status(
    drive_id: str,
    update: DriveStatusUpdate,
    tpo=Depends(get_current_tpo),
    store: RecordStore = Depends(get_record_store)
):
    return DriveService(store).set_status(drive_id, update.status)


@router.delete("/{drive_id}", response_model=MessageResponse)
async def delete_drive(
    drive_id: str,
    tpo=Depends(get_current_tpo),
    store: RecordStore = Depends(get_record_store)
):
    DriveService(store).delete(drive_id)
    return MessageResponse(message="Drive deleted successfully")


@router.get("/{drive_id}/eligible-students", response_model=List[StudentResponse])
async def list_eligible_students(
    drive_id: str,
    tpo=Depends(get_current_tpo),
    store: RecordStore = Depends(get_record_store)
):
    students = DriveService(store).eligible_students(drive_id)
    return [StudentResponse(**s.model_dump(exclude={"password"})) for s in students]


@router.post("/{drive_id}/notify", response_model=NotificationReport)
async def notify_eligible_students(
    drive_id: str,
    tpo=Depends(get_current_tpo),
    store: RecordStore = Depends(get_record_store)
):
    """Report how many students would be notified. Nothing is sent."""
    return NotificationService(store).notify_eligible(drive_id)
