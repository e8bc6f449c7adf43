"""
Application Routes (TPO)

GET /applications/drive/{drive_id} - Applicants for a drive
PATCH /applications/{application_id}/status - Shortlist / select / reject
"""

from typing import List

from fastapi import APIRouter, Depends

from placementpro.core.auth import get_current_tpo
from placementpro.db.store import RecordStore, get_record_store
from placementpro.schemas.schemas import ApplicantView, Application, ApplicationStatusUpdate
from placementpro.services.application_service import ApplicationService

router = APIRouter(prefix="/applications", tags=["Applications"])


@router.get("/drive/{drive_id}", response_model=List[ApplicantView])
async def list_applicants(
    drive_id: str,
    tpo=Depends(get_current_tpo),
    store: RecordStore = Depends(get_record_store)
):
    return ApplicationService(store).list_for_drive(drive_id)


@router.patch("/{application_id}/status", response_model=Application)
async def update_application_status(
    application_id: str,
    update: ApplicationStatusUpdate,
    tpo=Depends(get_current_tpo),
    store: RecordStore = Depends(get_record_store)
):
    """
    Move an application along applied -> shortlisted -> ... -> selected,
    or reject it. Interview scheduling uses the /interviews routes.
    """
    return ApplicationService(store).update_status(application_id, update.status)
