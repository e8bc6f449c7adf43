"""
Interview Scheduling Routes (TPO)

GET /interviews/{drive_id}/grid - Day grid with slot holders
GET /interviews/{drive_id}/unscheduled - Applicants without a slot
GET /interviews/{drive_id}/conflicts - Times held by more than one student
POST /interviews/{drive_id}/assign - Assign a slot
DELETE /interviews/{drive_id}/slots/{student_id} - Remove a slot
"""

from typing import List

from fastapi import APIRouter, Depends

from placementpro.core.auth import get_current_tpo
from placementpro.db.store import RecordStore, get_record_store
from placementpro.schemas.schemas import (
    Application, GridSlot, SlotAssignRequest, SlotConflict
)
from placementpro.services.scheduling_service import InterviewScheduler

router = APIRouter(prefix="/interviews", tags=["Interviews"])


@router.get("/{drive_id}/grid", response_model=List[GridSlot])
async def get_grid(
    drive_id: str,
    tpo=Depends(get_current_tpo),
    store: RecordStore = Depends(get_record_store)
):
    return InterviewScheduler(store).build_grid(drive_id)


@router.get("/{drive_id}/unscheduled", response_model=List[Application])
async def get_unscheduled(
    drive_id: str,
    tpo=Depends(get_current_tpo),
    store: RecordStore = Depends(get_record_store)
):
    return InterviewScheduler(store).unscheduled_applications(drive_id)


@router.get("/{drive_id}/conflicts", response_model=List[SlotConflict])
async def get_conflicts(
    drive_id: str,
    tpo=Depends(get_current_tpo),
    store: RecordStore = Depends(get_record_store)
):
    return InterviewScheduler(store).slot_conflicts(drive_id)


@router.post("/{drive_id}/assign", response_model=Application)
async def assign_slot(
    drive_id: str,
    request: SlotAssignRequest,
    tpo=Depends(get_current_tpo),
    store: RecordStore = Depends(get_record_store)
):
    """Assign a time. A time that is already taken is not refused."""
    return InterviewScheduler(store).assign_slot(drive_id, request.time, request.student_id)


@router.delete("/{drive_id}/slots/{student_id}", response_model=Application)
async def remove_slot(
    drive_id: str,
    student_id: str,
    tpo=Depends(get_current_tpo),
    store: RecordStore = Depends(get_record_store)
):
    return InterviewScheduler(store).remove_slot(drive_id, student_id)
