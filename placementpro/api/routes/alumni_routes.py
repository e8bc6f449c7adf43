"""
Alumni Routes

GET /alumni/referrals - All referrals (any logged-in user)
GET /alumni/referrals/mine - Referrals I posted
POST /alumni/referrals - Post referral
DELETE /alumni/referrals/{referral_id} - Delete own referral
GET /alumni/mentorship-slots - My mentorship sessions
POST /alumni/mentorship-slots - Create session
DELETE /alumni/mentorship-slots/{slot_id} - Delete own session
DELETE /alumni/mentorship-slots/{slot_id}/students/{student_id} - Remove a booking
"""

from typing import List

from fastapi import APIRouter, Depends

from placementpro.core.auth import get_current_alumni, get_current_user
from placementpro.core.exceptions import PermissionDeniedError
from placementpro.db.store import RecordStore, get_record_store
from placementpro.schemas.schemas import (
    AlumniUser, MentorshipSlotCreate, MentorshipSlotView, MessageResponse,
    Referral, ReferralCreate
)
from placementpro.services.mentorship_service import MentorshipService
from placementpro.services.referral_service import ReferralService

router = APIRouter(prefix="/alumni", tags=["Alumni"])


# ============================================================
# REFERRALS
# ============================================================

@router.get("/referrals", response_model=List[Referral])
async def list_referrals(
    user=Depends(get_current_user),
    store: RecordStore = Depends(get_record_store)
):
    return ReferralService(store).list()


@router.get("/referrals/mine", response_model=List[Referral])
async def list_my_referrals(
    alumni: AlumniUser = Depends(get_current_alumni),
    store: RecordStore = Depends(get_record_store)
):
    return ReferralService(store).list_by_alumni(alumni.id)


@router.post("/referrals", response_model=Referral, status_code=201)
async def create_referral(
    data: ReferralCreate,
    alumni: AlumniUser = Depends(get_current_alumni),
    store: RecordStore = Depends(get_record_store)
):
    return ReferralService(store).create(alumni.id, data)


@router.delete("/referrals/{referral_id}", response_model=MessageResponse)
async def delete_referral(
    referral_id: str,
    alumni: AlumniUser = Depends(get_current_alumni),
    store: RecordStore = Depends(get_record_store)
):
    service = ReferralService(store)
    if service.get(referral_id).alumni_id != alumni.id:
        raise PermissionDeniedError("You can only delete your own referrals")
    service.delete(referral_id)
    return MessageResponse(message="Referral deleted successfully")


# ============================================================
# MENTORSHIP
# ============================================================

def _own_slot(service: MentorshipService, slot_id: str, alumni: AlumniUser):
    slot = service.get(slot_id)
    if slot.alumni_id != alumni.id:
        raise PermissionDeniedError("You can only manage your own sessions")
    return slot


@router.get("/mentorship-slots", response_model=List[MentorshipSlotView])
async def list_my_mentorship_slots(
    alumni: AlumniUser = Depends(get_current_alumni),
    store: RecordStore = Depends(get_record_store)
):
    service = MentorshipService(store)
    return [service.view(s) for s in service.list_by_alumni(alumni.id)]


@router.post("/mentorship-slots", response_model=MentorshipSlotView, status_code=201)
async def create_mentorship_slot(
    data: MentorshipSlotCreate,
    alumni: AlumniUser = Depends(get_current_alumni),
    store: RecordStore = Depends(get_record_store)
):
    service = MentorshipService(store)
    return service.view(service.create(alumni.id, data))


@router.delete("/mentorship-slots/{slot_id}", response_model=MessageResponse)
async def delete_mentorship_slot(
    slot_id: str,
    alumni: AlumniUser = Depends(get_current_alumni),
    store: RecordStore = Depends(get_record_store)
):
    service = MentorshipService(store)
    _own_slot(service, slot_id, alumni)
    service.delete(slot_id)
    return MessageResponse(message="Session deleted successfully")


@router.delete(
    "/mentorship-slots/{slot_id}/students/{student_id}",
    response_model=MentorshipSlotView
)
async def remove_mentee(
    slot_id: str,
    student_id: str,
    alumni: AlumniUser = Depends(get_current_alumni),
    store: RecordStore = Depends(get_record_store)
):
    service = MentorshipService(store)
    _own_slot(service, slot_id, alumni)
    return service.view(service.remove_student(slot_id, student_id))
