"""
Student Routes

GET /students/profile - Get own profile
PUT /students/profile - Update profile
POST /students/skills - Add skill
DELETE /students/skills/{skill} - Remove skill
POST /students/projects - Add project
DELETE /students/projects/{index} - Remove project
GET /students/drives - Active drives I am eligible for (optional applied filter)
POST /students/drives/{drive_id}/apply - Apply to drive
GET /students/applications - My applications with status timeline
GET /students/applications/summary - Count per status
GET /students/mentorship-slots - Upcoming alumni sessions
POST /students/mentorship-slots/{slot_id}/book - Book a seat
"""

from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from placementpro.core.auth import get_current_student
from placementpro.db.store import RecordStore, get_record_store
from placementpro.schemas.schemas import (
    Application, ApplicationView, EligibleDriveView, MentorshipSlotView, ProjectCreate, SkillAdd,
    StudentProfileUpdate, StudentResponse, StudentUser
)
from placementpro.services.application_service import ApplicationService
from placementpro.services.drive_service import DriveService
from placementpro.services.mentorship_service import MentorshipService, is_past
from placementpro.services.user_service import UserService

router = APIRouter(prefix="/students", tags=["Students"])


def _profile(student: StudentUser) -> StudentResponse:
    return StudentResponse(**student.model_dump(exclude={"password"}))


@router.get("/profile", response_model=StudentResponse)
async def get_profile(student: StudentUser = Depends(get_current_student)):
    return _profile(student)


@router.put("/profile", response_model=StudentResponse)
async def update_profile(
    data: StudentProfileUpdate,
    student: StudentUser = Depends(get_current_student),
    store: RecordStore = Depends(get_record_store)
):
    """Update profile. Only provided fields are changed."""
    return _profile(UserService(store).update_profile(student.id, data))


@router.post("/skills", response_model=StudentResponse)
async def add_skill(
    data: SkillAdd,
    student: StudentUser = Depends(get_current_student),
    store: RecordStore = Depends(get_record_store)
):
    return _profile(UserService(store).add_skill(student.id, data.skill))


@router.delete("/skills/{skill}", response_model=StudentResponse)
async def remove_skill(
    skill: str,
    student: StudentUser = Depends(get_current_student),
    store: RecordStore = Depends(get_record_store)
):
    return _profile(UserService(store).remove_skill(student.id, skill))


@router.post("/projects", response_model=StudentResponse, status_code=201)
async def add_project(
    data: ProjectCreate,
    student: StudentUser = Depends(get_current_student),
    store: RecordStore = Depends(get_record_store)
):
    return _profile(UserService(store).add_project(student.id, data))


@router.delete("/projects/{index}", response_model=StudentResponse)
async def remove_project(
    index: int,
    student: StudentUser = Depends(get_current_student),
    store: RecordStore = Depends(get_record_store)
):
    return _profile(UserService(store).remove_project(student.id, index))


@router.get("/drives", response_model=List[EligibleDriveView])
async def list_eligible_drives(
    applied: Optional[bool] = Query(None),
    student: StudentUser = Depends(get_current_student),
    store: RecordStore = Depends(get_record_store)
):
    """
    Active drives whose CGPA, backlog and branch criteria I meet, each marked
    `applied`. Pass ?applied=true / ?applied=false to filter on it.
    """
    return DriveService(store).drive_views_for_student(student, applied)


@router.post("/drives/{drive_id}/apply", response_model=Application, status_code=201)
async def apply_to_drive(
    drive_id: str,
    student: StudentUser = Depends(get_current_student),
    store: RecordStore = Depends(get_record_store)
):
    """Apply to a drive. Cannot apply twice to the same drive."""
    return ApplicationService(store).apply(student.id, drive_id)


@router.get("/applications", response_model=List[ApplicationView])
async def get_my_applications(
    student: StudentUser = Depends(get_current_student),
    store: RecordStore = Depends(get_record_store)
):
    return ApplicationService(store).list_for_student(student.id)


@router.get("/applications/summary", response_model=Dict[str, int])
async def get_application_summary(
    student: StudentUser = Depends(get_current_student),
    store: RecordStore = Depends(get_record_store)
):
    return ApplicationService(store).status_counts(student.id)


@router.get("/mentorship-slots", response_model=List[MentorshipSlotView])
async def list_mentorship_slots(
    student: StudentUser = Depends(get_current_student),
    store: RecordStore = Depends(get_record_store)
):
    """Sessions that have not started yet, soonest first."""
    service = MentorshipService(store)
    upcoming = [s for s in service.list() if not is_past(s)]
    upcoming.sort(key=lambda s: (s.slot_date, s.time))
    return [service.view(s) for s in upcoming]


@router.post("/mentorship-slots/{slot_id}/book", response_model=MentorshipSlotView)
async def book_mentorship_slot(
    slot_id: str,
    student: StudentUser = Depends(get_current_student),
    store: RecordStore = Depends(get_record_store)
):
    service = MentorshipService(store)
    return service.view(service.book(slot_id, student.id))
