"""
Mentorship Service - group sessions offered by alumni.

Students book a seat; a slot holds at most maxStudents bookings and a
student can only hold one seat per slot.
"""

import logging
from datetime import datetime
from typing import List

from placementpro.core.exceptions import NotFoundError, SlotFullError, ValidationError
from placementpro.db.repository import mentorship_repo, new_id
from placementpro.db.store import RecordStore
from placementpro.schemas.schemas import (
    MentorshipSlot,
    MentorshipSlotCreate,
    MentorshipSlotView,
)
from placementpro.services.user_service import UserService

logger = logging.getLogger(__name__)


def is_full(slot: MentorshipSlot) -> bool:
    return len(slot.booked_by) >= slot.max_students


def is_past(slot: MentorshipSlot, now: datetime = None) -> bool:
    starts_at = datetime.strptime(f"{slot.slot_date.isoformat()} {slot.time}", "%Y-%m-%d %H:%M")
    return starts_at < (now or datetime.now())


class MentorshipService:

    def __init__(self, store: RecordStore):
        self.slots = mentorship_repo(store)
        self.user_service = UserService(store)

    def get(self, slot_id: str) -> MentorshipSlot:
        slot = self.slots.get(slot_id)
        if slot is None:
            raise NotFoundError("Mentorship slot", slot_id)
        return slot

    def list(self) -> List[MentorshipSlot]:
        return self.slots.all()

    def list_by_alumni(self, alumni_id: str) -> List[MentorshipSlot]:
        return self.slots.find(lambda s: s.alumni_id == alumni_id)

    def view(self, slot: MentorshipSlot, now: datetime = None) -> MentorshipSlotView:
        return MentorshipSlotView(
            **slot.model_dump(),
            is_full=is_full(slot),
            is_past=is_past(slot, now),
            booked_names=[self.user_service.name_of(sid) for sid in slot.booked_by],
        )

    def create(self, alumni_id: str, data: MentorshipSlotCreate) -> MentorshipSlot:
        if (
            not data.title.strip()
            or data.slot_date is None
            or not data.time
            or data.duration is None
            or data.max_students is None
        ):
            raise ValidationError("Please fill all required fields")

        slot = MentorshipSlot(
            id=new_id("mentor"),
            alumni_id=alumni_id,
            title=data.title.strip(),
            slot_date=data.slot_date,
            time=data.time,
            duration=data.duration,
            max_students=data.max_students,
            booked_by=[],
            description=data.description,
        )
        self.slots.add(slot)
        logger.info("Mentorship slot %s created by %s", slot.id, alumni_id)
        return slot

    def delete(self, slot_id: str) -> None:
        if not self.slots.remove(slot_id):
            raise NotFoundError("Mentorship slot", slot_id)

    def book(self, slot_id: str, student_id: str) -> MentorshipSlot:
        slot = self.get(slot_id)
        if student_id in slot.booked_by:
            raise ValidationError("You have already booked this session")
        if is_full(slot):
            raise SlotFullError("This session is full")
        slot.booked_by.append(student_id)
        self.slots.replace(slot)
        return slot

    def remove_student(self, slot_id: str, student_id: str) -> MentorshipSlot:
        slot = self.get(slot_id)
        slot.booked_by = [sid for sid in slot.booked_by if sid != student_id]
        self.slots.replace(slot)
        return slot
