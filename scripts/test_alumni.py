"""
Alumni Feature Tests

Tests:
1. Referrals: create, validation, listing, delete
2. Mentorship slots: create, booking capacity, duplicate booking
3. Past / full flags on the session view
"""
from datetime import datetime

import pytest

from placementpro.core.exceptions import NotFoundError, SlotFullError, ValidationError
from placementpro.schemas.schemas import MentorshipSlotCreate, ReferralCreate
from placementpro.services.mentorship_service import MentorshipService, is_full, is_past
from placementpro.services.referral_service import ReferralService


# ============================================================
# [1] REFERRALS
# ============================================================

def test_create_referral(store):
    data = ReferralCreate.model_validate({
        "companyName": "Flipkart", "position": "SDE", "package": "25 LPA",
        "location": "Bangalore", "requirements": "DSA\nSystem design"
    })
    referral = ReferralService(store).create("alum1", data)
    assert referral.applications_count == 0
    assert referral.requirements == ["DSA", "System design"]
    assert [r.id for r in ReferralService(store).list_by_alumni("alum1")] == ["ref1", referral.id]


def test_referral_requires_location(store):
    data = ReferralCreate(company_name="Flipkart", position="SDE", package="25 LPA")
    with pytest.raises(ValidationError):
        ReferralService(store).create("alum1", data)
    assert len(ReferralService(store).list()) == 2


def test_delete_referral(store):
    service = ReferralService(store)
    service.delete("ref2")
    assert [r.id for r in service.list()] == ["ref1"]
    with pytest.raises(NotFoundError):
        service.delete("ref2")


# ============================================================
# [2] MENTORSHIP
# ============================================================

def slot_form(**overrides):
    body = {"title": "Resume Review", "date": "2026-12-01", "time": "18:30",
            "duration": 30, "maxStudents": 2}
    body.update(overrides)
    return MentorshipSlotCreate.model_validate(body)


def test_create_slot(store):
    slot = MentorshipService(store).create("alum2", slot_form())
    assert slot.id.startswith("mentor")
    assert slot.booked_by == []
    assert slot.slot_date.isoformat() == "2026-12-01"


def test_create_slot_missing_fields(store):
    with pytest.raises(ValidationError):
        MentorshipService(store).create("alum2", slot_form(title=""))
    with pytest.raises(ValidationError):
        MentorshipService(store).create("alum2", slot_form(maxStudents=None))


def test_slot_time_format_checked():
    with pytest.raises(ValueError):
        slot_form(time="6pm")


def test_booking_until_full(store):
    service = MentorshipService(store)
    slot = service.create("alum2", slot_form(maxStudents=2))
    service.book(slot.id, "std1")
    booked = service.book(slot.id, "std2")
    assert is_full(booked)
    with pytest.raises(SlotFullError):
        service.book(slot.id, "std3")
    assert service.get(slot.id).booked_by == ["std1", "std2"]


def test_double_booking_refused(store):
    with pytest.raises(ValidationError):
        MentorshipService(store).book("mentor1", "std1")


def test_remove_student_frees_seat(store):
    service = MentorshipService(store)
    slot = service.remove_student("mentor1", "std1")
    assert slot.booked_by == ["std3"]


# ============================================================
# [3] VIEW FLAGS
# ============================================================

def test_view_flags_and_names(store):
    service = MentorshipService(store)
    slot = service.get("mentor1")
    view = service.view(slot, now=datetime(2026, 2, 1))
    assert view.is_past is False
    assert view.is_full is False
    assert view.booked_names == ["Priya Sharma", "Sneha Reddy"]


def test_is_past(store):
    slot = MentorshipService(store).get("mentor1")
    assert is_past(slot, now=datetime(2026, 2, 25, 18, 1))
    assert not is_past(slot, now=datetime(2026, 2, 25, 17, 59))
