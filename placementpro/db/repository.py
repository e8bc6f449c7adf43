"""
Typed access to one store collection.

Records are validated into pydantic models when loaded and dumped back to
camelCase JSON when saved, so services never touch raw dicts.
"""

import uuid
from typing import Any, Callable, Generic, List, Optional, TypeVar

from pydantic import TypeAdapter

from placementpro.db.store import COLLECTIONS, RecordStore
from placementpro.schemas.schemas import (
    Application,
    Drive,
    MentorshipSlot,
    Referral,
    User,
)

T = TypeVar("T")


def new_id(prefix: str) -> str:
    """Ids keep the original prefixes: drive..., app..., ref..., mentor..."""
    return f"{prefix}{uuid.uuid4().hex[:12]}"


class Repository(Generic[T]):
    """
    Whole-collection repository.

    Every write is load -> modify -> save of the full list, matching the
    store's overwrite semantics.
    """

    def __init__(self, store: RecordStore, name: str, model: Any):
        self.store = store
        self.name = name
        self.adapter = TypeAdapter(List[model])

    def all(self) -> List[T]:
        return self.adapter.validate_python(self.store.load(self.name))

    def save_all(self, records: List[T]) -> None:
        self.store.save(
            self.name,
            self.adapter.dump_python(records, mode="json", by_alias=True)
        )

    def get(self, record_id: str) -> Optional[T]:
        return self.find_one(lambda r: r.id == record_id)

    def find(self, predicate: Callable[[T], bool]) -> List[T]:
        return [r for r in self.all() if predicate(r)]

    def find_one(self, predicate: Callable[[T], bool]) -> Optional[T]:
        for record in self.all():
            if predicate(record):
                return record
        return None

    def add(self, record: T) -> T:
        records = self.all()
        records.append(record)
        self.save_all(records)
        return record

    def replace(self, record: T) -> bool:
        """Swap the record with the same id. Returns False if none matched."""
        records = self.all()
        for i, existing in enumerate(records):
            if existing.id == record.id:
                records[i] = record
                self.save_all(records)
                return True
        return False

    def remove(self, record_id: str) -> bool:
        records = self.all()
        kept = [r for r in records if r.id != record_id]
        if len(kept) == len(records):
            return False
        self.save_all(kept)
        return True


# ============================================================
# CONVENIENCE CONSTRUCTORS
# ============================================================

def users_repo(store: RecordStore) -> "Repository[User]":
    return Repository(store, COLLECTIONS["users"], User)


def drives_repo(store: RecordStore) -> "Repository[Drive]":
    return Repository(store, COLLECTIONS["drives"], Drive)


def applications_repo(store: RecordStore) -> "Repository[Application]":
    return Repository(store, COLLECTIONS["applications"], Application)


def referrals_repo(store: RecordStore) -> "Repository[Referral]":
    return Repository(store, COLLECTIONS["referrals"], Referral)


def mentorship_repo(store: RecordStore) -> "Repository[MentorshipSlot]":
    return Repository(store, COLLECTIONS["mentorship_slots"], MentorshipSlot)
