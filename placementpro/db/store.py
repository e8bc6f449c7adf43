"""
Record Store - flat key-value persistence.

Each key holds a whole collection as an ordered list of JSON-like dicts.
load() returns a copy, save() overwrites the entire collection. There are
no transactions across keys: an operation touching two collections does two
independent saves.

Keys in use:
- users, drives, applications, referrals, mentorshipSlots
- dataInitialized (flag set once the demo data is seeded)
"""

import copy
from functools import lru_cache
from typing import Any, Dict, List

from pymongo.collection import Collection

from placementpro.core.config import get_settings


# Collection name constants (avoid typos)
COLLECTIONS = {
    "users": "users",
    "drives": "drives",
    "applications": "applications",
    "referrals": "referrals",
    "mentorship_slots": "mentorshipSlots",
}

DATA_INITIALIZED_FLAG = "dataInitialized"


class RecordStore:
    """Interface every backend implements."""

    def load(self, name: str) -> List[Dict[str, Any]]:
        raise NotImplementedError

    def save(self, name: str, records: List[Dict[str, Any]]) -> None:
        raise NotImplementedError

    def get_flag(self, name: str) -> bool:
        raise NotImplementedError

    def set_flag(self, name: str, value: bool = True) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError


class InMemoryRecordStore(RecordStore):
    """Dict-backed store. Records are deep-copied in and out."""

    def __init__(self):
        self._data: Dict[str, List[Dict[str, Any]]] = {}
        self._flags: Dict[str, bool] = {}

    def load(self, name: str) -> List[Dict[str, Any]]:
        return copy.deepcopy(self._data.get(name, []))

    def save(self, name: str, records: List[Dict[str, Any]]) -> None:
        self._data[name] = copy.deepcopy(list(records))

    def get_flag(self, name: str) -> bool:
        return self._flags.get(name, False)

    def set_flag(self, name: str, value: bool = True) -> None:
        self._flags[name] = value

    def clear(self) -> None:
        self._data.clear()
        self._flags.clear()


class MongoRecordStore(RecordStore):
    """
    One MongoDB document per key.
    Collections: {"_id": name, "records": [...]}
    Flags:       {"_id": name, "flag": true}
    """

    def __init__(self, collection: Collection):
        self.collection = collection

    def load(self, name: str) -> List[Dict[str, Any]]:
        doc = self.collection.find_one({"_id": name})
        if not doc:
            return []
        return doc.get("records", [])

    def save(self, name: str, records: List[Dict[str, Any]]) -> None:
        self.collection.replace_one(
            {"_id": name},
            {"_id": name, "records": list(records)},
            upsert=True
        )

    def get_flag(self, name: str) -> bool:
        doc = self.collection.find_one({"_id": name})
        return bool(doc and doc.get("flag"))

    def set_flag(self, name: str, value: bool = True) -> None:
        self.collection.replace_one({"_id": name}, {"_id": name, "flag": value}, upsert=True)

    def clear(self) -> None:
        self.collection.delete_many({})


@lru_cache()
def get_record_store() -> RecordStore:
    """
    Process-wide store, chosen by settings.store_backend.
    Also used as a FastAPI dependency (tests override it).
    """
    settings = get_settings()
    if settings.store_backend == "mongo":
        from placementpro.db.mongodb import get_store_collection
        return MongoRecordStore(get_store_collection())
    return InMemoryRecordStore()
