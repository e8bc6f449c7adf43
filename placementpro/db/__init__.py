"""
Database module - record store backends and typed repositories.
"""
from placementpro.db.store import RecordStore, InMemoryRecordStore, get_record_store
from placementpro.db.repository import Repository

__all__ = [
    "RecordStore",
    "InMemoryRecordStore",
    "get_record_store",
    "Repository",
]
