"""
MongoDB Connection Utility

Only used when PLACEMENT_STORE_BACKEND=mongo. Every store key (users,
drives, applications, ...) is one document in a single collection:

    {"_id": "drives", "records": [...]}
"""
import logging

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

from placementpro.core.config import get_settings

logger = logging.getLogger(__name__)

# Global client (connection pooling handled internally by pymongo)
_client: MongoClient = None
_db: Database = None


def get_mongo_client() -> MongoClient:
    """Get or create MongoDB client (singleton pattern)"""
    global _client
    if _client is None:
        _client = MongoClient(get_settings().mongodb_uri)
    return _client


def get_mongo_db() -> Database:
    global _db
    if _db is None:
        _db = get_mongo_client()[get_settings().mongodb_db]
    return _db


def get_store_collection() -> Collection:
    return get_mongo_db()[get_settings().mongodb_collection]


def test_mongo_connection() -> bool:
    """
    Test if MongoDB is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        get_mongo_client().admin.command("ping")
        return True
    except PyMongoError as e:
        logger.warning("MongoDB connection failed: %s", e)
        return False
