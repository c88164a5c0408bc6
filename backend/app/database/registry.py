"""
Index management.
Ensures the collections carry their indexes on startup.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from app.database.databases import skg_db

logger = logging.getLogger(__name__)


async def create_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create necessary indexes for all collections."""
    for collection_name, indexes in skg_db.Collections.INDEXES.items():
        collection = db[collection_name]
        for index_def in indexes:
            keys = index_def["keys"]
            kwargs = {k: v for k, v in index_def.items() if k != "keys"}
            try:
                await collection.create_index(keys, **kwargs)
            except PyMongoError as e:
                # Existing duplicates or an index with different options
                logger.warning(
                    "Could not create index %s on %s: %s", keys, collection_name, e
                )
