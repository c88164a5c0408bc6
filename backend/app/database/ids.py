"""
Helpers for MongoDB document identifiers.
"""
from typing import Optional

from bson import ObjectId
from bson.errors import InvalidId


def parse_object_id(value: Optional[str]) -> Optional[ObjectId]:
    """Convert a path/token id to an ObjectId, or None if it is not one."""
    # ObjectId(None) would mint a fresh id
    if not isinstance(value, str):
        return None
    try:
        return ObjectId(value)
    except InvalidId:
        return None
