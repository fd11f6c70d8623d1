"""
Document identifiers.

Ids are BSON ObjectIds rendered as 24 lowercase hex characters. The leading
4 bytes are the creation timestamp, so sorting ids sorts them by creation
time.
"""

from bson import ObjectId


def new_object_id() -> str:
    return str(ObjectId())


def is_object_id(value) -> bool:
    return isinstance(value, str) and ObjectId.is_valid(value)


def canonical_id(value) -> str | None:
    """The stored form of ``value``, or ``None`` when it cannot be an id."""
    if not is_object_id(value):
        return None
    return str(ObjectId(value))
