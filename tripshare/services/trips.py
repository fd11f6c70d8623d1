"""
Trip operations: create, read, delete, likes and comments.

Each function takes the request's ORM session and the authenticated user,
loads the trip, mutates its embedded arrays and commits. Errors are raised
as ``tripshare.core.errors`` exceptions and rendered by the app.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.orm import Session

from tripshare.core.database import commit
from tripshare.core.errors import ConflictError, ForbiddenError, NotFoundError
from tripshare.core.ids import canonical_id, new_object_id
from tripshare.models import domain
from tripshare.models.domain import CommentCreate, TripCreate
from tripshare.models.sql import Trip, User

logger = logging.getLogger("tripshare_server.trips")


def index_of(entries: list, key: str, value: str) -> Optional[int]:
    """Position of the first embedded entry whose ``key`` equals ``value``."""
    for i, entry in enumerate(entries):
        if entry.get(key) == value:
            return i
    return None


def get_trip(db: Session, trip_id: str) -> Trip:
    # A malformed id can never match, so it is reported like a missing trip.
    key = canonical_id(trip_id)
    trip = db.get(Trip, key) if key else None
    if trip is None:
        logger.warning(f"Trip {trip_id} not found")
        raise NotFoundError("Trip not found")
    return trip


def create_trip(db: Session, user: User, data: TripCreate) -> domain.Trip:
    trip = Trip(
        title=data.title,
        description=data.description,
        price=data.price,
        photos=data.photos,
        name=user.name,
        avatar=user.avatar,
        user_id=user.id,
        likes=[],
        comments=[],
        points=[],
    )
    db.add(trip)
    commit(db)
    logger.info(f"User {user.id} created trip {trip.id} '{trip.title}'")
    return domain.Trip.model_validate(trip)


def list_trips(db: Session) -> List[domain.Trip]:
    trips = db.query(Trip).order_by(Trip.date.desc(), Trip.id.desc()).all()
    return [domain.Trip.model_validate(t) for t in trips]


def get_trip_by_id(db: Session, trip_id: str) -> domain.Trip:
    return domain.Trip.model_validate(get_trip(db, trip_id))


def delete_trip(db: Session, trip_id: str, user: User) -> None:
    trip = get_trip(db, trip_id)
    if trip.user_id != user.id:
        logger.warning(f"User {user.id} tried to delete trip {trip_id} owned by {trip.user_id}")
        raise ForbiddenError()
    db.delete(trip)
    commit(db)
    logger.info(f"Trip {trip_id} removed by {user.id}")


def like_trip(db: Session, trip_id: str, user: User) -> List[domain.Like]:
    trip = get_trip(db, trip_id)
    if index_of(trip.likes, "user", user.id) is not None:
        raise ConflictError("Post already liked")

    trip.likes.insert(0, {"_id": new_object_id(), "user": user.id})
    commit(db)
    return [domain.Like.model_validate(like) for like in trip.likes]


def unlike_trip(db: Session, trip_id: str, user: User) -> List[domain.Like]:
    trip = get_trip(db, trip_id)
    # Likes are unique per user, so the first match is the only one.
    remove_index = index_of(trip.likes, "user", user.id)
    if remove_index is None:
        raise ConflictError("Trip has not yet been liked")

    trip.likes.pop(remove_index)
    commit(db)
    return [domain.Like.model_validate(like) for like in trip.likes]


def add_comment(db: Session, trip_id: str, user: User, data: CommentCreate) -> List[domain.Comment]:
    trip = get_trip(db, trip_id)
    new_comment = {
        "_id": new_object_id(),
        "text": data.text,
        "name": user.name,
        "avatar": user.avatar,
        "user": user.id,
        "date": datetime.now(timezone.utc).isoformat(),
    }
    trip.comments.insert(0, new_comment)
    commit(db)
    logger.info(f"User {user.id} commented on trip {trip_id}")
    return [domain.Comment.model_validate(c) for c in trip.comments]


def remove_comment(db: Session, trip_id: str, comment_id: str, user: User) -> List[domain.Comment]:
    trip = get_trip(db, trip_id)

    remove_index = index_of(trip.comments, "_id", canonical_id(comment_id))
    if remove_index is None:
        raise NotFoundError("Comment doesn't exist")

    if trip.comments[remove_index]["user"] != user.id:
        logger.warning(f"User {user.id} tried to remove comment {comment_id} on trip {trip_id}")
        raise ForbiddenError()

    trip.comments.pop(remove_index)
    commit(db)
    return [domain.Comment.model_validate(c) for c in trip.comments]
