import logging
from typing import List

from sqlalchemy.orm import Session

from tripshare.core import config
from tripshare.core.database import commit
from tripshare.core.errors import ForbiddenError, NotFoundError
from tripshare.core.ids import canonical_id, new_object_id
from tripshare.models import domain
from tripshare.models.domain import PointCreate
from tripshare.models.sql import Point, User
from tripshare.services.trips import get_trip, index_of

logger = logging.getLogger("tripshare_server.points")


def add_point(
    db: Session, trip_id: str, user: User, data: PointCreate, persist: bool | None = None
) -> domain.Trip:
    """
    Creates a point and puts its reference at the front of the trip's points.

    With ``persist`` off (see ``PERSIST_NEW_POINTS``) the trip is returned with
    the new reference but nothing is written.
    """
    if persist is None:
        persist = config.PERSIST_NEW_POINTS

    trip = get_trip(db, trip_id)
    point = Point(id=new_object_id(), coord_x=data.coordX, coord_y=data.coordY, user_id=user.id)
    logger.info(f"User {user.id} adding point {point.id} to trip {trip_id}")

    trip.points.insert(0, {"_id": point.id, "user": user.id})
    result = domain.Trip.model_validate(trip)

    if persist:
        db.add(point)
        commit(db)
    else:
        db.rollback()
    return result


def remove_point(db: Session, trip_id: str, point_id: str, user: User) -> List[domain.PointRef]:
    trip = get_trip(db, trip_id)

    remove_index = index_of(trip.points, "_id", canonical_id(point_id))
    if remove_index is None:
        raise NotFoundError("Point doesn't exist")

    if trip.points[remove_index]["user"] != user.id:
        logger.warning(f"User {user.id} tried to remove point {point_id} from trip {trip_id}")
        raise ForbiddenError()

    trip.points.pop(remove_index)
    commit(db)
    return [domain.PointRef.model_validate(p) for p in trip.points]
