import logging

from sqlalchemy.orm import Session

from tripshare.core.database import commit
from tripshare.core.errors import ConflictError, NotFoundError
from tripshare.core.ids import canonical_id
from tripshare.models import domain
from tripshare.models.sql import TripProfile, User
from tripshare.services.trips import get_trip

logger = logging.getLogger("tripshare_server.profiles")

NO_PROFILE = "There is no profile for this user"


def _find_profile(db: Session, user_id: str) -> TripProfile | None:
    key = canonical_id(user_id)
    if key is None:
        return None
    return db.query(TripProfile).filter(TripProfile.user_id == key).first()


def get_profile(db: Session, user_id: str) -> domain.TripProfile:
    profile = _find_profile(db, user_id)
    if profile is None:
        raise NotFoundError(NO_PROFILE)
    return domain.TripProfile.model_validate(profile)


def save_trip(db: Session, trip_id: str, user: User) -> domain.TripProfile:
    trip = get_trip(db, trip_id)

    profile = _find_profile(db, user.id)
    if profile is None:
        profile = TripProfile(user_id=user.id, trips=[])
        db.add(profile)
    elif trip.id in profile.trips:
        raise ConflictError("Trip already saved")

    profile.trips.insert(0, trip.id)
    commit(db)
    logger.info(f"User {user.id} saved trip {trip.id}")
    return domain.TripProfile.model_validate(profile)


def unsave_trip(db: Session, trip_id: str, user: User) -> domain.TripProfile:
    profile = _find_profile(db, user.id)
    if profile is None:
        raise NotFoundError(NO_PROFILE)
    key = canonical_id(trip_id)
    if key not in profile.trips:
        raise NotFoundError("Trip is not in this profile")

    profile.trips.remove(key)
    commit(db)
    return domain.TripProfile.model_validate(profile)
