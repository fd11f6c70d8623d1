from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tripshare.api.routers.auth import get_current_user
from tripshare.core.database import get_db
from tripshare.models.domain import PointCreate, PointRef, Trip
from tripshare.models.sql import User
from tripshare.services import points as point_service

router = APIRouter(prefix="/api/points", tags=["Points"])


@router.post("/{trip_id}", response_model=Trip)
def add_point(
    trip_id: str,
    data: PointCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Creates a point on a trip and returns the trip.
    """
    return point_service.add_point(db, trip_id, current_user, data)


@router.delete("/{trip_id}/{point_id}", response_model=List[PointRef])
def remove_point(
    trip_id: str,
    point_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return point_service.remove_point(db, trip_id, point_id, current_user)
