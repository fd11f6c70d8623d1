from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tripshare.api.routers.auth import get_current_user
from tripshare.core.database import get_db
from tripshare.models.domain import TripProfile
from tripshare.models.sql import User
from tripshare.services import profiles as profile_service

router = APIRouter(prefix="/api/tripProfile", tags=["Trip Profile"])


@router.get("/me", response_model=TripProfile)
def get_my_profile(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return profile_service.get_profile(db, current_user.id)


@router.get("/user/{user_id}", response_model=TripProfile)
def get_user_profile(
    user_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return profile_service.get_profile(db, user_id)


@router.post("/trips/{trip_id}", response_model=TripProfile)
def save_trip(
    trip_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return profile_service.save_trip(db, trip_id, current_user)


@router.delete("/trips/{trip_id}", response_model=TripProfile)
def unsave_trip(
    trip_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return profile_service.unsave_trip(db, trip_id, current_user)
