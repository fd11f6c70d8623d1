from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tripshare.api.routers.auth import get_current_user
from tripshare.core.database import get_db
from tripshare.models.domain import Comment, CommentCreate, Like, Message, Trip, TripCreate
from tripshare.models.sql import User
from tripshare.services import trips as trip_service

router = APIRouter(prefix="/api/trips", tags=["Trips"])


@router.post("", response_model=Trip)
def create_trip(
    data: TripCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return trip_service.create_trip(db, current_user, data)


@router.get("", response_model=List[Trip])
def list_trips(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    """
    All trips, newest first.
    """
    return trip_service.list_trips(db)


@router.get("/{trip_id}", response_model=Trip)
def get_trip(
    trip_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return trip_service.get_trip_by_id(db, trip_id)


@router.delete("/{trip_id}", response_model=Message)
def delete_trip(
    trip_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    trip_service.delete_trip(db, trip_id, current_user)
    return Message(msg="Trip removed")


@router.put("/like/{trip_id}", response_model=List[Like])
def like_trip(
    trip_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return trip_service.like_trip(db, trip_id, current_user)


@router.put("/unlike/{trip_id}", response_model=List[Like])
def unlike_trip(
    trip_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return trip_service.unlike_trip(db, trip_id, current_user)


@router.post("/comment/{trip_id}", response_model=List[Comment])
def add_comment(
    trip_id: str,
    data: CommentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return trip_service.add_comment(db, trip_id, current_user, data)


@router.delete("/comment/{trip_id}/{comment_id}", response_model=List[Comment])
def remove_comment(
    trip_id: str,
    comment_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return trip_service.remove_comment(db, trip_id, comment_id, current_user)
