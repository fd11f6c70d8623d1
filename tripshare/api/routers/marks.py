from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tripshare.api.routers.auth import get_current_user
from tripshare.core.database import get_db
from tripshare.models.domain import Mark, MarkCreate, Message
from tripshare.models.sql import User
from tripshare.services import marks as mark_service

router = APIRouter(prefix="/api/marks", tags=["Marks"])


@router.post("/{point_id}", response_model=Mark)
def add_mark(
    point_id: str,
    data: MarkCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return mark_service.add_mark(db, point_id, current_user, data)


@router.get("/{point_id}", response_model=List[Mark])
def list_marks(
    point_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return mark_service.list_marks(db, point_id)


@router.delete("/{mark_id}", response_model=Message)
def delete_mark(
    mark_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    mark_service.delete_mark(db, mark_id, current_user)
    return Message(msg="Mark removed")
