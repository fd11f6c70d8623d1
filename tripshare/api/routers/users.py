from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tripshare.core.database import get_db
from tripshare.models.domain import RegisterRequest, TokenResponse
from tripshare.services import auth as auth_service

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.post("", response_model=TokenResponse)
def register(data: RegisterRequest, db: Session = Depends(get_db)):
    """
    Registers a user and returns a bearer token for them.
    """
    return TokenResponse(token=auth_service.register_user(db, data))
