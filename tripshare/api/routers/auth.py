import logging

from fastapi import APIRouter, Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from tripshare.core.database import get_db
from tripshare.core.errors import AuthError
from tripshare.models.domain import LoginRequest, TokenResponse, UserPublic
from tripshare.models.sql import User
from tripshare.services import auth as auth_service

logger = logging.getLogger("tripshare_server.auth")

router = APIRouter(prefix="/api/auth", tags=["Auth"])

bearer = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer),
    db: Session = Depends(get_db),
) -> User:
    if credentials is None:
        raise AuthError("No token, authorization denied")
    return auth_service.get_user_for_token(db, credentials.credentials)


@router.get("", response_model=UserPublic)
def get_me(current_user: User = Depends(get_current_user)):
    return UserPublic.model_validate(current_user)


@router.post("", response_model=TokenResponse)
def login(data: LoginRequest, db: Session = Depends(get_db)):
    """
    Authenticates a user and returns a bearer token.
    """
    return TokenResponse(token=auth_service.authenticate_user(db, data))
