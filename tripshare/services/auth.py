from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerifyMismatchError
from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from sqlalchemy.orm import Session
import hashlib
import logging

from tripshare.core import config
from tripshare.core.database import commit
from tripshare.core.errors import AuthError, ValidationError
from tripshare.core.ids import canonical_id
from tripshare.models.domain import LoginRequest, RegisterRequest
from tripshare.models.sql import User

logger = logging.getLogger("tripshare_server.auth")

ph = PasswordHasher()


def verify_password(plain_password, hashed_password):
    try:
        ph.verify(hashed_password, plain_password)
        return True
    except (VerifyMismatchError, InvalidHashError):
        return False


def get_password_hash(password):
    return ph.hash(password)


def gravatar_url(email: str) -> str:
    digest = hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()
    return f"https://www.gravatar.com/avatar/{digest}?s=200&r=pg&d=mm"


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None):
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(
            minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES
        )
    to_encode.update({"exp": expire})
    encoded_jwt = jwt.encode(to_encode, config.JWT_SECRET_KEY, algorithm=config.JWT_ALGORITHM)
    return encoded_jwt


def decode_access_token(token: str) -> str:
    """Return the user id carried by ``token`` or raise ``AuthError``."""
    try:
        payload = jwt.decode(token, config.JWT_SECRET_KEY, algorithms=[config.JWT_ALGORITHM])
    except JWTError:
        raise AuthError()
    user_id = canonical_id(payload.get("sub"))
    if user_id is None:
        raise AuthError()
    return user_id


def register_user(db: Session, data: RegisterRequest) -> str:
    if db.query(User).filter(User.email == data.email).first():
        raise ValidationError([{"msg": "User already exists"}])

    user = User(
        name=data.name,
        email=data.email,
        avatar=gravatar_url(data.email),
        hashed_password=get_password_hash(data.password),
    )
    db.add(user)
    commit(db)
    logger.info(f"Registered user {user.id} ({user.email})")
    return create_access_token({"sub": user.id})


def authenticate_user(db: Session, data: LoginRequest) -> str:
    user = db.query(User).filter(User.email == data.email).first()
    if not user or not verify_password(data.password, user.hashed_password):
        logger.warning(f"Failed login attempt for {data.email}")
        raise ValidationError([{"msg": "Invalid Credentials"}])
    return create_access_token({"sub": user.id})


def get_user_for_token(db: Session, token: str) -> User:
    user = db.get(User, decode_access_token(token))
    if user is None:
        raise AuthError()
    return user
