from datetime import datetime
from typing import Annotated, List, Optional

from pydantic import (
    AfterValidator,
    AliasChoices,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    EmailStr,
    Field,
)
from pydantic_core import PydanticCustomError


def required(message: str):
    """Presence check: rejects a missing value or an empty string."""

    def check(value):
        if value is None or value == "":
            raise PydanticCustomError("required", message)
        return value

    return BeforeValidator(check)


EMAIL_MESSAGE = "Please include a valid email"

Email = Annotated[EmailStr, required(EMAIL_MESSAGE), AfterValidator(str.lower)]


def _password(value):
    if not isinstance(value, str) or len(value) < 6:
        raise PydanticCustomError(
            "password", "Please enter a password with 6 or more characters"
        )
    return value


# ----------------------
# Commands
# ----------------------


class TripCreate(BaseModel):
    title: Annotated[str, required("Title is required")] = Field(None, validate_default=True)
    description: Annotated[str, required("Description is required")] = Field(
        None, validate_default=True
    )
    price: Annotated[float, required("Price is required")] = Field(None, validate_default=True)
    photos: Annotated[str, required("Photos is required")] = Field(None, validate_default=True)


class CommentCreate(BaseModel):
    text: Annotated[str, required("Text is required")] = Field(None, validate_default=True)


class PointCreate(BaseModel):
    coordX: Annotated[float, required("Coordinate X is required")] = Field(
        None, validate_default=True
    )
    coordY: Annotated[float, required("Coordinate Y is required")] = Field(
        None, validate_default=True
    )


class MarkCreate(BaseModel):
    title: Annotated[str, required("Title is required")] = Field(None, validate_default=True)
    description: Optional[str] = None
    photos: Optional[str] = None


class RegisterRequest(BaseModel):
    name: Annotated[str, required("Name is required")] = Field(None, validate_default=True)
    email: Email = Field(None, validate_default=True)
    password: Annotated[str, BeforeValidator(_password)] = Field(None, validate_default=True)


class LoginRequest(BaseModel):
    email: Email = Field(None, validate_default=True)
    password: Annotated[str, required("Password is required")] = Field(
        None, validate_default=True
    )


# ----------------------
# Documents
# ----------------------


class Document(BaseModel):
    """Base for stored documents; the identifier is exposed as ``_id``."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str = Field(validation_alias=AliasChoices("_id", "id"), serialization_alias="_id")


class OwnedDocument(Document):
    user: Optional[str] = Field(
        None, validation_alias=AliasChoices("user", "user_id"), serialization_alias="user"
    )


class Like(OwnedDocument):
    pass


class Comment(OwnedDocument):
    text: str
    name: Optional[str] = None
    avatar: Optional[str] = None
    date: datetime


class PointRef(OwnedDocument):
    """Entry of a trip's ``points`` list; ``_id`` is the referenced point."""


class Trip(OwnedDocument):
    name: Optional[str] = None
    avatar: Optional[str] = None
    title: str
    description: str
    price: float
    photos: str
    date: datetime
    likes: List[Like] = Field(default_factory=list)
    comments: List[Comment] = Field(default_factory=list)
    points: List[PointRef] = Field(default_factory=list)


class Mark(OwnedDocument):
    point: Optional[str] = Field(
        None, validation_alias=AliasChoices("point", "point_id"), serialization_alias="point"
    )
    title: str
    description: Optional[str] = None
    photos: Optional[str] = None


class TripProfile(OwnedDocument):
    trips: List[str] = Field(default_factory=list)


class UserPublic(Document):
    name: str
    email: str
    avatar: Optional[str] = None
    date: datetime


class TokenResponse(BaseModel):
    token: str


class Message(BaseModel):
    msg: str
