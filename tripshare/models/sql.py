from sqlalchemy import JSON, Column, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.ext.mutable import MutableList
from tripshare.core.database import Base
from tripshare.core.ids import new_object_id
import datetime
from datetime import timezone


def _now():
    return datetime.datetime.now(timezone.utc)


class User(Base):
    __tablename__ = "users"

    id = Column(String(24), primary_key=True, default=new_object_id)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    avatar = Column(String)
    hashed_password = Column(String, nullable=False)
    date = Column(DateTime(timezone=True), default=_now)


class Trip(Base):
    __tablename__ = "trips"

    id = Column(String(24), primary_key=True, default=new_object_id)
    user_id = Column(String(24), ForeignKey("users.id"), index=True)
    # Snapshot of the creator's profile at creation time
    name = Column(String)
    avatar = Column(String)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    price = Column(Float, nullable=False)
    photos = Column(Text, nullable=False)
    date = Column(DateTime(timezone=True), default=_now, index=True)

    # Embedded arrays, newest first
    likes = Column(MutableList.as_mutable(JSON), default=list, nullable=False)
    comments = Column(MutableList.as_mutable(JSON), default=list, nullable=False)
    points = Column(MutableList.as_mutable(JSON), default=list, nullable=False)

    version_id = Column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version_id}


class Point(Base):
    __tablename__ = "points"

    id = Column(String(24), primary_key=True, default=new_object_id)
    user_id = Column(String(24), ForeignKey("users.id"), index=True)
    coord_x = Column(Float, nullable=False)
    coord_y = Column(Float, nullable=False)


class Mark(Base):
    __tablename__ = "marks"

    id = Column(String(24), primary_key=True, default=new_object_id)
    user_id = Column(String(24), ForeignKey("users.id"), index=True)
    point_id = Column(String(24), index=True)
    title = Column(String, nullable=False)
    description = Column(Text)
    photos = Column(Text)


class TripProfile(Base):
    __tablename__ = "trip_profiles"

    id = Column(String(24), primary_key=True, default=new_object_id)
    user_id = Column(String(24), ForeignKey("users.id"), unique=True, index=True)
    trips = Column(MutableList.as_mutable(JSON), default=list, nullable=False)
