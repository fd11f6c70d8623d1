"""
Document store handle.

``Database`` owns the engine and the session factory. One instance is built
with the application, tables are created in the lifespan hook and the engine
is disposed on shutdown. Routes get a fresh session per request through
``get_db``.
"""

import logging

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.orm.exc import StaleDataError

from tripshare.core.errors import ConflictError, ServerError

logger = logging.getLogger("tripshare_server.database")


class Base(DeclarativeBase):
    pass


class Database:
    def __init__(self, url: str, **engine_kwargs):
        if url.startswith("sqlite"):
            engine_kwargs.setdefault("connect_args", {"check_same_thread": False})
        self.engine = create_engine(url, **engine_kwargs)
        self.session_factory = sessionmaker(
            autocommit=False, autoflush=False, expire_on_commit=False, bind=self.engine
        )

    def create_all(self) -> None:
        Base.metadata.create_all(bind=self.engine)

    def drop_all(self) -> None:
        Base.metadata.drop_all(bind=self.engine)

    def dispose(self) -> None:
        self.engine.dispose()

    def session(self) -> Session:
        return self.session_factory()


def get_db(request: Request):
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()


def commit(db: Session) -> None:
    """Commit the unit of work, mapping store failures onto API errors."""
    try:
        db.commit()
    except StaleDataError:
        db.rollback()
        logger.warning("Concurrent update detected, commit rejected")
        raise ConflictError("Trip was modified by another request, try again")
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception(f"Failed to persist changes: {e}")
        raise ServerError()
