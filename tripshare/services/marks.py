import logging
from typing import List

from sqlalchemy.orm import Session

from tripshare.core.database import commit
from tripshare.core.errors import ForbiddenError, NotFoundError
from tripshare.core.ids import canonical_id
from tripshare.models import domain
from tripshare.models.domain import MarkCreate
from tripshare.models.sql import Mark, Point, User

logger = logging.getLogger("tripshare_server.marks")


def add_mark(db: Session, point_id: str, user: User, data: MarkCreate) -> domain.Mark:
    key = canonical_id(point_id)
    point = db.get(Point, key) if key else None
    if point is None:
        raise NotFoundError("Point not found")

    mark = Mark(
        user_id=user.id,
        point_id=point.id,
        title=data.title,
        description=data.description,
        photos=data.photos,
    )
    db.add(mark)
    commit(db)
    logger.info(f"User {user.id} marked point {point.id}")
    return domain.Mark.model_validate(mark)


def list_marks(db: Session, point_id: str) -> List[domain.Mark]:
    marks = (
        db.query(Mark)
        .filter(Mark.point_id == canonical_id(point_id))
        .order_by(Mark.id.desc())
        .all()
    )
    return [domain.Mark.model_validate(m) for m in marks]


def delete_mark(db: Session, mark_id: str, user: User) -> None:
    key = canonical_id(mark_id)
    mark = db.get(Mark, key) if key else None
    if mark is None:
        raise NotFoundError("Mark not found")
    if mark.user_id != user.id:
        raise ForbiddenError()
    db.delete(mark)
    commit(db)
