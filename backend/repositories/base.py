# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20260206v1
# ---------------------------------------------------------------------------
"""
Generic CRUD repository over a SQLAlchemy session.

Repositories only move rows in and out of the store; validation and state
changes belong to the services.
"""

from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.errors import ConstraintViolationError

T = TypeVar("T")


class Repository(Generic[T]):
    model: Type[T]

    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> List[T]:
        return self.db.query(self.model).order_by(self.model.id).all()

    def find_by_id(self, entity_id: int) -> Optional[T]:
        return self.db.get(self.model, entity_id)

    def save(self, entity: T) -> T:
        """
        Insert or update *entity* and commit.  The primary key is assigned
        on first save.  A constraint rejection rolls the session back and
        raises :class:`ConstraintViolationError`; any other database error
        propagates unchanged.
        """
        self.db.add(entity)
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            raise ConstraintViolationError(str(exc.orig)) from exc
        self.db.refresh(entity)
        return entity
