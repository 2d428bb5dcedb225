from __future__ import annotations

from typing import Any, ClassVar, Generic, Optional, Type, TypeVar, Union

from sqlalchemy import Executable, delete, func, select
from sqlalchemy.orm import Session

from blog_data.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)

# largest value a signed 64-bit INTEGER primary key can hold
MAX_ID = 2**63 - 1


# PUBLIC_INTERFACE
def parse_id(value: Union[str, int]) -> int:
    """
    Parse an entity id from its external (string) form.

    Only unsigned decimal strings up to MAX_ID are accepted; anything else
    raises ValueError.
    """
    if isinstance(value, bool):
        raise ValueError(f"invalid id: {value!r}")
    if isinstance(value, str):
        if not (value.isascii() and value.isdigit()):
            raise ValueError(f"invalid id: {value!r}")
        parsed = int(value)
    else:
        parsed = value
    if parsed < 0 or parsed > MAX_ID:
        raise ValueError(f"id out of range: {value!r}")
    return parsed


class BaseRepository(Generic[ModelT]):
    """
    Base class for repositories providing common helpers.

    Subclasses set `model` to their mapped class to get insert/delete/get/count.
    Database errors are never translated: callers see the SQLAlchemy exception.
    """

    model: ClassVar[Type[Base]]

    def __init__(self, session: Session) -> None:
        self.session = session

    def execute(self, statement: Executable, params: Optional[dict[str, Any]] = None):
        """Execute a SQLAlchemy statement."""
        return self.session.execute(statement, params or {})

    def scalars(self, statement: Executable, params: Optional[dict[str, Any]] = None):
        """Execute and return scalars."""
        result = self.execute(statement, params)
        return result.scalars()

    def scalar_one(self, statement: Executable, params: Optional[dict[str, Any]] = None):
        """Execute and return exactly one scalar; raises NoResultFound otherwise."""
        result = self.execute(statement, params)
        return result.scalar_one()

    def scalar_one_or_none(self, statement: Executable, params: Optional[dict[str, Any]] = None):
        """Execute and return a single scalar or None."""
        result = self.execute(statement, params)
        return result.scalar_one_or_none()

    def commit(self) -> None:
        """Commit current transaction; roll back and re-raise on failure."""
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

    def add(self, entity: Any) -> None:
        """Add a single entity to session."""
        self.session.add(entity)

    def discard_changes(self, entity: Any) -> None:
        """Drop unsaved attribute changes on an entity tracked by this session."""
        if entity in self.session:
            self.session.expire(entity)

    # Generic entity operations

    def insert(self, entity: ModelT) -> ModelT:
        """Persist a new row and return it with generated id and timestamps."""
        self.add(entity)
        self.commit()
        self.session.refresh(entity)
        return entity

    def delete(self, entity: ModelT) -> None:
        """Hard delete by id. Deleting a row that is already gone is a no-op."""
        model = type(self).model
        # matched objects in the identity map are marked deleted, so unsaved
        # changes on them are never flushed
        stmt = (
            delete(model)
            .where(model.id == entity.id)
            .execution_options(synchronize_session="fetch")
        )
        self.execute(stmt)
        self.commit()

    def get_by_id(self, entity_id: Union[str, int]) -> ModelT:
        """Return the row with the given id; raises ValueError or NoResultFound."""
        pid = parse_id(entity_id)
        model = type(self).model
        return self.scalar_one(select(model).where(model.id == pid))

    def count(self) -> int:
        model = type(self).model
        return int(self.scalar_one(select(func.count(model.id))))
