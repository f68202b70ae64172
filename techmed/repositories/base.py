"""Base repository shared by every aggregate.

Repositories only read and stage writes. Committing is the caller's job,
done through ``core.database.transaction``.
"""
from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy.orm import Session

from ..core.database import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    model: Type[ModelT]

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_by_id(self, entity_id: int) -> Optional[ModelT]:
        return self.db.query(self.model).filter_by(id=entity_id).first()

    def get_all(self) -> List[ModelT]:
        return self.db.query(self.model).order_by(self.model.id).all()

    def count(self) -> int:
        return self.db.query(self.model).count()

    def save(self, entity: ModelT) -> ModelT:
        self.db.add(entity)
        self.db.flush()
        return entity

    def flush(self) -> None:
        self.db.flush()
