"""Base repository with dependency injection pattern."""

from typing import Generic, TypeVar

from sqlmodel import Session, SQLModel

from core.log import get_logger

logger = get_logger(__name__)

T = TypeVar("T", bound=SQLModel)


class BaseRepository(Generic[T]):
    """Base repository with dependency injection pattern."""

    def __init__(self, model: type[T], db: Session) -> None:
        self.model = model
        self.db = db

    def create(self, obj: T) -> T:
        try:
            self.db.add(obj)
            self.db.commit()
            self.db.refresh(obj)
            logger.debug(f"Created {obj.model_dump()}")
        except Exception as exc:
            self.db.rollback()
            logger.error(f"Failed to create {obj.model_dump()}: {exc}")
            raise

        return obj

    def update(self, obj: T) -> T:
        try:
            self.db.add(obj)
            self.db.commit()
            self.db.refresh(obj)
        except Exception as exc:
            self.db.rollback()
            logger.error(f"Failed to update {obj.model_dump()}: {exc}")
            raise

        return obj
