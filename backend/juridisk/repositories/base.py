from typing import Generic, TypeVar, Type
from sqlalchemy.orm import Session
from ..core.database import Base
import logging

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with common CRUD operations

    Writes are flushed, never committed; the owning service decides when the
    unit of work is committed or rolled back.
    """

    def __init__(self, model: Type[ModelType], db: Session):
        self.model = model
        self.db = db

    def create(self, **kwargs) -> ModelType:
        """Create a new record"""
        instance = self.model(**kwargs)
        self.db.add(instance)
        self.db.flush()
        logger.debug(f"Created {self.model.__name__} with id: {instance.id}")
        return instance

    def delete_instance(self, instance: ModelType) -> None:
        """Delete an already loaded record"""
        self.db.delete(instance)
        self.db.flush()
        logger.debug(f"Deleted {self.model.__name__} with id: {instance.id}")

    def commit(self) -> None:
        """Commit the current transaction"""
        self.db.commit()

    def rollback(self) -> None:
        """Rollback the current transaction"""
        self.db.rollback()

    def refresh(self, instance: ModelType) -> None:
        """Reload an instance's attributes from the database"""
        self.db.refresh(instance)
