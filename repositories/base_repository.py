# repositories/base_repository.py
"""
Base Repository class providing common database operations.

Repositories are bound to the request's Session and only flush; committing
(or rolling back) is left to whoever owns the session, so several repository
calls made by one service operation land in the same transaction.
"""
import logging
from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy.orm import Session

from models import Base

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Base)


class BaseRepository(Generic[T]):
     """Base repository class with common CRUD operations."""

     model: Type[T]

     def __init__(self, db: Session):
          self.db = db

     def _query(self):
          """Query used by every read; subclasses add eager loading here."""
          return self.db.query(self.model)

     def get_all(self) -> List[T]:
          """Get all entities, ordered by id."""
          return self._query().order_by(self.model.id).all()

     def get_by_id(self, id: Any) -> Optional[T]:
          """Get entity by ID."""
          return self._query().filter(self.model.id == id).first()

     def create(self, entity: T) -> T:
          """Persist a new entity and return it with its id assigned."""
          self.db.add(entity)
          self.db.flush()
          logger.debug("Created %s id=%s", self.model.__name__, entity.id)
          return entity

     def update(self, entity: T) -> T:
          """Flush pending changes of an already loaded entity."""
          self.db.add(entity)
          self.db.flush()
          return entity

     def delete(self, id: Any) -> bool:
          """Delete entity by ID. Returns False if there was nothing to delete."""
          entity = self.db.get(self.model, id)
          if entity is None:
               return False
          self.db.delete(entity)
          self.db.flush()
          logger.debug("Deleted %s id=%s", self.model.__name__, id)
          return True

     def exists(self, id: Any) -> bool:
          """Check whether a row with this ID exists."""
          return self.db.query(self.model.id).filter(self.model.id == id).first() is not None

     def reload(self, id: Any) -> Optional[T]:
          """
          Get entity by ID, overwriting whatever the session already holds.

          Used after writes so relations follow changed foreign keys.
          """
          return self._query().populate_existing().filter(self.model.id == id).first()
