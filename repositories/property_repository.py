# repositories/property_repository.py
from typing import List

from sqlalchemy.orm import joinedload

from models import Property
from .base_repository import BaseRepository


class PropertyRepository(BaseRepository[Property]):
     """Repository for Property operations. Reads include owner and property type."""

     model = Property

     def _query(self):
          return self.db.query(Property).options(
               joinedload(Property.owner),
               joinedload(Property.property_type),
          )

     def get_by_owner_id(self, owner_id: int) -> List[Property]:
          """Get all properties held by an owner."""
          return (
               self._query()
               .filter(Property.owner_id == owner_id)
               .order_by(Property.id)
               .all()
          )
