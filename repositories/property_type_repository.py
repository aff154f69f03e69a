# repositories/property_type_repository.py
from typing import Any, List, Optional

from sqlalchemy.orm import Session

from models import PropertyType


class PropertyTypeRepository:
     """Read-only access to the property type lookup table."""

     def __init__(self, db: Session):
          self.db = db

     def get_all(self) -> List[PropertyType]:
          return self.db.query(PropertyType).order_by(PropertyType.id).all()

     def get_by_id(self, id: Any) -> Optional[PropertyType]:
          return self.db.get(PropertyType, id)

     def exists(self, id: Any) -> bool:
          return self.db.query(PropertyType.id).filter(PropertyType.id == id).first() is not None
