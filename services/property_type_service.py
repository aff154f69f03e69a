# services/property_type_service.py
from typing import List

from sqlalchemy.orm import Session

from repositories import PropertyTypeRepository
from schemas.property_type import PropertyTypeResponse


class PropertyTypeService:
     """Read-only lookup of property types."""

     @staticmethod
     def list_property_types(db: Session) -> List[PropertyTypeResponse]:
          """All property types, ordered by id."""
          return [
               PropertyTypeResponse.model_validate(property_type)
               for property_type in PropertyTypeRepository(db).get_all()
          ]
