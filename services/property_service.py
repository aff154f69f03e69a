# services/property_service.py
"""
Property Service - business rules for properties.

Owner and property type references are checked before anything is written;
construction dates are stored as UTC.
"""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from exceptions import ReferencedEntityNotFoundError
from models import Property
from repositories import OwnerRepository, PropertyRepository, PropertyTypeRepository
from schemas.property import PropertyCreate, PropertyUpdate, PropertyResponse
from utils.dates import to_utc

logger = logging.getLogger(__name__)

# Applied whenever present, even if falsy (0 is a value)
VALUE_FIELDS = ("property_length", "property_cost")
# Applied only when non-empty
NON_BLANKABLE_FIELDS = ("country", "city")
# Applied whenever not null, so they can be cleared
BLANKABLE_FIELDS = ("description", "street", "zip_code")


class PropertyService:
     """Service class for property-related business logic."""

     @staticmethod
     def list_properties(db: Session) -> List[PropertyResponse]:
          properties = PropertyRepository(db).get_all()
          return [PropertyResponse.model_validate(prop) for prop in properties]

     @staticmethod
     def get_property(db: Session, property_id: int) -> Optional[PropertyResponse]:
          prop = PropertyRepository(db).get_by_id(property_id)
          return None if prop is None else PropertyResponse.model_validate(prop)

     @staticmethod
     def _check_owner(db: Session, owner_id: int) -> None:
          if not OwnerRepository(db).exists(owner_id):
               raise ReferencedEntityNotFoundError("Owner", "ownerId", owner_id)

     @staticmethod
     def _check_property_type(db: Session, property_type_id: int) -> None:
          if not PropertyTypeRepository(db).exists(property_type_id):
               raise ReferencedEntityNotFoundError("Property Type", "propertyTypeId", property_type_id)

     @staticmethod
     def create_property(db: Session, data: PropertyCreate) -> PropertyResponse:
          """
          Create a property.

          Raises:
               ReferencedEntityNotFoundError: If the owner or property type doesn't exist
          """
          PropertyService._check_owner(db, data.owner_id)
          PropertyService._check_property_type(db, data.property_type_id)

          properties = PropertyRepository(db)
          prop = properties.create(
               Property(
                    owner_id=data.owner_id,
                    property_type_id=data.property_type_id,
                    property_length=data.property_length,
                    property_cost=data.property_cost,
                    date_of_building=to_utc(data.date_of_building),
                    description=data.description,
                    country=data.country,
                    city=data.city,
                    street=data.street,
                    zip_code=data.zip_code,
               )
          )

          prop = properties.reload(prop.id)
          logger.info("Created property id=%s for owner id=%s", prop.id, data.owner_id)
          return PropertyResponse.model_validate(prop)

     @staticmethod
     def update_property(db: Session, property_id: int, data: PropertyUpdate) -> Optional[PropertyResponse]:
          """
          Merge-patch a property.

          Both references are verified before any field is touched, so a bad
          ownerId or propertyTypeId leaves the property unmodified.

          Returns:
               The updated property, or None if it does not exist.

          Raises:
               ReferencedEntityNotFoundError: If a new owner or property type doesn't exist
          """
          properties = PropertyRepository(db)
          prop = properties.get_by_id(property_id)
          if prop is None:
               return None

          given = data.model_fields_set
          new_owner_id = data.owner_id if "owner_id" in given else None
          new_type_id = data.property_type_id if "property_type_id" in given else None

          if new_owner_id is not None:
               PropertyService._check_owner(db, new_owner_id)
          if new_type_id is not None:
               PropertyService._check_property_type(db, new_type_id)

          if new_owner_id is not None:
               prop.owner_id = new_owner_id
          if new_type_id is not None:
               prop.property_type_id = new_type_id

          for field in VALUE_FIELDS:
               value = getattr(data, field)
               if field in given and value is not None:
                    setattr(prop, field, value)

          if "date_of_building" in given and data.date_of_building is not None:
               prop.date_of_building = to_utc(data.date_of_building)

          for field in NON_BLANKABLE_FIELDS:
               value = getattr(data, field)
               if field in given and value:
                    setattr(prop, field, value)
          for field in BLANKABLE_FIELDS:
               value = getattr(data, field)
               if field in given and value is not None:
                    setattr(prop, field, value)

          properties.update(prop)
          prop = properties.reload(property_id)
          return PropertyResponse.model_validate(prop)

     @staticmethod
     def delete_property(db: Session, property_id: int) -> bool:
          """Delete a property. Returns False if it did not exist."""
          deleted = PropertyRepository(db).delete(property_id)
          if deleted:
               logger.info("Deleted property id=%s", property_id)
          return deleted
