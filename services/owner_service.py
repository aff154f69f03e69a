# services/owner_service.py
"""
Owner Service - business rules for owners.

Owners are created with is_company_contact switched off, updated with
merge-patch semantics, and can only be deleted once nothing references them.
"""
import enum
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from models import Owner
from repositories import CompanyRepository, OwnerRepository, PropertyRepository
from schemas.owner import OwnerCreate, OwnerUpdate, OwnerResponse

logger = logging.getLogger(__name__)

# Blank values for these are treated as "not given"
NON_BLANKABLE_FIELDS = ("first_name", "last_name", "email", "phone")
# These may be cleared with an empty string
BLANKABLE_FIELDS = ("address", "description")


class DeleteOwnerResult(str, enum.Enum):
     """Outcome of an owner delete request."""
     DELETED = "DELETED"
     NOT_FOUND = "NOT_FOUND"
     HAS_DEPENDENTS = "HAS_DEPENDENTS"


class OwnerService:
     """Service class for owner-related business logic."""

     @staticmethod
     def list_owners(db: Session) -> List[OwnerResponse]:
          owners = OwnerRepository(db).get_all()
          return [OwnerResponse.model_validate(owner) for owner in owners]

     @staticmethod
     def get_owner(db: Session, owner_id: int) -> Optional[OwnerResponse]:
          owner = OwnerRepository(db).get_by_id(owner_id)
          return None if owner is None else OwnerResponse.model_validate(owner)

     @staticmethod
     def create_owner(db: Session, data: OwnerCreate) -> OwnerResponse:
          """
          Create an owner. is_company_contact is always stored as False,
          whatever the caller sent.
          """
          owner = Owner(
               first_name=data.first_name,
               last_name=data.last_name,
               email=data.email,
               phone=data.phone,
               address=data.address,
               description=data.description,
               is_company_contact=False,
          )
          owner = OwnerRepository(db).create(owner)
          logger.info("Created owner id=%s", owner.id)
          return OwnerResponse.model_validate(owner)

     @staticmethod
     def update_owner(db: Session, owner_id: int, data: OwnerUpdate) -> Optional[OwnerResponse]:
          """
          Merge-patch an owner.

          Returns:
               The updated owner, or None if it does not exist.
          """
          repository = OwnerRepository(db)
          owner = repository.get_by_id(owner_id)
          if owner is None:
               return None

          given = data.model_fields_set
          for field in NON_BLANKABLE_FIELDS:
               value = getattr(data, field)
               if field in given and value:
                    setattr(owner, field, value)
          for field in BLANKABLE_FIELDS:
               value = getattr(data, field)
               if field in given and value is not None:
                    setattr(owner, field, value)

          owner = repository.update(owner)
          return OwnerResponse.model_validate(owner)

     @staticmethod
     def delete_owner(db: Session, owner_id: int) -> DeleteOwnerResult:
          """
          Delete an owner that has no companies and no properties.

          The check and the delete run in the caller's transaction; the
          RESTRICT foreign keys reject the delete if a dependent row slips in
          between.
          """
          if CompanyRepository(db).get_by_owner_id(owner_id):
               logger.info("Refusing to delete owner id=%s: has companies", owner_id)
               return DeleteOwnerResult.HAS_DEPENDENTS

          if PropertyRepository(db).get_by_owner_id(owner_id):
               logger.info("Refusing to delete owner id=%s: has properties", owner_id)
               return DeleteOwnerResult.HAS_DEPENDENTS

          if not OwnerRepository(db).delete(owner_id):
               return DeleteOwnerResult.NOT_FOUND

          logger.info("Deleted owner id=%s", owner_id)
          return DeleteOwnerResult.DELETED
