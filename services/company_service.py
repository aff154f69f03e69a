# services/company_service.py
"""
Company Service - business rules for companies.

Registering a company marks its owner as a company contact. Both writes are
only flushed here, so they commit (or roll back) together with the request's
session.
"""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from exceptions import ReferencedEntityNotFoundError
from models import Company
from repositories import CompanyRepository, OwnerRepository
from schemas.company import CompanyCreate, CompanyUpdate, CompanyResponse

logger = logging.getLogger(__name__)


class CompanyService:
     """Service class for company-related business logic."""

     @staticmethod
     def list_companies(db: Session) -> List[CompanyResponse]:
          companies = CompanyRepository(db).get_all()
          return [CompanyResponse.model_validate(company) for company in companies]

     @staticmethod
     def get_company(db: Session, company_id: int) -> Optional[CompanyResponse]:
          company = CompanyRepository(db).get_by_id(company_id)
          return None if company is None else CompanyResponse.model_validate(company)

     @staticmethod
     def create_company(db: Session, data: CompanyCreate) -> CompanyResponse:
          """
          Register a company to an existing owner.

          Steps:
               1. Verify the owner exists
               2. Persist the company
               3. Set the owner's is_company_contact flag (always written)
               4. Reload the company with its owner

          Raises:
               ReferencedEntityNotFoundError: If the owner doesn't exist
          """
          owners = OwnerRepository(db)
          companies = CompanyRepository(db)

          if not owners.exists(data.owner_id):
               raise ReferencedEntityNotFoundError("Owner", "ownerId", data.owner_id)

          company = companies.create(
               Company(
                    owner_id=data.owner_id,
                    company_name=data.company_name,
                    company_site=data.company_site,
               )
          )

          CompanyService.mark_owner_as_company_contact(db, data.owner_id)

          company = companies.reload(company.id)
          logger.info("Created company id=%s for owner id=%s", company.id, data.owner_id)
          return CompanyResponse.model_validate(company)

     @staticmethod
     def mark_owner_as_company_contact(db: Session, owner_id: int) -> None:
          """Owner-side effect of registering a company."""
          owners = OwnerRepository(db)
          owner = owners.get_by_id(owner_id)
          if owner is None:
               raise ReferencedEntityNotFoundError("Owner", "ownerId", owner_id)
          owner.is_company_contact = True
          owners.update(owner)

     @staticmethod
     def update_company(db: Session, company_id: int, data: CompanyUpdate) -> Optional[CompanyResponse]:
          """
          Merge-patch a company. A blank name is ignored; the site may be cleared.

          Returns:
               The updated company, or None if it does not exist.
          """
          companies = CompanyRepository(db)
          company = companies.get_by_id(company_id)
          if company is None:
               return None

          given = data.model_fields_set
          if "company_name" in given and data.company_name:
               company.company_name = data.company_name
          if "company_site" in given and data.company_site is not None:
               company.company_site = data.company_site

          companies.update(company)
          company = companies.reload(company_id)
          return CompanyResponse.model_validate(company)

     @staticmethod
     def delete_company(db: Session, company_id: int) -> bool:
          """Delete a company. Returns False if it did not exist."""
          deleted = CompanyRepository(db).delete(company_id)
          if deleted:
               logger.info("Deleted company id=%s", company_id)
          return deleted
