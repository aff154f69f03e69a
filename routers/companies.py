# routers/companies.py
"""
Company API routes.

Creating a company for an unknown owner answers 400 (see exception_handlers).
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from auth import verify_token
from database import get_session
from schemas.company import CompanyCreate, CompanyUpdate, CompanyResponse
from services.company_service import CompanyService

router = APIRouter(prefix="/api/companies", tags=["companies"])


def _not_found(company_id: int) -> HTTPException:
     return HTTPException(
          status_code=status.HTTP_404_NOT_FOUND,
          detail=f"Company with ID {company_id} not found"
     )


@router.get(
     "",
     response_model=List[CompanyResponse],
     summary="List all companies"
)
def list_companies(
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     return CompanyService.list_companies(db)


@router.post(
     "",
     response_model=CompanyResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Register a company"
)
def create_company(
     company_data: CompanyCreate,
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     """
     Register a company to an owner and mark the owner as a company contact.

     - **ownerId**: must reference an existing owner
     - **companyName**: required
     - **companySite**: optional http(s) URL
     """
     company = CompanyService.create_company(db, company_data)
     db.commit()
     return company


@router.get(
     "/{company_id}",
     response_model=CompanyResponse,
     summary="Get company by ID"
)
def get_company(
     company_id: int,
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     company = CompanyService.get_company(db, company_id)
     if company is None:
          raise _not_found(company_id)
     return company


@router.patch(
     "/{company_id}",
     response_model=CompanyResponse,
     summary="Update company"
)
def update_company(
     company_id: int,
     company_data: CompanyUpdate,
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     company = CompanyService.update_company(db, company_id, company_data)
     if company is None:
          raise _not_found(company_id)
     db.commit()
     return company


@router.delete(
     "/{company_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Delete company"
)
def delete_company(
     company_id: int,
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     if not CompanyService.delete_company(db, company_id):
          raise _not_found(company_id)
     db.commit()
     return None
