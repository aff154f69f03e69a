# routers/owners.py
"""
Owner API routes.

Provides CRUD operations for owners. Deleting an owner that still has
companies or properties is refused with 409.
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from auth import verify_token
from database import get_session
from schemas.owner import OwnerCreate, OwnerUpdate, OwnerResponse
from services.owner_service import OwnerService, DeleteOwnerResult

router = APIRouter(prefix="/api/owners", tags=["owners"])


def _not_found(owner_id: int) -> HTTPException:
     return HTTPException(
          status_code=status.HTTP_404_NOT_FOUND,
          detail=f"Owner with ID {owner_id} not found"
     )


@router.get(
     "",
     response_model=List[OwnerResponse],
     summary="List all owners"
)
def list_owners(
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     return OwnerService.list_owners(db)


@router.post(
     "",
     response_model=OwnerResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a new owner"
)
def create_owner(
     owner_data: OwnerCreate,
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     """
     Create a new owner.

     - **firstName**, **lastName**: required
     - **email**, **phone**: required, validated
     - **isCompanyContact**: ignored, new owners are never company contacts
     """
     owner = OwnerService.create_owner(db, owner_data)
     db.commit()
     return owner


@router.get(
     "/{owner_id}",
     response_model=OwnerResponse,
     summary="Get owner by ID"
)
def get_owner(
     owner_id: int,
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     owner = OwnerService.get_owner(db, owner_id)
     if owner is None:
          raise _not_found(owner_id)
     return owner


@router.patch(
     "/{owner_id}",
     response_model=OwnerResponse,
     summary="Update owner"
)
def update_owner(
     owner_id: int,
     owner_data: OwnerUpdate,
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     """
     Update an existing owner.

     Only provided fields will be updated. Empty names, email or phone are
     ignored; address and description can be cleared with "".
     """
     owner = OwnerService.update_owner(db, owner_id, owner_data)
     if owner is None:
          raise _not_found(owner_id)
     db.commit()
     return owner


@router.delete(
     "/{owner_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Delete owner"
)
def delete_owner(
     owner_id: int,
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     """
     Delete an owner by ID.

     Note: refused while the owner has companies or properties.
     """
     result = OwnerService.delete_owner(db, owner_id)

     if result == DeleteOwnerResult.NOT_FOUND:
          raise _not_found(owner_id)

     if result == DeleteOwnerResult.HAS_DEPENDENTS:
          raise HTTPException(
               status_code=status.HTTP_409_CONFLICT,
               detail="Cannot delete owner with associated companies or properties"
          )

     db.commit()
     return None
