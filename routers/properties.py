# routers/properties.py
"""
Property API routes.

Unknown ownerId / propertyTypeId on create or update answer 400 (see exception_handlers).
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from auth import verify_token
from database import get_session
from schemas.property import PropertyCreate, PropertyUpdate, PropertyResponse
from services.property_service import PropertyService

router = APIRouter(prefix="/api/properties", tags=["properties"])


def _not_found(property_id: int) -> HTTPException:
     return HTTPException(
          status_code=status.HTTP_404_NOT_FOUND,
          detail=f"Property with ID {property_id} not found"
     )


@router.get(
     "",
     response_model=List[PropertyResponse],
     summary="List all properties"
)
def list_properties(
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     return PropertyService.list_properties(db)


@router.post(
     "",
     response_model=PropertyResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a new property"
)
def create_property(
     property_data: PropertyCreate,
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     """
     Create a new property.

     - **ownerId** / **propertyTypeId**: must reference existing rows
     - **propertyLength** / **propertyCost**: positive
     - **dateOfBuilding**: not in the future, stored as UTC
     - **country** / **city**: required
     """
     prop = PropertyService.create_property(db, property_data)
     db.commit()
     return prop


@router.get(
     "/{property_id}",
     response_model=PropertyResponse,
     summary="Get property by ID"
)
def get_property(
     property_id: int,
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     prop = PropertyService.get_property(db, property_id)
     if prop is None:
          raise _not_found(property_id)
     return prop


@router.patch(
     "/{property_id}",
     response_model=PropertyResponse,
     summary="Update property"
)
def update_property(
     property_id: int,
     property_data: PropertyUpdate,
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     """
     Update an existing property.

     Only provided fields will be updated. A new ownerId or propertyTypeId
     must reference an existing row.
     """
     prop = PropertyService.update_property(db, property_id, property_data)
     if prop is None:
          raise _not_found(property_id)
     db.commit()
     return prop


@router.delete(
     "/{property_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Delete property"
)
def delete_property(
     property_id: int,
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     if not PropertyService.delete_property(db, property_id):
          raise _not_found(property_id)
     db.commit()
     return None
