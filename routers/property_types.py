# routers/property_types.py
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from auth import verify_token
from database import get_session
from schemas.property_type import PropertyTypeResponse
from services.property_type_service import PropertyTypeService

router = APIRouter(prefix="/api/propertytypes", tags=["property types"])


@router.get(
     "",
     response_model=List[PropertyTypeResponse],
     summary="List property types"
)
def list_property_types(
     db: Session = Depends(get_session),
     token: dict = Depends(verify_token)
):
     return PropertyTypeService.list_property_types(db)
