# schemas/property.py
"""
Pydantic schemas for Property API request/response validation.
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional
from pydantic import ConfigDict, Field, field_validator

from utils.dates import to_utc, utc_now
from .base import CamelModel, check_required_text
from .owner import OwnerResponse
from .property_type import PropertyTypeResponse


def _not_in_future(value: Optional[datetime]) -> Optional[datetime]:
     if value is not None and to_utc(value) > utc_now():
          raise ValueError("Date of building cannot be in the future")
     return value


class PropertyCreate(CamelModel):
     """Schema for creating a new property."""
     owner_id: int = Field(..., gt=0, description="Owner ID (must exist)")
     property_type_id: int = Field(..., gt=0, description="Property type ID (must exist)")
     property_length: Decimal = Field(..., gt=0, max_digits=18, decimal_places=2)
     property_cost: Decimal = Field(..., gt=0, max_digits=18, decimal_places=2)
     date_of_building: datetime = Field(..., description="Construction date, stored as UTC")
     description: str = Field(default="", max_length=1000)
     country: str = Field(..., max_length=100)
     city: str = Field(..., max_length=100)
     street: str = Field(default="", max_length=200)
     zip_code: str = Field(default="", max_length=20)

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "ownerId": 1,
                    "propertyTypeId": 1,
                    "propertyLength": 120.5,
                    "propertyCost": 250000.00,
                    "dateOfBuilding": "2010-05-01T00:00:00Z",
                    "description": "Two-storey house",
                    "country": "Canada",
                    "city": "Toronto",
                    "street": "12 King St",
                    "zipCode": "M5H 1A1"
               }
          }
     )

     @field_validator("date_of_building")
     @classmethod
     def _built_in_past(cls, v: datetime) -> datetime:
          return _not_in_future(v)

     @field_validator("country")
     @classmethod
     def _country_required(cls, v: str) -> str:
          return check_required_text(v, "Country")

     @field_validator("city")
     @classmethod
     def _city_required(cls, v: str) -> str:
          return check_required_text(v, "City")


class PropertyUpdate(CamelModel):
     """
     Schema for a partial property update.

     Numeric and date fields apply whenever they are present; country and
     city only when non-empty; description, street and zipCode may be cleared.
     """
     owner_id: Optional[int] = Field(None, gt=0)
     property_type_id: Optional[int] = Field(None, gt=0)
     property_length: Optional[Decimal] = Field(None, gt=0, max_digits=18, decimal_places=2)
     property_cost: Optional[Decimal] = Field(None, gt=0, max_digits=18, decimal_places=2)
     date_of_building: Optional[datetime] = None
     description: Optional[str] = Field(None, max_length=1000)
     country: Optional[str] = Field(None, max_length=100)
     city: Optional[str] = Field(None, max_length=100)
     street: Optional[str] = Field(None, max_length=200)
     zip_code: Optional[str] = Field(None, max_length=20)

     @field_validator("date_of_building")
     @classmethod
     def _built_in_past(cls, v: Optional[datetime]) -> Optional[datetime]:
          return _not_in_future(v)


class PropertyResponse(CamelModel):
     """Schema for property response, with owner and property type."""
     id: int
     owner_id: int
     property_type_id: int
     property_length: Decimal
     property_cost: Decimal
     date_of_building: datetime
     description: str
     country: str
     city: str
     street: str
     zip_code: str
     owner: Optional[OwnerResponse] = None
     property_type: Optional[PropertyTypeResponse] = None

     model_config = ConfigDict(from_attributes=True)

     @field_validator("date_of_building")
     @classmethod
     def _as_utc(cls, v: datetime) -> datetime:
          # Some backends (SQLite) hand timezone-aware columns back naive
          return to_utc(v)
