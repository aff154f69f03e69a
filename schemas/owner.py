# schemas/owner.py
"""
Pydantic schemas for Owner API request/response validation.
"""
from typing import Optional
from pydantic import ConfigDict, Field, field_validator

from .base import CamelModel, check_email, check_phone, check_required_text


class OwnerCreate(CamelModel):
     """Schema for creating a new owner."""
     first_name: str = Field(..., max_length=100, description="First name")
     last_name: str = Field(..., max_length=100, description="Last name")
     email: str = Field(..., max_length=200, description="Contact email")
     phone: str = Field(..., max_length=20, description="Contact phone")
     address: str = Field(default="", max_length=500)
     description: str = Field(default="", max_length=1000)
     # Accepted for compatibility, ignored: the flag is derived from companies
     is_company_contact: bool = Field(default=False, description="Ignored on create")

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "firstName": "John",
                    "lastName": "Doe",
                    "email": "john@example.com",
                    "phone": "+1 (555) 010-2000",
                    "address": "12 Main St",
                    "description": "Long-time client"
               }
          }
     )

     @field_validator("first_name")
     @classmethod
     def _first_name_required(cls, v: str) -> str:
          return check_required_text(v, "First name")

     @field_validator("last_name")
     @classmethod
     def _last_name_required(cls, v: str) -> str:
          return check_required_text(v, "Last name")

     @field_validator("email")
     @classmethod
     def _valid_email(cls, v: str) -> str:
          check_required_text(v, "Email")
          return check_email(v)

     @field_validator("phone")
     @classmethod
     def _valid_phone(cls, v: str) -> str:
          check_required_text(v, "Phone")
          return check_phone(v)


class OwnerUpdate(CamelModel):
     """
     Schema for a partial owner update.

     Only fields present in the request are considered. Empty strings for
     name/email/phone count as "not given"; address and description may be
     cleared with an empty string.
     """
     first_name: Optional[str] = Field(None, max_length=100)
     last_name: Optional[str] = Field(None, max_length=100)
     email: Optional[str] = Field(None, max_length=200)
     phone: Optional[str] = Field(None, max_length=20)
     address: Optional[str] = Field(None, max_length=500)
     description: Optional[str] = Field(None, max_length=1000)

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "firstName": "Jane"
               }
          }
     )

     @field_validator("email")
     @classmethod
     def _valid_email(cls, v: Optional[str]) -> Optional[str]:
          return check_email(v)

     @field_validator("phone")
     @classmethod
     def _valid_phone(cls, v: Optional[str]) -> Optional[str]:
          return check_phone(v)


class OwnerResponse(CamelModel):
     """Schema for owner response."""
     id: int
     first_name: str
     last_name: str
     email: str
     phone: str
     address: str
     description: str
     is_company_contact: bool

     model_config = ConfigDict(from_attributes=True)
