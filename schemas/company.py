# schemas/company.py
"""
Pydantic schemas for Company API request/response validation.
"""
from typing import Optional
from pydantic import ConfigDict, Field, field_validator

from .base import CamelModel, check_required_text, check_site_url
from .owner import OwnerResponse


class CompanyCreate(CamelModel):
     """Schema for registering a company to an owner."""
     owner_id: int = Field(..., gt=0, description="Owner ID (must exist)")
     company_name: str = Field(..., max_length=200)
     company_site: str = Field(default="", max_length=500, description="http(s) URL, optional")

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "ownerId": 1,
                    "companyName": "Acme Corp",
                    "companySite": "https://acme.com"
               }
          }
     )

     @field_validator("company_name")
     @classmethod
     def _name_required(cls, v: str) -> str:
          return check_required_text(v, "Company name")

     @field_validator("company_site")
     @classmethod
     def _valid_site(cls, v: str) -> str:
          return check_site_url(v)


class CompanyUpdate(CamelModel):
     """
     Schema for a partial company update.

     An empty companyName is ignored; an empty companySite clears the site.
     """
     company_name: Optional[str] = Field(None, max_length=200)
     company_site: Optional[str] = Field(None, max_length=500)

     @field_validator("company_site")
     @classmethod
     def _valid_site(cls, v: Optional[str]) -> Optional[str]:
          return check_site_url(v)


class CompanyResponse(CamelModel):
     """Schema for company response, with its owner."""
     id: int
     owner_id: int
     company_name: str
     company_site: str
     owner: Optional[OwnerResponse] = None

     model_config = ConfigDict(from_attributes=True)
