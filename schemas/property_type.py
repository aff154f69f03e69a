# schemas/property_type.py
from pydantic import ConfigDict

from .base import CamelModel


class PropertyTypeResponse(CamelModel):
     """Schema for property type response."""
     id: int
     type: str

     model_config = ConfigDict(from_attributes=True)
