# models/__init__.py
from .base import Base
from .user import User
from .owner import Owner
from .company import Company
from .property_type import PropertyType, PROPERTY_TYPE_SEED
from .property import Property

__all__ = [
     "Base",
     "User",
     "Owner",
     "Company",
     "PropertyType",
     "PROPERTY_TYPE_SEED",
     "Property",
]
