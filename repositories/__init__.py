# repositories/__init__.py
from .base_repository import BaseRepository
from .owner_repository import OwnerRepository
from .company_repository import CompanyRepository
from .property_repository import PropertyRepository
from .property_type_repository import PropertyTypeRepository
from .user_repository import UserRepository

__all__ = [
     "BaseRepository",
     "OwnerRepository",
     "CompanyRepository",
     "PropertyRepository",
     "PropertyTypeRepository",
     "UserRepository",
]
