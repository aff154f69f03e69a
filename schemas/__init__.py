# schemas/__init__.py
from .owner import (
     OwnerCreate,
     OwnerUpdate,
     OwnerResponse,
)
from .company import (
     CompanyCreate,
     CompanyUpdate,
     CompanyResponse,
)
from .property import (
     PropertyCreate,
     PropertyUpdate,
     PropertyResponse,
)
from .property_type import PropertyTypeResponse
from .auth import (
     RegisterRequest,
     LoginRequest,
     AuthResponse,
     UserResponse,
)

__all__ = [
     "OwnerCreate",
     "OwnerUpdate",
     "OwnerResponse",
     "CompanyCreate",
     "CompanyUpdate",
     "CompanyResponse",
     "PropertyCreate",
     "PropertyUpdate",
     "PropertyResponse",
     "PropertyTypeResponse",
     "RegisterRequest",
     "LoginRequest",
     "AuthResponse",
     "UserResponse",
]
