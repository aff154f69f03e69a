# services/__init__.py
from .owner_service import OwnerService, DeleteOwnerResult
from .company_service import CompanyService
from .property_service import PropertyService
from .property_type_service import PropertyTypeService

__all__ = [
     "OwnerService",
     "DeleteOwnerResult",
     "CompanyService",
     "PropertyService",
     "PropertyTypeService",
]
