# routers/__init__.py
from .auth import router as auth_router
from .owners import router as owners_router
from .companies import router as companies_router
from .properties import router as properties_router
from .property_types import router as property_types_router

__all__ = [
     "auth_router",
     "owners_router",
     "companies_router",
     "properties_router",
     "property_types_router",
]
