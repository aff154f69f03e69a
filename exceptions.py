"""
Application exceptions.

Only failures that callers must tell apart live here. "Not found" is signalled
by services returning None, and the owner dependency conflict by
services.owner_service.DeleteOwnerResult.
"""

from typing import Any, Dict, Optional


class PropertyRegistryError(Exception):
     """Base exception for all property registry errors."""

     def __init__(
          self,
          message: str,
          code: Optional[str] = None,
          details: Optional[Dict[str, Any]] = None,
     ):
          super().__init__(message)
          self.message = message
          self.code = code or self.__class__.__name__.replace("Error", "").lower()
          self.details = details or {}

     def to_dict(self) -> Dict[str, Any]:
          """Convert exception to dictionary for API responses."""
          result = {
               "detail": self.message,
               "code": self.code,
          }
          result.update(self.details)
          return result


class ReferencedEntityNotFoundError(PropertyRegistryError, ValueError):
     """
     Raised when an ownerId / propertyTypeId in a request does not resolve.

     Always raised before anything is written.
     """

     def __init__(self, entity: str, field: str, entity_id: int):
          super().__init__(
               message=f"{entity} with ID {entity_id} not found",
               code="referenced_entity_not_found",
               details={"field": field, "id": entity_id},
          )
          self.entity = entity
          self.field = field
          self.entity_id = entity_id
