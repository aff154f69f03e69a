# exception_handlers.py
"""
Maps errors raised below the routers to HTTP responses.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from exceptions import PropertyRegistryError

logger = logging.getLogger(__name__)


def setup_exception_handlers(app: FastAPI):

     # Business-rule refusals, e.g. ReferencedEntityNotFoundError
     @app.exception_handler(PropertyRegistryError)
     async def registry_error_handler(request: Request, exc: PropertyRegistryError):
          logger.info("%s %s: %s", request.method, request.url.path, exc.message)
          return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=exc.to_dict())

     # Foreign key / unique violations reported by the store
     @app.exception_handler(IntegrityError)
     async def integrity_error_handler(request: Request, exc: IntegrityError):
          logger.warning("%s %s: integrity error: %s", request.method, request.url.path, exc.orig)
          return JSONResponse(
               status_code=status.HTTP_409_CONFLICT,
               content={"detail": "The request conflicts with existing data"},
          )

     # Catch all unhandled exceptions
     @app.exception_handler(Exception)
     async def generic_exception_handler(request: Request, exc: Exception):
          logger.exception("Unhandled error on %s %s", request.method, request.url.path)
          return JSONResponse(
               status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
               content={"detail": "Internal server error"},
          )
