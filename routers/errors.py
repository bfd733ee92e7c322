# routers/errors.py
"""
Translate store/service errors into HTTP errors.
"""
from fastapi import HTTPException, status

from services.errors import StoreError, NotFoundError, RecordValidationError


def http_error(exc: StoreError) -> HTTPException:
     """NotFoundError -> 404, RecordValidationError -> 422, anything else -> 500."""
     if isinstance(exc, NotFoundError):
          return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message)
     if isinstance(exc, RecordValidationError):
          return HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=exc.message)
     return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=exc.message)
