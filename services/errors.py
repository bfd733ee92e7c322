# services/errors.py
"""
Errors raised by the store and service layer.

Routers translate NotFoundError into 404 and RecordValidationError into 422.
"""


class StoreError(Exception):
     """Base class for data-access failures."""

     code = "STORE_ERROR"

     def __init__(self, message: str, code: str = None):
          super().__init__(message)
          self.message = message
          if code is not None:
               self.code = code


class NotFoundError(StoreError, LookupError):
     code = "NOT_FOUND"


class RecordValidationError(StoreError, ValueError):
     code = "VALIDATION_ERROR"
