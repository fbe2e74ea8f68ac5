# app/utils/errors.py

from typing import Optional

from fastapi import status


class ContactAPIError(Exception):
    """Base error for the contacts API. Carries the HTTP status it maps to."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(ContactAPIError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ContactAPIError):
    status_code = status.HTTP_404_NOT_FOUND


class StoreError(ContactAPIError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
