"""Custom exception hierarchy for the employee directory."""

from __future__ import annotations

from typing import Iterable, List

from fastapi import status


class ApplicationError(Exception):
    """Base application error with HTTP semantics."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    code: str = "application_error"
    default_message: str = "Request failed"

    def __init__(self, message: str | None = None, *, status_code: int | None = None, code: str | None = None) -> None:
        message = message or self.default_message
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code
        if code is not None:
            self.code = code
        self.message = message


class ValidationFailedError(ApplicationError):
    """One or more field constraints were violated."""

    code = "validation_failed"
    default_message = "Invalid employee data"

    def __init__(self, messages: Iterable[str]) -> None:
        self.messages: List[str] = [message for message in messages if message]
        super().__init__(", ".join(self.messages) or None)


class DuplicateEmailError(ApplicationError):
    code = "duplicate_email"
    default_message = "Email already exists"


class NotFoundError(ApplicationError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "not_found"
    default_message = "Employee not found"


class InvalidIdentifierError(ApplicationError):
    code = "invalid_identifier"
    default_message = "Invalid employee ID"


class StoreUnavailableError(ApplicationError):
    """The document store could not be reached. Never carries driver detail."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "store_unavailable"
    default_message = "Database unavailable"


__all__ = [
    "ApplicationError",
    "DuplicateEmailError",
    "InvalidIdentifierError",
    "NotFoundError",
    "StoreUnavailableError",
    "ValidationFailedError",
]
