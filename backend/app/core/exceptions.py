"""Domain errors shared by the services and translated to HTTP by ``app.main``."""

from __future__ import annotations

from dataclasses import dataclass

from fastapi import status


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


class EmployeeDirectoryError(Exception):
    """Base class for errors that carry their own HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class ValidationError(EmployeeDirectoryError):
    """Input failed validation; ``errors`` lists every offending field."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY

    def __init__(self, errors: list[FieldError], detail: str = "Validation failed") -> None:
        super().__init__(detail)
        self.errors = errors


class NotFoundError(EmployeeDirectoryError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(EmployeeDirectoryError):
    status_code = status.HTTP_409_CONFLICT


class AuthenticationError(EmployeeDirectoryError):
    status_code = status.HTTP_401_UNAUTHORIZED


class StoreError(EmployeeDirectoryError):
    """The record store is unreachable or rejected the operation."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
