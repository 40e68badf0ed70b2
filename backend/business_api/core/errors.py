"""
Domain-specific exception hierarchy for the API.

All API exceptions inherit from BusinessApiError so exception handlers
can render them uniformly as ``{"error": message}`` with the status code
each class carries.  Structured context (resource, id, etc.) goes in
``details`` for logging and is never sent to clients.
"""

from __future__ import annotations

from fastapi import status


class BusinessApiError(Exception):
    """Base exception for all API errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(
        self,
        message: str,
        *,
        resource: str | None = None,
        details: dict | None = None,
    ) -> None:
        self.message = message
        self.resource = resource
        self.details = details or {}
        super().__init__(message)


class InvalidPayloadError(BusinessApiError):
    """Request body failed schema validation."""

    status_code = status.HTTP_400_BAD_REQUEST


class ResourceNotFoundError(BusinessApiError):
    """No row exists for the requested id."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(
        self,
        message: str = "Requested resource does not exist",
        *,
        resource_id: int | None = None,
        **kwargs,
    ) -> None:
        self.resource_id = resource_id
        super().__init__(message, **kwargs)
        if resource_id is not None:
            self.details.setdefault("resource_id", resource_id)


class DuplicateReviewError(BusinessApiError):
    """A user tried to review the same business twice."""

    status_code = status.HTTP_403_FORBIDDEN


class DataAccessError(BusinessApiError):
    """A database operation failed."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
