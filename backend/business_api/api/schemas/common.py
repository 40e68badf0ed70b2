"""Response schemas shared by every resource."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CreatedResponse(BaseModel):
    """Id of a newly inserted row."""

    id: int


class UpdatedResponse(BaseModel):
    """Id of a replaced row plus a link to fetch it."""

    id: int
    links: dict[str, str] = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    """Body of every non-2xx response."""

    error: str


ERROR_RESPONSES: dict[int | str, dict] = {
    400: {"model": ErrorResponse, "description": "Invalid request body or path"},
    404: {"model": ErrorResponse, "description": "Resource not found"},
    500: {"model": ErrorResponse, "description": "Database failure"},
}
