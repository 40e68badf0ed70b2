"""Shared constants and enums used across the application."""

from enum import StrEnum


class ResourceName(StrEnum):
    """Resource collections exposed by the API (also their URL segment)."""

    BUSINESSES = "businesses"
    REVIEWS = "reviews"
    PHOTOS = "photos"


# Upper bound on rows embedded in a business detail response
MAX_EMBEDDED_ROWS = 100
