"""
Models package — re-exports Base and all models.

Import models here so Alembic's `target_metadata = Base.metadata`
picks up every table automatically.

When adding a new model:
    1. Create `business_api/db/models/<table_name>.py`
    2. Import it here
"""

from business_api.db.models.base import Base
from business_api.db.models.business import Business
from business_api.db.models.photo import Photo
from business_api.db.models.review import Review

__all__ = [
    "Base",
    "Business",
    "Review",
    "Photo",
]
