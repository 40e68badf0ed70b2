"""
Repositories package — data-access layer.

Each repository file handles all DB operations for one resource table
and owns that resource's field schema.  Repositories do NOT handle HTTP
concerns or business rules such as the one-review-per-user check.

Convention:
    - One file per table (businesses.py, reviews.py, photos.py)
    - All functions accept `AsyncSession` as the first argument
    - Write payloads pass through `extract_valid_fields` before SQL
    - Use `flush()` internally; the session commit/rollback is handled
      by the `get_db` dependency in the API layer
"""
