"""One review per user per business.

Revision ID: 002_unique_user_review
Revises: 001_baseline
Create Date: 2026-10-18
"""

from __future__ import annotations

from alembic import op

revision: str = "002_unique_user_review"
down_revision: str | None = "001_baseline"
branch_labels: tuple[str, ...] | None = None
depends_on: tuple[str, ...] | None = None


def upgrade() -> None:
    op.create_unique_constraint(
        "uq_reviews_userid_businessid",
        "reviews",
        ["userid", "businessid"],
    )


def downgrade() -> None:
    op.drop_constraint("uq_reviews_userid_businessid", "reviews", type_="unique")
