"""Baseline schema — businesses, reviews and photos.

Revision ID: 001_baseline
Revises: None
Create Date: 2026-10-17
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision: str = "001_baseline"
down_revision: str | None = None
branch_labels: tuple[str, ...] | None = None
depends_on: tuple[str, ...] | None = None


def upgrade() -> None:
    # businesses
    op.create_table(
        "businesses",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("ownerid", sa.Integer, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("address", sa.String(255), nullable=False),
        sa.Column("city", sa.String(255), nullable=False),
        sa.Column("state", sa.String(2), nullable=False),
        sa.Column("zip", sa.String(5), nullable=False),
        sa.Column("phone", sa.String(15), nullable=False),
        sa.Column("category", sa.String(255), nullable=False),
        sa.Column("subcategory", sa.String(255), nullable=False),
        sa.Column("website", sa.String(255)),
        sa.Column("email", sa.String(320)),
    )
    op.create_index("ix_businesses_ownerid", "businesses", ["ownerid"])

    # reviews
    op.create_table(
        "reviews",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("userid", sa.Integer, nullable=False),
        sa.Column("businessid", sa.Integer, nullable=False),
        sa.Column("dollars", sa.Integer, nullable=False),
        sa.Column("stars", sa.Integer, nullable=False),
        sa.Column("review", sa.String(255)),
    )
    op.create_index("ix_reviews_businessid", "reviews", ["businessid"])

    # photos
    op.create_table(
        "photos",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("userid", sa.Integer, nullable=False),
        sa.Column("businessid", sa.Integer, nullable=False),
        sa.Column("caption", sa.String(255)),
    )
    op.create_index("ix_photos_userid", "photos", ["userid"])
    op.create_index("ix_photos_businessid", "photos", ["businessid"])


def downgrade() -> None:
    op.drop_table("photos")
    op.drop_table("reviews")
    op.drop_table("businesses")
