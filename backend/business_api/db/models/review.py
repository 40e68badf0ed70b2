"""
Review model — one user's rating of one business.

A user may review a given business at most once.  The API checks before
inserting and the unique constraint rejects concurrent duplicates.
"""

from typing import Optional

from sqlalchemy import Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from business_api.db.models.base import Base


class Review(Base):
    __tablename__ = "reviews"
    __table_args__ = (
        UniqueConstraint("userid", "businessid", name="uq_reviews_userid_businessid"),
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )
    userid: Mapped[int] = mapped_column(Integer, nullable=False)
    businessid: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    dollars: Mapped[int] = mapped_column(Integer, nullable=False)  # price level
    stars: Mapped[int] = mapped_column(Integer, nullable=False)
    review: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<Review id={self.id} business={self.businessid} user={self.userid} stars={self.stars}>"
