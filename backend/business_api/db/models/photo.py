"""
Photo model — an image of a business uploaded by a user.
"""

from typing import Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from business_api.db.models.base import Base


class Photo(Base):
    __tablename__ = "photos"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )
    userid: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    businessid: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    caption: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<Photo id={self.id} business={self.businessid} user={self.userid}>"
