from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base

if TYPE_CHECKING:
    from .program import Program


class Mentor(Base):
    """A mentor taking part in one or more programs."""

    __tablename__ = "mentors"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    company_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    linked_in_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    mentor_type: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)

    # Programs outlive neither side; no cascade from the mentor.
    programs: Mapped[List["Program"]] = relationship(back_populates="mentor")
