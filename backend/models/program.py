from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Boolean, Date, DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, utc_now

if TYPE_CHECKING:
    from .goal import Goal
    from .mentee import Mentee
    from .mentor import Mentor


class Program(Base):
    """Mentee-mentor pairing that aggregates goals into a completion state.

    ``completed`` is true iff the goal set is non-empty and every goal is
    completed; ``completed_on`` is set exactly when ``completed`` is true.
    """

    __tablename__ = "mentee_mentor_programs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    mentor_id: Mapped[int] = mapped_column(ForeignKey("mentors.id"), nullable=False)
    mentee_id: Mapped[int] = mapped_column(ForeignKey("mentees.id"), nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    start_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    end_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    completed_on: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    created_on: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now
    )

    mentor: Mapped["Mentor"] = relationship(back_populates="programs")
    mentee: Mapped["Mentee"] = relationship(back_populates="programs")
    goals: Mapped[List["Goal"]] = relationship(
        back_populates="program",
        cascade="all, delete-orphan",
        order_by="Goal.id",
    )

    __table_args__ = (
        Index("ix_program_mentor", "mentor_id"),
        Index("ix_program_mentee", "mentee_id"),
    )
