from __future__ import annotations

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from models.mentee import Mentee
from .base import BaseRepository


class MenteeRepository(BaseRepository[Mentee]):
    """Repository for Mentee entities."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)

    async def create(self, mentee: Mentee) -> Mentee:
        """Create a new mentee."""
        await self.add(mentee)
        return mentee

    async def get_by_id(self, id: int) -> Optional[Mentee]:
        """Get mentee by ID."""
        return await super().get_by_id(Mentee, id)

