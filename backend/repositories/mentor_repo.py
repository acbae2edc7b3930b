from __future__ import annotations

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from models.mentor import Mentor
from .base import BaseRepository


class MentorRepository(BaseRepository[Mentor]):
    """Repository for Mentor entities."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)

    async def create(self, mentor: Mentor) -> Mentor:
        """Create a new mentor."""
        await self.add(mentor)
        return mentor

    async def get_by_id(self, id: int) -> Optional[Mentor]:
        """Get mentor by ID."""
        return await super().get_by_id(Mentor, id)

