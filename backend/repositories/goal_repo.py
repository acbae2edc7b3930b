from __future__ import annotations

from typing import List, Optional, Tuple

from sqlalchemy import asc, desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from domain.search import GoalSearchCriteria, Paging, Sort, SortOrder
from models.goal import Goal
from .base import BaseRepository


class GoalRepository(BaseRepository[Goal]):
    """Repository for Goal entities."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)

    async def create(self, goal: Goal) -> Goal:
        """Create a new goal."""
        await self.add(goal)
        return goal

    async def get_by_id(self, id: int) -> Optional[Goal]:
        """Get goal by ID with its owning program loaded."""
        sort = sort or Sort()
        column = getattr(Goal, sort.column or "id")
        direction = desc if sort.order == SortOrder.DESC else asc
        stmt = (
            select(Goal)
            .where(*conditions)
            .options(selectinload(Goal.program))
            .order_by(direction(column), Goal.id)
        )
        if paging is not None:
            stmt = stmt.limit(paging.page_size).offset(paging.offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all()), total
