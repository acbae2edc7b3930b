from __future__ import annotations

from typing import Optional

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from models.program import Program
from .base import BaseRepository


def select_program_for_completion(program_id: int) -> Select:
    """Program and goals fresh from the database, row-locked.

    FOR NO KEY UPDATE serializes concurrent recomputes of the same program on
    backends with row locks without blocking the FK share lock a goal insert
    or move takes on the program row; SQLite ignores it. populate_existing
    makes the goal collection reflect rows flushed earlier in this
    transaction.
    """
    return (
        select(Program)
        .where(Program.id == program_id)
        .options(selectinload(Program.goals))
        .with_for_update(key_share=True)
        .execution_options(populate_existing=True)
    )


class ProgramRepository(BaseRepository[Program]):
    """Repository for Program entities."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)

    async def create(self, program: Program) -> Program:
        """Create a new program."""
        await self.add(program)
        return program

    async def get_by_id(self, id: int) -> Optional[Program]:
        """Get program by ID with its goal set loaded."""
        stmt = (
            select(Program)
            .where(Program.id == id)
            .options(selectinload(Program.goals))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_for_completion(self, id: int) -> Optional[Program]:
        result = await self.session.execute(select_program_for_completion(id))
        return result.scalar_one_or_none()
