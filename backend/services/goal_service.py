"""Goal persistence, validation and search.

GoalService knows nothing about program completion; recomputing the owning
program after a mutation is the caller's job (see goal_workflow).
"""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import EntityNotFoundError, InvalidArgumentError
from core.validation import check_config_not_none, check_not_blank, check_not_none, check_positive
from domain.search import GOAL_SORT_COLUMNS, GoalSearchCriteria, Paging, SearchResult, Sort
from models.goal import Goal
from models.program import Program
from repositories.goal_repo import GoalRepository
from services.persistence import flush_or_fail, run_or_fail

logger = logging.getLogger(__name__)


def validate_goal(goal: Goal) -> None:
    """Raise InvalidArgumentError unless goal has a subject and a positive program_id."""
    check_not_none(goal, "goal")
    check_not_blank(goal.subject, "goal.subject")
    check_positive(goal.program_id, "goal.program_id")


def validate_update_arguments(goal_id: int, goal: Goal) -> None:
    """All argument checks for update; performs no I/O."""
    check_positive(goal_id, "id")
    check_not_none(goal, "goal")
    check_positive(goal.id, "goal.id")
    if goal.id != goal_id:
        raise InvalidArgumentError(f"goal.id={goal.id} does not match id={goal_id}")
    validate_goal(goal)


class GoalService:
    """Create, read, update, delete and search goals within one session."""

    def __init__(self, session: AsyncSession) -> None:
        check_config_not_none(session, "session")
        self.session = session
        self._repo = GoalRepository(session)

    async def get(self, goal_id: int) -> Goal:
        check_positive(goal_id, "id")
        goal = await run_or_fail(self._repo.get_by_id(goal_id), f"load goal {goal_id}")
        if goal is None:
            raise EntityNotFoundError("Goal", goal_id)
        return goal

    async def create(self, goal: Goal) -> Goal:
        """Persist a new goal and return it with its program populated."""
        validate_goal(goal)
        program = await self._get_program(goal.program_id)
        entity = Goal(
            subject=goal.subject.strip(),
            description=goal.description,
            completed=bool(goal.completed),
        )
        entity.program = program
        await self._repo.create(entity)
        await flush_or_fail(self.session, "create goal")
        logger.info("Created goal %s in program %s", entity.id, program.id)
        return entity

    async def update(self, goal_id: int, goal: Goal) -> Goal:
        """Persist the new state of goal goal_id and return it with its program populated."""
        validate_update_arguments(goal_id, goal)
        existing = await self.get(goal_id)
        if existing.program_id != goal.program_id:
            existing.program = await self._get_program(goal.program_id)
        existing.subject = goal.subject.strip()
        existing.description = goal.description
        existing.completed = bool(goal.completed)
        await flush_or_fail(self.session, f"update goal {goal_id}")
        logger.info("Updated goal %s (completed=%s)", goal_id, existing.completed)
        return existing

    async def delete(self, goal_id: int) -> None:
        goal = await self.get(goal_id)
        await run_or_fail(self._repo.delete(goal), f"delete goal {goal_id}")
        await flush_or_fail(self.session, f"delete goal {goal_id}")
        logger.info("Deleted goal %s", goal_id)

    async def search(
        self,
        criteria: Optional[GoalSearchCriteria] = None,
        paging: Optional[Paging] = None,
        sort: Optional[Sort] = None,
    ) -> SearchResult[Goal]:
        criteria = criteria or GoalSearchCriteria()
        if criteria.program_id is not None:
            check_positive(criteria.program_id, "criteria.program_id")
        if paging is not None:
            paging.validate()
        if sort is not None:
            sort.validate(GOAL_SORT_COLUMNS)
        entities, total = await run_or_fail(self._repo.search(criteria, paging, sort), "search goals")
        return SearchResult.of(entities, total, paging)

    async def _get_program(self, program_id: int) -> Program:
        program = await run_or_fail(self.session.get(Program, program_id), f"load program {program_id}")
        if program is None:
            raise EntityNotFoundError("Program", program_id)
        return program
