"""Goal mutations followed by program completion propagation.

Each operation is two phases inside the caller's transaction: persist the
goal through GoalService, then reload the owning program (row-locked),
recompute its completion and persist it. A goal moved to another program
recomputes both programs, locking them in ascending id order.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.attributes import set_committed_value

from models.goal import Goal
from models.program import Program
from services.goal_service import GoalService, validate_update_arguments
from services.program_completion import evaluate_program_completion
from services.program_service import ProgramService

logger = logging.getLogger(__name__)


def _attach_program(goal: Goal, program: Program) -> None:
    # Reloading a program with populate_existing resets Goal.program on every
    # goal it loads; set it again without emitting a lazy load.
    set_committed_value(goal, "program", program)


async def propagate_completion(
    session: AsyncSession,
    program_id: int,
    *,
    preserve_completed_on: bool = False,
    now: Optional[datetime] = None,
) -> Program:
    """Recompute and persist the completion state of program program_id."""
    programs = ProgramService(session)
    program = await programs.get_for_completion(program_id)
    was_completed = bool(program.completed)
    evaluate_program_completion(program, now=now, preserve_completed_on=preserve_completed_on)
    await programs.save(program)
    if was_completed != program.completed:
        logger.info(
            "Program %s transitioned %s -> %s",
            program.id,
            "completed" if was_completed else "incomplete",
            "completed" if program.completed else "incomplete",
        )
    return program


async def create_goal(
    session: AsyncSession,
    goal: Goal,
    *,
    preserve_completed_on: bool = False,
) -> Goal:
    created = await GoalService(session).create(goal)
    program = await propagate_completion(
        session, created.program_id, preserve_completed_on=preserve_completed_on
    )
    _attach_program(created, program)
    return created


async def update_goal(
    session: AsyncSession,
    goal_id: int,
    goal: Goal,
    *,
    preserve_completed_on: bool = False,
) -> Goal:
    validate_update_arguments(goal_id, goal)
    goals = GoalService(session)
    previous_program_id = (await goals.get(goal_id)).program_id
    updated = await goals.update(goal_id, goal)
    target_program_id = updated.program_id

    recomputed = {}
    for program_id in sorted({previous_program_id, target_program_id}):
        recomputed[program_id] = await propagate_completion(
            session, program_id, preserve_completed_on=preserve_completed_on
        )
    _attach_program(updated, recomputed[target_program_id])
    return updated


async def delete_goal(
    session: AsyncSession,
    goal_id: int,
    *,
    preserve_completed_on: bool = False,
) -> None:
    goals = GoalService(session)
    program_id = (await goals.get(goal_id)).program_id
    await goals.delete(goal_id)
    await propagate_completion(
        session, program_id, preserve_completed_on=preserve_completed_on
    )
