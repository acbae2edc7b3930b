"""Program completion: derive a program's completed state from its goal set.

A program is complete iff it has at least one goal and every goal is
completed. The timestamp is stamped on completed evaluations and cleared
otherwise; nothing is persisted here.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from core.exceptions import InvalidArgumentError
from models.base import utc_now
from models.program import Program


def is_program_complete(program: Program) -> bool:
    """True iff the goal set is non-empty and every goal is completed."""
    goals = list(program.goals or [])
    return bool(goals) and all(goal.completed for goal in goals)


def evaluate_program_completion(
    program: Program,
    *,
    now: Optional[datetime] = None,
    preserve_completed_on: bool = False,
) -> Program:
    """
    Recompute ``completed`` and ``completed_on`` for program in place and return it.

    Every completed evaluation stamps ``now`` (default: current UTC time),
    unless preserve_completed_on is set and the program was already
    completed with a stamp, in which case the earlier stamp is kept.
    """
    if program is None:
        raise InvalidArgumentError("program must be provided")

    completed = is_program_complete(program)
    if completed:
        keep = preserve_completed_on and program.completed and program.completed_on is not None
        if not keep:
            program.completed_on = now or utc_now()
    else:
        program.completed_on = None
    program.completed = completed
    return program
