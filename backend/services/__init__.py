"""Services: validation, persistence orchestration and completion logic."""

from .goal_service import GoalService
from .goal_workflow import create_goal, delete_goal, propagate_completion, update_goal
from .program_completion import evaluate_program_completion, is_program_complete
from .program_service import ProgramService

__all__ = [
    "GoalService",
    "ProgramService",
    "create_goal",
    "delete_goal",
    "evaluate_program_completion",
    "is_program_complete",
    "propagate_completion",
    "update_goal",
]
