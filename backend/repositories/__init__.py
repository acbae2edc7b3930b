"""Repository layer for DB access only (CRUD + simple queries).

Repositories operate on the models in backend/models/, accept an
AsyncSession explicitly and never commit. Business rules live in services/.
"""

from .base import BaseRepository
from .goal_repo import GoalRepository
from .mentee_repo import MenteeRepository
from .mentor_repo import MentorRepository
from .program_repo import ProgramRepository

__all__ = [
    "BaseRepository",
    "GoalRepository",
    "MenteeRepository",
    "MentorRepository",
    "ProgramRepository",
]
