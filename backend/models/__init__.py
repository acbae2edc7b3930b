"""SQLAlchemy models for the mentorship program schema.

Importing this package registers every mapped class on ``Base.metadata``.
"""

from .base import Base
from .goal import Goal
from .mentee import Mentee
from .mentor import Mentor
from .program import Program

__all__ = [
    "Base",
    "Goal",
    "Mentee",
    "Mentor",
    "Program",
]
