# Ensure backend is at sys.path[0] when pytest runs (from repo root or from backend dir)
import sys
from pathlib import Path

_tests_dir = Path(__file__).resolve().parent
_backend = _tests_dir.parent
_str_backend = str(_backend)
if sys.path[0:1] != [_str_backend]:
    sys.path.insert(0, _str_backend)

from typing import Iterable, Optional

import pytest
import pytest_asyncio

from core.database import dispose_database, get_database_manager, init_database
from models.goal import Goal
from models.mentee import Mentee
from models.mentor import Mentor
from models.program import Program
from repositories.mentee_repo import MenteeRepository
from repositories.mentor_repo import MentorRepository


@pytest_asyncio.fixture
async def test_db(tmp_path):
    """Fresh SQLite file database with all tables; disposed after the test."""
    await init_database(f"sqlite+aiosqlite:///{(tmp_path / 'test.db').as_posix()}")
    await get_database_manager().create_schema()
    yield get_database_manager()
    await dispose_database()


@pytest.fixture
def make_program(test_db):
    """Factory: persist mentor, mentee and a program with goals in the given completion states.

    Returns the program id and the goal ids in insertion order.
    """
    counter = {"n": 0}

    async def _make(
        goal_states: Iterable[bool] = (),
        *,
        completed: bool = False,
        completed_on=None,
        title: Optional[str] = None,
    ):
        counter["n"] += 1
        n = counter["n"]
        async with test_db.session() as session:
            mentor = Mentor(first_name="Ada", last_name="Mentor", email=f"mentor{n}@example.com")
            mentee = Mentee(first_name="Grace", last_name="Mentee", email=f"mentee{n}@example.com")
            await MentorRepository(session).create(mentor)
            await MenteeRepository(session).create(mentee)
            await session.flush()
            program = Program(
                mentor_id=mentor.id,
                mentee_id=mentee.id,
                title=title or f"Program {n}",
                completed=completed,
                completed_on=completed_on,
            )
            program.goals = [
                Goal(subject=f"Goal {i}", completed=state)
                for i, state in enumerate(goal_states, start=1)
            ]
            session.add(program)
            await session.flush()
            return program.id, [g.id for g in program.goals]

    return _make
