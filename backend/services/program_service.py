"""Program creation, lookup and persistence."""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import EntityNotFoundError, InvalidArgumentError
from core.validation import check_config_not_none, check_not_blank, check_not_none, check_positive
from models.program import Program
from repositories.mentee_repo import MenteeRepository
from repositories.mentor_repo import MentorRepository
from repositories.program_repo import ProgramRepository
from services.persistence import flush_or_fail, run_or_fail

logger = logging.getLogger(__name__)


class ProgramService:
    def __init__(self, session: AsyncSession) -> None:
        check_config_not_none(session, "session")
        self.session = session
        self._repo = ProgramRepository(session)
        self._mentors = MentorRepository(session)
        self._mentees = MenteeRepository(session)

    async def get(self, program_id: int) -> Program:
        """Program with its goals; raises EntityNotFoundError when missing."""
        check_positive(program_id, "id")
        program = await run_or_fail(self._repo.get_by_id(program_id), f"load program {program_id}")
        if program is None:
            raise EntityNotFoundError("Program", program_id)
        return program

    async def create(self, program: Program) -> Program:
        """Persist a new, incomplete program after checking mentor and mentee exist."""
        check_not_none(program, "program")
        check_not_blank(program.title, "program.title")
        check_positive(program.mentor_id, "program.mentor_id")
        check_positive(program.mentee_id, "program.mentee_id")
        if program.start_date and program.end_date and program.end_date < program.start_date:
            raise InvalidArgumentError("program.end_date must not precede program.start_date")
        mentor = await run_or_fail(self._mentors.get_by_id(program.mentor_id), "load mentor")
        if mentor is None:
            raise EntityNotFoundError("Mentor", program.mentor_id)
        mentee = await run_or_fail(self._mentees.get_by_id(program.mentee_id), "load mentee")
        if mentee is None:
            raise EntityNotFoundError("Mentee", program.mentee_id)

        entity = Program(
            mentor_id=program.mentor_id,
            mentee_id=program.mentee_id,
            title=program.title.strip(),
            start_date=program.start_date,
            end_date=program.end_date,
            completed=False,
            completed_on=None,
            goals=[],
        )
        await self._repo.create(entity)
        await flush_or_fail(self.session, "create program")
        logger.info("Created program %s (mentor=%s, mentee=%s)", entity.id, entity.mentor_id, entity.mentee_id)
        return entity

    async def get_for_completion(self, program_id: int) -> Program:
        """Program and current goal set, locked for the rest of the transaction."""
        check_positive(program_id, "id")
        program = await run_or_fail(
            self._repo.get_for_completion(program_id), f"lock program {program_id}"
        )
        if program is None:
            raise EntityNotFoundError("Program", program_id)
        return program

    async def save(self, program: Program) -> Program:
        check_not_none(program, "program")
        await flush_or_fail(self.session, f"update program {program.id}")
        return program
