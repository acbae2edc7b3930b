"""Program endpoints: read a program with its goals, create a program."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from core.dependencies import get_db_session
from core.exceptions import MentorMeError
from models.program import Program
from services.program_service import ProgramService

from .errors import to_http_exception
from .schemas import ProgramBody, ProgramRead

router = APIRouter(prefix="/programs", tags=["programs"])


@router.get("/{program_id}", response_model=ProgramRead, summary="Get a program with its goals")
async def get_program(
    program_id: int,
    session: AsyncSession = Depends(get_db_session),
):
    try:
        program = await ProgramService(session).get(program_id)
    except MentorMeError as e:
        raise to_http_exception(e) from e
    return ProgramRead.model_validate(program)


@router.post(
    "",
    response_model=ProgramRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a program",
    description="Creates an incomplete program with no goals for an existing mentor and mentee.",
)
async def post_program(
    body: ProgramBody,
    session: AsyncSession = Depends(get_db_session),
):
    program = Program(
        mentor_id=body.mentor_id,
        mentee_id=body.mentee_id,
        title=body.title,
        start_date=body.start_date,
        end_date=body.end_date,
    )
    try:
        created = await ProgramService(session).create(program)
    except MentorMeError as e:
        raise to_http_exception(e) from e
    return ProgramRead.model_validate(created)
