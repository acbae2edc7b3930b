"""Goal endpoints: get, create, update, delete, search.

Every mutation recomputes the owning program's completion before the
request transaction commits.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import Settings
from core.dependencies import get_app_settings, get_db_session
from core.exceptions import MentorMeError
from domain.search import GoalSearchCriteria, Paging, Sort, SortOrder
from models.goal import Goal
from services.goal_service import GoalService
from services.goal_workflow import create_goal, delete_goal, update_goal

from .errors import to_http_exception
from .schemas import GoalBody, GoalRead, GoalSearchResultRead

router = APIRouter(prefix="/goals", tags=["goals"])


def _goal_from_body(body: GoalBody, goal_id: Optional[int] = None) -> Goal:
    # Transient carrier for the requested state; never added to the session.
    return Goal(
        id=body.id if body.id is not None else goal_id,
        program_id=body.program_id,
        subject=body.subject,
        description=body.description,
        completed=body.completed,
    )


@router.get("/{goal_id}", response_model=GoalRead, summary="Get a goal")
async def get_goal(
    goal_id: int,
    session: AsyncSession = Depends(get_db_session),
):
    try:
        goal = await GoalService(session).get(goal_id)
    except MentorMeError as e:
        raise to_http_exception(e) from e
    return GoalRead.model_validate(goal)


@router.post(
    "",
    response_model=GoalRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a goal",
    description="Creates the goal and recomputes the completion of its program.",
)
async def post_goal(
    body: GoalBody,
    session: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_app_settings),
):
    try:
        goal = await create_goal(
            session,
            _goal_from_body(body),
            preserve_completed_on=settings.preserve_completed_on,
        )
    except MentorMeError as e:
        raise to_http_exception(e) from e
    return GoalRead.model_validate(goal)


@router.put(
    "/{goal_id}",
    response_model=GoalRead,
    summary="Update a goal",
    description="Persists the goal, then recomputes and persists its program's completion.",
)
async def put_goal(
    goal_id: int,
    body: GoalBody,
    session: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_app_settings),
):
    try:
        goal = await update_goal(
            session,
            goal_id,
            _goal_from_body(body, goal_id),
            preserve_completed_on=settings.preserve_completed_on,
        )
    except MentorMeError as e:
        raise to_http_exception(e) from e
    return GoalRead.model_validate(goal)


@router.delete(
    "/{goal_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a goal",
)
async def remove_goal(
    goal_id: int,
    session: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_app_settings),
) -> Response:
    try:
        await delete_goal(
            session, goal_id, preserve_completed_on=settings.preserve_completed_on
        )
    except MentorMeError as e:
        raise to_http_exception(e) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "",
    response_model=GoalSearchResultRead,
    summary="Search goals",
    description=(
        "Filters by program, completion and subject, sorted by sort_column (default id). "
        "Paging applies when page_number or page_size is given."
    ),
)
async def search_goals(
    program_id: Optional[int] = Query(default=None),
    completed: Optional[bool] = Query(default=None),
    subject: Optional[str] = Query(default=None),
    page_number: Optional[int] = Query(default=None),
    page_size: Optional[int] = Query(default=None),
    sort_column: Optional[str] = Query(default=None),
    sort_order: str = Query(default="asc"),
    session: AsyncSession = Depends(get_db_session),
):
    try:
        order = SortOrder(sort_order.lower())
    except ValueError as e:
        raise HTTPException(status_code=400, detail="sort_order must be one of: asc, desc") from e

    paging = None
    if page_number is not None or page_size is not None:
        paging = Paging(
            page_number=page_number if page_number is not None else 0,
            page_size=page_size if page_size is not None else 20,
        )
    criteria = GoalSearchCriteria(program_id=program_id, completed=completed, subject=subject)
    try:
        result = await GoalService(session).search(
            criteria, paging, Sort(column=sort_column, order=order)
        )
    except MentorMeError as e:
        raise to_http_exception(e) from e
    return GoalSearchResultRead(
        entities=[GoalRead.model_validate(g) for g in result.entities],
        total=result.total,
        total_pages=result.total_pages,
    )
