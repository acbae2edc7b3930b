"""Request and response bodies shared by the goal and program routes."""

from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class GoalBody(BaseModel):
    """
    Body for POST /goals and PUT /goals/{id}.

    On PUT, id may be omitted (the path id is used) but must match when given.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "program_id": 1,
                "subject": "Ship a portfolio site",
                "description": "Static site with three case studies",
                "completed": False,
            }
        }
    )

    id: Optional[int] = Field(default=None, description="Goal id; must match the path id on update")
    program_id: int = Field(..., description="Owning mentee-mentor program")
    subject: str = Field(..., max_length=255)
    description: Optional[str] = None
    completed: bool = False


class ProgramBody(BaseModel):
    """Body for POST /programs."""

    mentor_id: int
    mentee_id: int
    title: str = Field(..., max_length=255)
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class ProgramSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    completed: bool
    completed_on: Optional[datetime] = None


class GoalRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    program_id: int
    subject: str
    description: Optional[str] = None
    completed: bool
    created_on: Optional[datetime] = None
    program: Optional[ProgramSummary] = None


class GoalItem(BaseModel):
    """Goal as listed inside a program (no back-reference)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    subject: str
    description: Optional[str] = None
    completed: bool


class ProgramRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    mentor_id: int
    mentee_id: int
    title: str
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    completed: bool
    completed_on: Optional[datetime] = None
    created_on: Optional[datetime] = None
    goals: List[GoalItem] = []


class GoalSearchResultRead(BaseModel):
    entities: List[GoalRead]
    total: int
    total_pages: int
