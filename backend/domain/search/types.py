"""
Criteria, sorting and paging for entity search.

Paging is optional: a search without it returns every match. When present,
page_number is zero-based and page_size must be positive. Sorting applies
whether or not the search is paged.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, List, Optional, TypeVar

from core.exceptions import InvalidArgumentError
from core.validation import MAX_INTEGER

T = TypeVar("T")

GOAL_SORT_COLUMNS = ("id", "subject", "completed", "created_on")


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass
class Sort:
    column: Optional[str] = None
    order: SortOrder = SortOrder.ASC

    def validate(self, allowed_columns: tuple = ()) -> None:
        if self.column is not None and self.column not in allowed_columns:
            raise InvalidArgumentError(
                f"sort_column must be one of {', '.join(allowed_columns)}, got {self.column!r}"
            )


@dataclass
class Paging:
    page_number: int = 0
    page_size: int = 20

    def validate(self) -> None:
        """Raise InvalidArgumentError for negative pages, non-positive sizes or out-of-range offsets."""
        if self.page_number < 0:
            raise InvalidArgumentError(f"page_number must not be negative, got {self.page_number}")
        if self.page_size <= 0:
            raise InvalidArgumentError(f"page_size must be positive, got {self.page_size}")
        if self.page_size > MAX_INTEGER or self.offset > MAX_INTEGER:
            raise InvalidArgumentError("page_number and page_size are out of range")

    @property
    def offset(self) -> int:
        return self.page_number * self.page_size


@dataclass
class GoalSearchCriteria:
    program_id: Optional[int] = None
    completed: Optional[bool] = None
    # Case-insensitive substring of the goal subject.
    subject: Optional[str] = None


@dataclass
class SearchResult(Generic[T]):
    entities: List[T] = field(default_factory=list)
    total: int = 0
    total_pages: int = 0

    @classmethod
    def of(cls, entities: List[T], total: int, paging: Optional[Paging]) -> "SearchResult[T]":
        if paging is None:
            pages = 1 if total else 0
        else:
            pages = math.ceil(total / paging.page_size)
        return cls(entities=entities, total=total, total_pages=pages)
