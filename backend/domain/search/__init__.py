"""
Search value types: criteria, sorting, paging and paged results.
Plain data; the repositories translate them into queries.
"""

from domain.search.types import (
    GOAL_SORT_COLUMNS,
    GoalSearchCriteria,
    Paging,
    SearchResult,
    Sort,
    SortOrder,
)

__all__ = [
    "GOAL_SORT_COLUMNS",
    "GoalSearchCriteria",
    "Paging",
    "SearchResult",
    "Sort",
    "SortOrder",
]
