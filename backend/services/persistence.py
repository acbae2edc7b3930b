"""Session helpers translating driver errors into OperationFailedError."""

from __future__ import annotations

import logging
from typing import Awaitable, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import OperationFailedError

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def run_or_fail(operation: Awaitable[T], action: str) -> T:
    """Await a repository call; SQLAlchemyError becomes OperationFailedError."""
    try:
        return await operation
    except SQLAlchemyError as e:
        logger.error("Persistence failure while trying to %s: %s", action, e)
        raise OperationFailedError(f"failed to {action}") from e


async def flush_or_fail(session: AsyncSession, action: str) -> None:
    await run_or_fail(session.flush(), action)
