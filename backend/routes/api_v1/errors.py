"""Map service exceptions to HTTP errors."""

from fastapi import HTTPException

from core.exceptions import (
    EntityNotFoundError,
    InvalidArgumentError,
    MentorMeError,
    OperationFailedError,
)


def to_http_exception(error: MentorMeError) -> HTTPException:
    if isinstance(error, InvalidArgumentError):
        return HTTPException(status_code=400, detail=str(error))
    if isinstance(error, EntityNotFoundError):
        return HTTPException(status_code=404, detail=str(error))
    if isinstance(error, OperationFailedError):
        return HTTPException(status_code=500, detail=str(error))
    return HTTPException(status_code=500, detail="Internal error")
