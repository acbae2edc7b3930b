from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Declarative base for the mentorship program schema."""

    pass


def utc_now() -> datetime:
    """Timezone-aware current time used for audit columns."""
    return datetime.now(timezone.utc)
