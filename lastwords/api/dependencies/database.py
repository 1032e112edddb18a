"""
Database Dependency

FastAPI dependencies for database sessions.

The API only probes the database, so routes receive read sessions that are
never committed. The unit-of-work session (commit on success, rollback on
error) stays available as lastwords.shared.db.get_db.

Usage:
======
    from lastwords.api.dependencies.database import ReadSession

    @router.get("/ready")
    async def ready(db: ReadSession): ...
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from lastwords.shared.db import get_read_session as _get_read_session


async def get_read_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for probe-only sessions (never committed)."""
    async for session in _get_read_session():
        yield session


# Type alias for cleaner route signatures
ReadSession = Annotated[AsyncSession, Depends(get_read_session)]
