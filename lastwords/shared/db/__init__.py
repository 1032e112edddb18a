"""
Database Module

This module provides database connectivity and session management.

Components:
===========
- session.py: Database engine, session factory, probe query and lifecycle functions

Usage in FastAPI:
=================
    from fastapi import Depends
    from lastwords.shared.db import get_read_session, ping

    @app.get("/ready")
    async def ready(db: AsyncSession = Depends(get_read_session)):
        await ping(db)
        return {"status": "ready"}
"""

from lastwords.shared.db.session import (
    get_db,
    get_read_session,
    init_db,
    close_db,
    ping,
    AsyncSessionLocal,
    engine,
    PING_QUERY,
)

__all__ = [
    "get_db",  # FastAPI dependency for getting a database session
    "get_read_session",  # FastAPI dependency for probe-only sessions
    "init_db",  # Check the database on app startup
    "close_db",  # Close database on app shutdown
    "ping",  # Run the SELECT 1 probe
    "AsyncSessionLocal",  # Session factory for manual session creation
    "engine",  # Database engine
    "PING_QUERY",
]
