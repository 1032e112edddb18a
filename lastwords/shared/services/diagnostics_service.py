"""
Diagnostics Service

Database probe and process statistics for the health and diagnostic routes.

Usage:
======
    from lastwords.shared.services.diagnostics_service import DiagnosticsService

    service = DiagnosticsService(session)
    rows = await service.probe_database()   # [{"ok": 1}]
"""

import os
import time
from typing import Any

import psutil
from sqlalchemy.ext.asyncio import AsyncSession

from lastwords.shared.db.session import ping
from lastwords.shared.schemas.health import MemoryUsage


# Recorded at import, i.e. process start for the API server
PROCESS_STARTED_AT = time.monotonic()


class DiagnosticsService:
    """
    Attributes:
        session: Database session used for probes
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def probe_database(self) -> list[dict[str, Any]]:
        """
        Run SELECT 1 AS ok.

        Raises:
            Any driver or connection error, unchanged
        """
        return await ping(self.session)


def uptime_seconds() -> float:
    return time.monotonic() - PROCESS_STARTED_AT


def memory_usage() -> MemoryUsage:
    """Resident and virtual memory of the current process."""
    info = psutil.Process(os.getpid()).memory_info()
    return MemoryUsage(rss=info.rss, vms=info.vms)
