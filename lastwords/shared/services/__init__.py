"""
Services Package

Business logic layer for the application.

Services:
=========
- EnvironmentService: environment inspection for diagnostics and health reports
- DiagnosticsService: database probe; process uptime and memory helpers

Usage:
======
    from lastwords.shared.services import EnvironmentService, DiagnosticsService

    snapshot = EnvironmentService().debug_snapshot()
    rows = await DiagnosticsService(db).probe_database()
"""

from lastwords.shared.services.environment_service import EnvironmentService
from lastwords.shared.services.diagnostics_service import (
    DiagnosticsService,
    memory_usage,
    uptime_seconds,
)

__all__ = [
    "EnvironmentService",
    "DiagnosticsService",
    "memory_usage",
    "uptime_seconds",
]
