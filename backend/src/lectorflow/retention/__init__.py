"""Notification retention module.

Read notifications are removed once they exceed the retention window, one
bounded batch per hourly run.
"""

from .schemas import RetentionSettings, SweepResult

# Service and tasks are imported lazily to avoid pulling in the database engine
# Use: from lectorflow.retention.service import RetentionSweeper
# Use: from lectorflow.retention.tasks import retention_cleanup_task

__all__ = [
    "RetentionSettings",
    "SweepResult",
]
