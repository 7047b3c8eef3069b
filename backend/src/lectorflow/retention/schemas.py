"""Pydantic schemas for notification retention settings and sweep results.

- RetentionSettings: retention window and per-run batch limit
- SweepResult: statistics of one cleanup run
"""

from datetime import datetime

from pydantic import BaseModel, Field

from ..config import get_settings

# Upper bound imposed by the store's batch-write limit
MAX_BATCH_SIZE = 500


class RetentionSettings(BaseModel):
    """Retention policy for read notifications.

    A notification is eligible for deletion once it has been read and was
    created more than ``notification_retention_minutes`` ago.
    """

    notification_retention_minutes: int = Field(
        default=60,
        ge=1,
        le=10080,
        description="Minimum age of a read notification before deletion, in minutes (1-10080)"
    )

    batch_size: int = Field(
        default=MAX_BATCH_SIZE,
        ge=1,
        le=MAX_BATCH_SIZE,
        description="Maximum notifications deleted per cleanup run (1-500)"
    )

    @classmethod
    def from_app_settings(cls) -> "RetentionSettings":
        """Build retention settings from environment configuration."""
        settings = get_settings()
        return cls(
            notification_retention_minutes=settings.NOTIFICATION_RETENTION_MINUTES,
            batch_size=settings.NOTIFICATION_CLEANUP_BATCH_SIZE,
        )


class SweepResult(BaseModel):
    """Statistics from one notification cleanup run."""

    deleted_count: int = Field(
        default=0,
        ge=0,
        description="Number of notifications deleted"
    )

    cutoff: datetime = Field(
        description="Notifications created before this instant were eligible"
    )

    executed_at: datetime = Field(
        description="When the sweep ran"
    )

    batch_limit_reached: bool = Field(
        default=False,
        description="More eligible notifications remain for the next run"
    )
