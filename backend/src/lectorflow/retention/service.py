"""Retention sweep for read notifications.

Deletes notifications that are both read and older than the retention window.
Each run deletes at most one batch; anything left over is picked up by the
next scheduled run, so cleanup is eventually complete rather than complete
per run.

Running the sweep twice in a row deletes nothing the second time unless new
notifications became eligible in between.
"""

import logging
from datetime import datetime, timedelta
from typing import Optional

from sqlalchemy.orm import Session

from ..models.base import utcnow
from ..notifications.service import NotificationService
from ..observability.metrics import notifications_deleted_total, retention_batch_limit_total
from .schemas import RetentionSettings, SweepResult

logger = logging.getLogger(__name__)


class RetentionSweeper:
    """Applies the notification retention policy.

    Args:
        db: Database session
        settings: Retention policy (defaults to environment configuration)
    """

    def __init__(self, db: Session, settings: Optional[RetentionSettings] = None):
        self.db = db
        self.settings = settings or RetentionSettings.from_app_settings()
        self.notifications = NotificationService(db)

    def calculate_cutoff(self, now: datetime) -> datetime:
        """Notifications created strictly before the returned instant are expired."""
        return now - timedelta(minutes=self.settings.notification_retention_minutes)

    def sweep(self, now: Optional[datetime] = None) -> SweepResult:
        """Delete one batch of read notifications older than the retention window.

        Args:
            now: Reference time (defaults to the current UTC time)

        Returns:
            SweepResult: Deletion statistics

        Raises:
            SQLAlchemyError: If the store is unavailable (nothing is deleted)
        """
        now = now or utcnow()
        cutoff = self.calculate_cutoff(now)

        logger.info(f"Cutoff date: {cutoff.isoformat()}")

        deleted_count, has_more = self.notifications.delete_read_older_than(
            cutoff, self.settings.batch_size
        )

        result = SweepResult(
            deleted_count=deleted_count,
            cutoff=cutoff,
            executed_at=utcnow(),
            batch_limit_reached=has_more,
        )

        if deleted_count == 0:
            logger.info("No old read notifications found to delete")
            return result

        notifications_deleted_total.inc(deleted_count)
        logger.info(f"Successfully deleted {deleted_count} old read notifications")
        if has_more:
            retention_batch_limit_total.inc()
            logger.warning(
                "Batch limit reached; remaining notifications deferred to next run",
                extra={"batch_size": self.settings.batch_size},
            )

        logger.info(
            "Cleanup summary",
            extra={
                "deleted_count": result.deleted_count,
                "cutoff_date": result.cutoff.isoformat(),
                "executed_at": result.executed_at.isoformat(),
            },
        )
        return result
