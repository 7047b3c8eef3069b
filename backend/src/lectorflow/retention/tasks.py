"""Celery tasks for notification retention cleanup.

Tasks:
- retention_cleanup_task: hourly job at the top of every hour (see worker.py)
"""

import logging
from typing import Dict, Any

from celery import shared_task

from ..database import SessionLocal
from .service import RetentionSweeper

logger = logging.getLogger(__name__)


@shared_task(name="retention.cleanup_notifications", bind=True)
def retention_cleanup_task(self) -> Dict[str, Any]:
    """Delete read notifications older than the retention window.

    Failures are treated as transient: they are logged and reported in the
    result, and the next scheduled run re-evaluates every eligible
    notification. The task never retries within a run.

    Returns:
        Dict with cleanup statistics:
        - status: "completed" or "failed"
        - deleted_count: Number of notifications deleted
        - cutoff_date / executed_at: ISO timestamps (completed runs only)
        - batch_limit_reached: Whether eligible notifications remain
    """
    logger.info("Starting notification cleanup job")

    db = SessionLocal()
    try:
        sweep = RetentionSweeper(db).sweep()

        result = {
            'status': 'completed',
            'deleted_count': sweep.deleted_count,
            'cutoff_date': sweep.cutoff.isoformat(),
            'executed_at': sweep.executed_at.isoformat(),
            'batch_limit_reached': sweep.batch_limit_reached,
        }

        logger.info("Notification cleanup task completed", extra=result)
        return result

    except Exception as e:
        logger.error(
            "Error during notification cleanup",
            exc_info=True,
            extra={"error": str(e)}
        )

        return {
            'status': 'failed',
            'error': str(e),
            'deleted_count': 0,
        }

    finally:
        db.close()
