"""Notification store operations.

Notifications are created by workflow side effects and removed only by the
retention sweep. This module owns both ends of that lifecycle:
- create_notification: append a new unread notification
- list_for_recipient: read-only listing for the recipient
- delete_read_older_than: bounded batch deletion used by the sweep
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple, Union

from sqlalchemy import select, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..models.notification import Notification
from ..models.base import utcnow
from ..observability.metrics import notifications_created_total
from .types import NotificationType

logger = logging.getLogger(__name__)


class NotificationService:
    """Service for creating, listing and purging notifications.

    Store failures are rolled back, logged and re-raised; callers decide
    whether a failed notification is fatal for them.
    """

    def __init__(self, db: Session):
        """Initialize notification service.

        Args:
            db: Database session
        """
        self.db = db

    def create_notification(
        self,
        recipient_id: str,
        type: Union[NotificationType, str],
        title: str,
        message: str,
        data: Optional[Dict[str, Any]] = None,
        action_url: Optional[str] = None,
    ) -> Notification:
        """Create an unread notification for a recipient.

        Args:
            recipient_id: Identity to notify
            type: Notification type (e.g. "document_assigned", "document_reviewed")
            title: Display title
            message: Display message
            data: Structured payload referencing the originating record
            action_url: Optional deep link for the client

        Returns:
            Notification: The persisted notification

        Raises:
            SQLAlchemyError: If the notification could not be stored
        """
        notification = Notification(
            recipient_id=recipient_id,
            type=type.value if isinstance(type, NotificationType) else type,
            title=title,
            message=message,
            read=False,
            data=data or {},
            action_url=action_url,
            created_at=utcnow(),
        )

        try:
            self.db.add(notification)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.error(
                "Error creating notification",
                exc_info=True,
                extra={"recipient_id": recipient_id, "notification_type": notification.type},
            )
            raise

        notifications_created_total.labels(type=notification.type).inc()
        logger.info(
            f"Notification created for user {recipient_id}",
            extra={"recipient_id": recipient_id, "notification_type": notification.type},
        )
        return notification

    def list_for_recipient(self, recipient_id: str) -> List[Notification]:
        """List all notifications addressed to ``recipient_id``, newest first."""
        stmt = (
            select(Notification)
            .where(Notification.recipient_id == recipient_id)
            .order_by(Notification.created_at.desc())
        )
        return list(self.db.scalars(stmt))

    def delete_read_older_than(self, cutoff: datetime, limit: int) -> Tuple[int, bool]:
        """Delete up to ``limit`` read notifications created before ``cutoff``.

        Oldest notifications go first. The deletion is a single statement in a
        single transaction, so either the whole batch is removed or none of it.

        Args:
            cutoff: Only notifications with created_at strictly before this are eligible
            limit: Maximum number of notifications to delete

        Returns:
            Tuple of (number deleted, whether more eligible notifications remain)

        Raises:
            SQLAlchemyError: If the query or deletion fails (transaction rolled back)
        """
        try:
            ids = list(self.db.scalars(
                select(Notification.id)
                .where(Notification.read.is_(True), Notification.created_at < cutoff)
                .order_by(Notification.created_at.asc())
                .limit(limit + 1)
            ))

            has_more = len(ids) > limit
            batch = ids[:limit]
            if not batch:
                return 0, False

            for notification_id in batch:
                logger.debug(f"Queued for deletion: {notification_id}")

            self.db.execute(
                delete(Notification)
                .where(Notification.id.in_(batch))
                .execution_options(synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

        return len(batch), has_more
