"""Notification SQLAlchemy model"""

import uuid

from sqlalchemy import Column, Text, Boolean, DateTime, Uuid, Index, false

from .base import Base, PortableJSONB, utcnow


class Notification(Base):
    """Notification informing an identity of a workflow event.

    Rows are append-only from the workflow's point of view: ``read`` is flipped
    by the recipient's client, and rows are removed only by the retention sweep.
    """
    __tablename__ = "notification"
    __table_args__ = (
        Index("ix_notification_recipient_id", "recipient_id"),
        Index("ix_notification_read_created_at", "read", "created_at"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    recipient_id = Column(Text, nullable=False)
    type = Column(Text, nullable=False)
    title = Column(Text, nullable=False)
    message = Column(Text, nullable=False)
    read = Column(Boolean, nullable=False, default=False, server_default=false())
    data = Column(PortableJSONB, nullable=False, default=dict)
    action_url = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
