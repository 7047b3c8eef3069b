"""Submission SQLAlchemy model

A submission is one uploaded document under review. File metadata is copied
from the upload event and never changes; the reviewer is fixed at creation.
"""

import uuid

from sqlalchemy import Column, Text, BigInteger, DateTime, Uuid, CheckConstraint, Index

from .base import Base, utcnow


class Submission(Base):
    """Submission model tracking the review lifecycle of an uploaded document."""
    __tablename__ = "submission"
    __table_args__ = (
        Index("ix_submission_uploader_id", "uploader_id"),
        Index("ix_submission_reviewer_id", "reviewer_id"),
        CheckConstraint(
            "status IN ('pending', 'done')",
            name='ck_submission_status'
        ),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    file_name = Column(Text, nullable=False)
    file_path = Column(Text, nullable=False)
    content_type = Column(Text, nullable=False)
    size = Column(BigInteger, nullable=False)
    uploader_id = Column(Text, nullable=False)
    reviewer_id = Column(Text, nullable=True)  # NULL when no reviewer was available
    status = Column(Text, nullable=False, default="pending", server_default="pending")
    notes = Column(Text, nullable=False, default="", server_default="")
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    reviewed_at = Column(DateTime(timezone=True), nullable=True)
