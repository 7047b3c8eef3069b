"""User SQLAlchemy model (identity directory)"""

from sqlalchemy import Column, Text, DateTime, CheckConstraint

from .base import Base, utcnow


class User(Base):
    """Identity known to the system.

    Rows are provisioned by the identity provider; the review workflow only
    reads them to enumerate candidate reviewers. The primary key is the
    identity string carried as the ``sub`` claim of bearer tokens.
    """
    __tablename__ = "user"

    id = Column(Text, primary_key=True)
    email = Column(Text, nullable=True)
    display_name = Column(Text, nullable=True)
    status = Column(Text, nullable=False, default="ACTIVE", server_default="ACTIVE")
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    __table_args__ = (
        CheckConstraint(
            "status IN ('ACTIVE', 'DISABLED')",
            name='ck_user_status'
        ),
    )
