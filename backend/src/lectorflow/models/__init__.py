"""SQLAlchemy models for the review workflow"""

from .base import Base, PortableJSONB, utcnow
from .user import User
from .submission import Submission
from .notification import Notification

__all__ = [
    "Base",
    "PortableJSONB",
    "utcnow",
    "User",
    "Submission",
    "Notification",
]
