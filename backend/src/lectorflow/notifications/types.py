"""Notification type values"""

from enum import Enum


class NotificationType(str, Enum):
    """Kinds of workflow events a notification can describe.

    Stored as TEXT so new kinds can be added without a schema change.
    """
    DOCUMENT_ASSIGNED = "document_assigned"
    DOCUMENT_REVIEWED = "document_reviewed"
