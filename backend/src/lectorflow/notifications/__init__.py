"""Notifications module - workflow event records and their storage"""

from .types import NotificationType

# Service is imported lazily by callers to keep model imports out of package import
# Use: from lectorflow.notifications.service import NotificationService

__all__ = ["NotificationType"]
