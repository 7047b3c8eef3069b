"""Notification API endpoints

Recipients can list their own notifications. Marking notifications as read is
handled by the client-facing read-receipt component, not by this service.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..auth.dependencies import require_identity
from .schemas import NotificationResponse
from .service import NotificationService

router = APIRouter(prefix="/notifications", tags=["Notifications"])


@router.get("/mine", response_model=List[NotificationResponse])
def list_my_notifications(
    identity: str = Depends(require_identity),
    db: Session = Depends(get_db),
):
    """List notifications addressed to the authenticated caller, newest first."""
    return NotificationService(db).list_for_recipient(identity)
