"""Notification API response schemas"""

from datetime import datetime
from typing import Any, Dict, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class NotificationResponse(BaseModel):
    """Notification as returned to its recipient"""
    model_config = ConfigDict(from_attributes=True)

    id: UUID = Field(..., description="Notification UUID")
    recipient_id: str = Field(..., description="Identity the notification is addressed to")
    type: str = Field(..., description="Notification type (document_assigned, document_reviewed)")
    title: str
    message: str
    read: bool = Field(..., description="Whether the recipient has read it")
    data: Dict[str, Any] = Field(default_factory=dict, description="Payload referencing the submission")
    action_url: Optional[str] = Field(None, description="Deep link for the client")
    created_at: datetime
