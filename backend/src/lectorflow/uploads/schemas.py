"""Upload event request/response schemas"""

from typing import Optional

from pydantic import BaseModel, Field


DEFAULT_CONTENT_TYPE = "application/octet-stream"


class UploadEvent(BaseModel):
    """Storage notification for a finalized upload"""
    object_path: str = Field(..., description="Object path, e.g. uploads/<owner>/<file>")
    content_type: Optional[str] = Field(None, description="MIME type reported by storage")
    size: int = Field(0, ge=0, description="Object size in bytes")


class UploadEventResponse(BaseModel):
    """Result of processing an upload event"""
    accepted: bool = Field(..., description="Whether a submission was created")
    submission_id: Optional[str] = Field(None, description="UUID of the created submission")
    reviewer_id: Optional[str] = Field(None, description="Assigned reviewer, if any")
