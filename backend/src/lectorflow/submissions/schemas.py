"""Submission API request/response schemas"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class SubmissionResponse(BaseModel):
    """Submission as returned to its uploader or reviewer"""
    model_config = ConfigDict(from_attributes=True)

    id: UUID = Field(..., description="Submission UUID")
    file_name: str = Field(..., description="Original filename")
    file_path: str = Field(..., description="Object path in storage")
    content_type: str = Field(..., description="MIME type reported by storage")
    size: int = Field(..., description="File size in bytes")
    uploader_id: str = Field(..., description="Identity of the uploader")
    reviewer_id: Optional[str] = Field(None, description="Assigned reviewer, if any")
    status: str = Field(..., description="Review status (pending, done)")
    notes: str = Field("", description="Reviewer notes")
    created_at: datetime
    reviewed_at: Optional[datetime] = None


class SubmissionStatusUpdate(BaseModel):
    """Body for PATCH /submissions/{submission_id}.

    Fields are optional here so that missing values are reported as
    invalid-argument errors by the workflow rather than as schema errors.
    """
    status: Optional[str] = Field(None, description="New status (pending, done)")
    notes: Optional[str] = Field(None, description="Review notes")


class SubmissionUpdateRequest(SubmissionStatusUpdate):
    """Body for POST /submissions/update"""
    submission_id: Optional[str] = Field(None, description="Submission to update")


class UpdateResult(BaseModel):
    """Result of a successful update"""
    success: bool = True
