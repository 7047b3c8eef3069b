"""Upload event webhook

Provides POST /uploads/events, called by the storage layer once per finalized
object. When UPLOAD_EVENT_TOKEN is configured the caller must present it in
the X-Upload-Token header.
"""

import hmac
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header, status
from sqlalchemy.orm import Session

from ..config import get_settings
from ..database import get_db
from ..errors import Unauthenticated
from ..infrastructure.identity import DirectoryIdentityProvider
from ..submissions.service import SubmissionWorkflow
from .intake import UploadIntake
from .schemas import UploadEvent, UploadEventResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/uploads", tags=["Uploads"])


def verify_upload_token(x_upload_token: Optional[str] = Header(None)) -> None:
    """Check the shared webhook secret, if one is configured."""
    expected = get_settings().UPLOAD_EVENT_TOKEN
    if not expected:
        return
    if not x_upload_token or not hmac.compare_digest(x_upload_token, expected):
        raise Unauthenticated("Invalid upload event token")


def get_upload_intake(db: Session = Depends(get_db)) -> UploadIntake:
    """Dependency wiring the intake to the request's database session."""
    return UploadIntake(
        workflow=SubmissionWorkflow(db),
        identity_provider=DirectoryIdentityProvider(db),
    )


@router.post(
    "/events",
    response_model=UploadEventResponse,
    status_code=status.HTTP_202_ACCEPTED,
    dependencies=[Depends(verify_upload_token)],
)
def receive_upload_event(
    event: UploadEvent,
    intake: UploadIntake = Depends(get_upload_intake),
) -> UploadEventResponse:
    """Receive a finalized-upload notification from storage.

    Unrecognized paths are acknowledged with accepted=false so the storage
    layer does not redeliver them.

    Example:
        curl -X POST http://localhost:8000/api/v1/uploads/events \\
             -H "X-Upload-Token: $TOKEN" \\
             -d '{"object_path": "uploads/alice/report.docx",
                  "content_type": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
                  "size": 20480}'
    """
    submission = intake.on_upload(event)
    if submission is None:
        return UploadEventResponse(accepted=False)

    return UploadEventResponse(
        accepted=True,
        submission_id=str(submission.id),
        reviewer_id=submission.reviewer_id,
    )
