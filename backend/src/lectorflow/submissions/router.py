"""Submission API endpoints

- GET /submissions/mine: submissions uploaded by the caller
- GET /submissions/assigned: submissions the caller must review
- PATCH /submissions/{submission_id}: reviewer sets status and notes
- POST /submissions/update: same update with the id in the body

All endpoints require a bearer token; listings are scoped to the caller.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..auth.dependencies import get_current_identity, require_identity
from .schemas import (
    SubmissionResponse,
    SubmissionStatusUpdate,
    SubmissionUpdateRequest,
    UpdateResult,
)
from .service import SubmissionWorkflow, SubmissionRole

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/submissions", tags=["Submissions"])


@router.get("/mine", response_model=List[SubmissionResponse])
def list_my_submissions(
    identity: str = Depends(require_identity),
    db: Session = Depends(get_db),
):
    """List submissions uploaded by the authenticated caller."""
    return SubmissionWorkflow(db).list_for(identity, identity, SubmissionRole.UPLOADER)


@router.get("/assigned", response_model=List[SubmissionResponse])
def list_assigned_submissions(
    identity: str = Depends(require_identity),
    db: Session = Depends(get_db),
):
    """List submissions assigned to the authenticated caller for review."""
    return SubmissionWorkflow(db).list_for(identity, identity, SubmissionRole.REVIEWER)


@router.patch("/{submission_id}", response_model=UpdateResult)
def update_submission(
    submission_id: str,
    body: SubmissionStatusUpdate,
    identity: Optional[str] = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    """Update the review status of a submission assigned to the caller.

    Raises:
        401 unauthenticated, 400 invalid-argument, 404 not-found,
        403 permission-denied, 500 internal
    """
    outcome = SubmissionWorkflow(db).update(identity, submission_id, body.status, body.notes)
    return outcome.value


@router.post("/update", response_model=UpdateResult)
def update_submission_by_body(
    body: SubmissionUpdateRequest,
    identity: Optional[str] = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    """Update a submission with its id carried in the request body."""
    outcome = SubmissionWorkflow(db).update(identity, body.submission_id, body.status, body.notes)
    return outcome.value
