"""Submission workflow service.

Owns the submission lifecycle (pending -> done):
- create: persist a new submission and notify the assigned reviewer
- list_for: identity-scoped listing as uploader or reviewer
- update: reviewer-only status/notes update, notifying the uploader on completion

Notifications are post-commit side effects. They run after the submission
write has committed and their failure never fails the primary operation.
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..config import get_settings
from ..domain.side_effects import WorkflowOutcome, run_best_effort
from ..domain.submissions import SubmissionStatus, parse_status, is_reopening
from ..errors import (
    Unauthenticated,
    InvalidArgument,
    NotFound,
    PermissionDenied,
    Internal,
    WorkflowError,
)
from ..models.base import utcnow
from ..models.submission import Submission
from ..notifications.service import NotificationService
from ..notifications.types import NotificationType
from ..observability.metrics import submissions_updated_total

logger = logging.getLogger(__name__)


class SubmissionRole(str, Enum):
    """Perspective from which a caller lists submissions"""
    UPLOADER = "uploader"
    REVIEWER = "reviewer"


def review_url(submission_id: Any) -> str:
    """Deep link to the review page of a submission."""
    return get_settings().REVIEW_URL_TEMPLATE.format(submission_id=submission_id)


class SubmissionWorkflow:
    """Service enforcing who may read and mutate submissions.

    Args:
        db: Database session
        notifications: Notification store (defaults to one bound to ``db``)
    """

    def __init__(self, db: Session, notifications: Optional[NotificationService] = None):
        self.db = db
        self.notifications = notifications or NotificationService(db)

    def create(
        self,
        file_name: str,
        file_path: str,
        content_type: str,
        size: int,
        uploader_id: str,
        reviewer_id: Optional[str],
    ) -> WorkflowOutcome[Submission]:
        """Persist a new pending submission.

        If a reviewer was assigned, a ``document_assigned`` notification is sent
        to them once the submission is stored.

        Raises:
            Internal: If the submission could not be stored
        """
        submission = Submission(
            file_name=file_name,
            file_path=file_path,
            content_type=content_type,
            size=size,
            uploader_id=uploader_id,
            reviewer_id=reviewer_id,
            status=SubmissionStatus.PENDING.value,
            notes="",
            created_at=utcnow(),
            reviewed_at=None,
        )

        try:
            self.db.add(submission)
            self.db.commit()
            self.db.refresh(submission)
        except SQLAlchemyError:
            self.db.rollback()
            logger.error(
                "Error saving submission metadata",
                exc_info=True,
                extra={"file_path": file_path, "uploader_id": uploader_id},
            )
            raise Internal("Error saving submission")

        logger.info(
            "Submission metadata saved",
            extra={
                "submission_id": str(submission.id),
                "uploader_id": uploader_id,
                "reviewer_id": reviewer_id,
            },
        )

        outcome = WorkflowOutcome(value=submission)
        if reviewer_id:
            outcome.side_effects.append(self._notify_assigned(submission))
        return outcome

    def list_for(
        self,
        caller_id: Optional[str],
        identity: str,
        role: SubmissionRole | str,
    ) -> List[Submission]:
        """List submissions where ``identity`` is the uploader or the reviewer.

        Args:
            caller_id: Identity presented by the caller
            identity: Identity whose submissions are listed (must equal caller_id)
            role: "uploader" or "reviewer"

        Raises:
            Unauthenticated: No caller identity
            PermissionDenied: Caller asked for another identity's submissions
            InvalidArgument: Unknown role
            Internal: Store failure
        """
        if not caller_id:
            raise Unauthenticated("User must be logged in.")

        if caller_id != identity:
            raise PermissionDenied("You can only list your own submissions.")

        try:
            role = SubmissionRole(role)
        except ValueError:
            raise InvalidArgument(f"Invalid role: {role}")

        column = Submission.uploader_id if role == SubmissionRole.UPLOADER else Submission.reviewer_id

        try:
            return list(self.db.scalars(
                select(Submission)
                .where(column == identity)
                .order_by(Submission.created_at.desc())
            ))
        except SQLAlchemyError:
            logger.error(
                "Error fetching submissions",
                exc_info=True,
                extra={"user_id": identity, "role": role.value},
            )
            raise Internal("Error fetching submissions")

    def update(
        self,
        caller_id: Optional[str],
        submission_id: Optional[str | UUID],
        status: Optional[str],
        notes: Optional[str] = None,
    ) -> WorkflowOutcome[Dict[str, bool]]:
        """Set the review status (and notes) of a submission.

        Only the assigned reviewer may update a submission. Moving to ``done``
        notifies the uploader.

        Args:
            caller_id: Identity presented by the caller
            submission_id: Submission to update
            status: New status ("pending" or "done")
            notes: Optional review notes (stored as "" when omitted)

        Returns:
            WorkflowOutcome with value {"success": True}

        Raises:
            Unauthenticated: No caller identity
            InvalidArgument: Missing submission_id/status or unknown status
            NotFound: Submission does not exist
            PermissionDenied: Caller is not the assigned reviewer
            Internal: Unexpected store failure
        """
        if not caller_id:
            raise Unauthenticated("User must be logged in.")

        if not submission_id or not status:
            raise InvalidArgument("Missing submission_id or status")

        new_status = parse_status(status)
        if new_status is None:
            raise InvalidArgument("Invalid status value")

        try:
            submission = self._get_submission(submission_id)

            if submission.reviewer_id != caller_id:
                raise PermissionDenied("You can only update submissions assigned to you.")

            previous_status = parse_status(submission.status)
            if previous_status is not None and is_reopening(previous_status, new_status):
                logger.warning(
                    "Re-opening reviewed submission",
                    extra={"submission_id": str(submission.id), "user_id": caller_id},
                )

            submission.status = new_status.value
            submission.notes = notes or ""
            submission.reviewed_at = utcnow()
            self.db.commit()
        except WorkflowError:
            raise
        except Exception:
            self.db.rollback()
            logger.error(
                "Error updating status",
                exc_info=True,
                extra={"submission_id": str(submission_id), "user_id": caller_id},
            )
            raise Internal("Error updating submission status")

        logger.info(
            f"Submission status set to {new_status.value}",
            extra={"submission_id": str(submission.id), "user_id": caller_id},
        )
        submissions_updated_total.labels(status=new_status.value).inc()

        outcome: WorkflowOutcome[Dict[str, bool]] = WorkflowOutcome(value={"success": True})
        if new_status == SubmissionStatus.DONE:
            outcome.side_effects.append(self._notify_reviewed(submission))
        return outcome

    def _get_submission(self, submission_id: str | UUID) -> Submission:
        """Load a submission by id, raising NotFound for unknown or malformed ids."""
        if not isinstance(submission_id, UUID):
            try:
                submission_id = UUID(str(submission_id))
            except ValueError:
                raise NotFound("Submission not found")

        submission = self.db.get(Submission, submission_id)
        if submission is None:
            raise NotFound("Submission not found")
        return submission

    def _notify_assigned(self, submission: Submission):
        reviewer_id = submission.reviewer_id
        payload = {
            "submission_id": str(submission.id),
            "file_name": submission.file_name,
            "uploader_id": submission.uploader_id,
        }
        outcome = run_best_effort(
            "notify_reviewer",
            lambda: self.notifications.create_notification(
                reviewer_id,
                NotificationType.DOCUMENT_ASSIGNED,
                "New Document Assignment",
                f'You have been assigned to review "{submission.file_name}"',
                payload,
                review_url(submission.id),
            ),
            context={"submission_id": payload["submission_id"], "recipient_id": reviewer_id},
        )
        if outcome.succeeded:
            logger.info(f"Created assignment notification for reviewer {reviewer_id}")
        return outcome

    def _notify_reviewed(self, submission: Submission):
        uploader_id = submission.uploader_id
        payload = {
            "submission_id": str(submission.id),
            "file_name": submission.file_name,
        }
        return run_best_effort(
            "notify_uploader",
            lambda: self.notifications.create_notification(
                uploader_id,
                NotificationType.DOCUMENT_REVIEWED,
                "Document Review Complete",
                f'Your document "{submission.file_name}" has been reviewed',
                payload,
                review_url(submission.id),
            ),
            context={"submission_id": payload["submission_id"], "recipient_id": uploader_id},
        )
