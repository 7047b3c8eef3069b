"""Upload intake: turns storage upload events into submissions.

Flow per event:
1. Parse ``uploads/<ownerId>/<fileName>`` from the object path
2. Ask the identity provider for all known identities (best-effort)
3. Pick a reviewer other than the owner
4. Create the submission through the workflow

Events whose path does not match are ignored. Repeated delivery of the same
event is not deduplicated: every delivery creates a new submission.
"""

import logging
import random
import re
from dataclasses import dataclass
from typing import List, Optional

from ..config import get_settings
from ..domain.assignment import assign_reviewer
from ..domain.identity.ports import IdentityProviderPort
from ..errors import Internal
from ..models.submission import Submission
from ..observability.metrics import uploads_received_total
from ..submissions.service import SubmissionWorkflow
from .schemas import UploadEvent, DEFAULT_CONTENT_TYPE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsedUpload:
    """Owner and file name extracted from an object path"""
    owner_id: str
    file_name: str


def _path_pattern(prefix: str) -> re.Pattern:
    return re.compile(rf"{re.escape(prefix)}/([^/]+)/(.+)")


def parse_object_path(object_path: Optional[str], prefix: Optional[str] = None) -> Optional[ParsedUpload]:
    """Extract owner and file name from ``<prefix>/<ownerId>/<fileName>``.

    The owner is a single path segment; the file name is everything after it,
    slashes included. The pattern must match the whole path, so a nested
    prefix such as ``archive/uploads/alice/a.pdf`` is ignored; the earlier
    Cloud Functions handler matched it anywhere in the path.

    Args:
        object_path: Object path from the storage event
        prefix: Leading segment (defaults to UPLOAD_PATH_PREFIX, "uploads")

    Returns:
        ParsedUpload, or None if the path does not match

    Example:
        >>> parse_object_path("uploads/alice/report.docx")
        ParsedUpload(owner_id='alice', file_name='report.docx')
        >>> parse_object_path("avatars/alice.png") is None
        True
    """
    if not object_path:
        return None

    match = _path_pattern(prefix or get_settings().UPLOAD_PATH_PREFIX).fullmatch(object_path)
    if not match:
        return None

    return ParsedUpload(owner_id=match.group(1), file_name=match.group(2))


class UploadIntake:
    """Handles finalized-upload events.

    Args:
        workflow: Submission workflow used to persist submissions
        identity_provider: Source of candidate reviewers
        rng: Random source for reviewer selection
    """

    def __init__(
        self,
        workflow: SubmissionWorkflow,
        identity_provider: IdentityProviderPort,
        rng: Optional[random.Random] = None,
    ):
        self.workflow = workflow
        self.identity_provider = identity_provider
        self.rng = rng or random.Random()

    def on_upload(self, event: UploadEvent) -> Optional[Submission]:
        """Process one upload event.

        Returns:
            The created submission, or None if the event was ignored or could not be stored
        """
        logger.info(f"New file uploaded: {event.object_path}")

        parsed = parse_object_path(event.object_path)
        if parsed is None:
            logger.info(
                "File path format not recognized",
                extra={"file_path": event.object_path},
            )
            uploads_received_total.labels(outcome="ignored").inc()
            return None

        reviewer_id = self._pick_reviewer(parsed.owner_id)

        try:
            outcome = self.workflow.create(
                file_name=parsed.file_name,
                file_path=event.object_path,
                content_type=event.content_type or DEFAULT_CONTENT_TYPE,
                size=event.size,
                uploader_id=parsed.owner_id,
                reviewer_id=reviewer_id,
            )
        except Internal:
            logger.error(
                "Upload event dropped: submission could not be saved",
                extra={"file_path": event.object_path},
            )
            uploads_received_total.labels(outcome="failed").inc()
            return None

        uploads_received_total.labels(outcome="accepted").inc()
        return outcome.value

    def _pick_reviewer(self, owner_id: str) -> Optional[str]:
        """Choose a reviewer for ``owner_id``; lookup failures yield None."""
        try:
            identities: List[str] = list(self.identity_provider.list_identities())
        except Exception:
            logger.error("Error assigning reviewer", exc_info=True, extra={"uploader_id": owner_id})
            return None

        reviewer_id = assign_reviewer(owner_id, identities, self.rng)
        if reviewer_id:
            logger.info(f"Assigned reviewer: {reviewer_id}", extra={"uploader_id": owner_id})
        else:
            logger.info("No other users available as reviewers", extra={"uploader_id": owner_id})
        return reviewer_id
