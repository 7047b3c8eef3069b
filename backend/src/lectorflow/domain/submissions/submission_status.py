"""SubmissionStatus values for the review lifecycle

State flow:
    pending -> done

Only membership in the status set is enforced on update. A done submission
may be moved back to pending by its reviewer (re-opening); callers can use
``is_reopening`` to detect and log that case.
"""

from enum import Enum
from typing import Optional


class SubmissionStatus(str, Enum):
    """Review status of a submission"""
    PENDING = "pending"  # Awaiting review (initial state)
    DONE = "done"        # Review complete


def parse_status(value: Optional[str]) -> Optional[SubmissionStatus]:
    """Convert a raw status string into a SubmissionStatus.

    Returns:
        The matching status, or None if the value is missing or unknown

    Example:
        >>> parse_status("done")
        <SubmissionStatus.DONE: 'done'>
        >>> parse_status("archived") is None
        True
    """
    if value is None:
        return None
    try:
        return SubmissionStatus(value)
    except ValueError:
        return None


def is_reopening(from_status: SubmissionStatus, to_status: SubmissionStatus) -> bool:
    """True when a completed review is moved back to pending."""
    return from_status == SubmissionStatus.DONE and to_status == SubmissionStatus.PENDING
